"""
Version 1 of the API.

This subpackage bundles the product catalog endpoints and the service
information endpoint.
"""
