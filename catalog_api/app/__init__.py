"""
Application package initializer.

This package contains the main entrypoint for the API and its
layers: ``models`` (persistence), ``schemas`` (transfer objects and
the mapper), ``repositories`` (data access) and ``api`` (HTTP
routes).  ``core`` holds configuration, logging and the database
context.
"""
