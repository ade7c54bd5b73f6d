"""
Data access layer.

``gateway`` hides the MongoDB collection behind a small protocol and
``product_repository`` builds the DTO-level CRUD operations used by
the API handlers on top of it.
"""
