"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence models in ``models`` to
decouple the API representation from storage.  ``product_mapper``
converts between the two.
"""
