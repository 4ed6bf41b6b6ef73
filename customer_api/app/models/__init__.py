"""
In‑memory domain models.

These are the records owned by the service layer.  They are kept
separate from the pydantic schemas in ``schemas`` so the API
representation can change without touching storage.
"""
