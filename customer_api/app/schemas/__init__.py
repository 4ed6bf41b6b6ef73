"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory models to decouple the API
representation (camelCase JSON) from storage.
"""
