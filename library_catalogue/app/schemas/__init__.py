"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store's records to decouple the API
representation from storage.
"""
