"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store to decouple the API
representation from persistence: the store only ever sees names.
"""
