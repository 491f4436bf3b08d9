"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store so that the API representation
(camelCase keys, optional fields) stays independent of how records are
held in memory.
"""
