"""
Pydantic schema definitions for API payloads.

Each domain (members, times, themes, reservations) defines its own
Pydantic models for request and response bodies.  Schemas are kept
separate from the entities in ``app.models`` to decouple the API
representation from persistence.
"""
