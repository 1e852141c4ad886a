"""
Pydantic schema definitions for API payloads.

Each resource defines its own models for request and response bodies.
Schemas are separated from the stored JSON records so that sensitive
fields (the contact password hash) never leak into responses.
"""
