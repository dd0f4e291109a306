"""
Pydantic schema definitions for API payloads.

The service has a single entity, the post, whose model doubles as
the request body for create/update and as the response shape.
"""
