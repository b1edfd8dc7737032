"""API middleware package.

Manifesto:
    Cross-cutting concerns (request ids, timing, error mapping)
    belong in middleware so routers stay focused on database calls.
"""
