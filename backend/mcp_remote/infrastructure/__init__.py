"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - External calls return explicit results (never raise for remote failures)
    - Logging configured once, from the application lifespan
"""
