"""Infrastructure Layer — cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Only structured logging lives here; there are no external service clients
"""
