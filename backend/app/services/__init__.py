"""Services Layer — history store and the async password service.

Invariants:
    - Services call core; core never calls services
    - In-memory state lives here, never in core/

Design Decisions:
    - One module per concern: history_store (state), password_service (orchestration)
"""
