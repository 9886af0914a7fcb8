"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Functions are pure; the generator's only input beyond its arguments is the
      RandomSource it is handed

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
