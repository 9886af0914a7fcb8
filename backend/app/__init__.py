"""PassForge Application Package — password generator and strength scorer.

Invariants:
    - Package root contains no executable code beyond the version constant

Design Decisions:
    - Near-empty __init__.py: explicit imports only, no star exports
"""

__version__ = "1.0.0"
