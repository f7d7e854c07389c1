"""Infrastructure Layer: cross-cutting concerns (logging) for collaborators.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
