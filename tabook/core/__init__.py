"""Core Layer: pure domain logic, no IO, no threads, no GUI.

Invariants:
    - No module in core/ imports from config, infrastructure or bootstrap
    - Every public mutation is synchronous and strongly exception-safe

Design Decisions:
    - Functional core separated from imperative shell (ADR: collaborators own IO)
"""
