"""Core Layer — pure protocol logic, no IO, no HTTP, no logging side effects.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (dispatch, transport)
"""
