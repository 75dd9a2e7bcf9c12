"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate outcomes to HTTP; dispatch logic lives in services/
"""
