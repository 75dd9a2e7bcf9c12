"""Services Layer — method dispatch, tool dispatch, tool handlers and registry.

Invariants:
    - Method and tool routing use explicit dict lookups (no auto-discovery)
    - Tool schemas in define_*_tools.py, implementations in handle_*.py
"""
