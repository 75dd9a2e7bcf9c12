"""Remote MCP Server — JSON-RPC tool dispatcher over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
