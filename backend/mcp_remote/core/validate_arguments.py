"""Argument Validation — checks tools/call arguments against a tool's inputSchema.

Invariants:
    - Pure: no IO, no logging, same input → same problems list
    - Exhaustive: every declared property is checked, all problems returned
    - Booleans never satisfy "number" or "integer" (bool is an int subclass)
    - Missing arguments object is treated as {}; a non-object is one problem

Design Decisions:
    - Covers the JSON-Schema subset tool descriptors use (type, required, enum)
      rather than pulling in a full JSON-Schema engine
"""

from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_TYPE_CHECKS = {
    "number": (_is_number, "a number"),
    "integer": (_is_integer, "an integer"),
    "string": (lambda v: isinstance(v, str), "a string"),
    "boolean": (lambda v: isinstance(v, bool), "a boolean"),
    "object": (lambda v: isinstance(v, dict), "an object"),
    "array": (lambda v: isinstance(v, list), "an array"),
}


def validate_arguments(schema: dict, arguments: Any) -> list[str]:
    """Return a list of human-readable problems. Empty list means valid."""
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        return ["arguments must be an object"]

    properties: dict = schema.get("properties", {})
    required: list = schema.get("required", [])
    problems: list[str] = []

    for name in required:
        if name not in properties and name not in arguments:
            problems.append(f"missing required argument '{name}'")

    for name, prop in properties.items():
        if name not in arguments:
            if name in required:
                problems.append(f"missing required argument '{name}'")
            continue
        problem = _check_property(name, prop, arguments[name])
        if problem:
            problems.append(problem)
    return problems


def _check_property(name: str, prop: dict, value: Any) -> str | None:
    """Check one argument value against its property schema."""
    expected = prop.get("type")
    if expected in _TYPE_CHECKS:
        check, label = _TYPE_CHECKS[expected]
        if not check(value):
            return f"{name} must be {label}"
    allowed = prop.get("enum")
    if allowed is not None and value not in allowed:
        return f"{name} must be one of: {', '.join(str(a) for a in allowed)}"
    return None
