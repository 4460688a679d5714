"""
String forms for parameter values.

Only scalar values have a string form:

    str    -> unchanged
    bool   -> "true" / "false"
    int    -> decimal digits
    float  -> shortest round-trip repr ("1.5", "1.0")
    None   -> "null"

Mappings, lists and any other type raise UnsupportedValueError.
"""
from typing import Any

from ..errors import UnsupportedValueError

NULL_LITERAL = "null"


def stringify_value(key: str, value: Any) -> str:
    """Return the textual form of a scalar parameter value."""
    if isinstance(value, str):
        return value
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if value is None:
        return NULL_LITERAL
    raise UnsupportedValueError(key, value)
