"""
Default parameter serializers.
"""
import json
from typing import Any, Mapping

from .percent import percent_escape
from .values import stringify_value


def encode_json(parameters: Mapping[str, Any], indent: int = 2) -> bytes:
    """
    Serialize parameters as pretty-printed JSON with sorted keys.

    Raises:
        TypeError: A value is not JSON serializable.
        ValueError: A float is NaN or infinite.
    """
    text = json.dumps(
        dict(parameters),
        indent=indent,
        sort_keys=True,
        separators=(",", ": "),
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")


def encode_form(parameters: Mapping[str, Any]) -> bytes:
    """
    Serialize parameters as key=value pairs joined by "&".

    Values are percent-escaped; keys are written as given.

    Raises:
        UnsupportedValueError: A value has no string form.
    """
    body = "&".join(
        f"{key}={percent_escape(stringify_value(key, value))}"
        for key, value in parameters.items()
    )
    return body.encode("utf-8", errors="replace")
