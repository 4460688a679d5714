from typing import Any, Optional


class EndpointError(Exception):
    """Base exception for endpoint resolution errors."""
    pass


class BodyEncodingError(EndpointError):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        msg = f"{message}: {cause}" if cause is not None else message
        super().__init__(msg)
        self.cause = cause


class UnsupportedValueError(EndpointError, TypeError):
    def __init__(self, key: str, value: Any):
        msg = f"Unsupported value for '{key}': {type(value).__name__} has no string form"
        super().__init__(msg)
        self.key = key
        self.value = value


class InvalidBaseURLError(EndpointError, ValueError):
    def __init__(self, url: str, reason: str):
        msg = f"Invalid base URL '{url}': {reason}"
        super().__init__(msg)
        self.url = url
        self.reason = reason
