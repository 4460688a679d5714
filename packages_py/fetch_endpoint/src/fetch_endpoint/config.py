"""
Configuration models and validation for fetch-endpoint.
"""
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, Field

from .errors import InvalidBaseURLError

# Constants
DEFAULT_TIMEOUT = 60.0
DEFAULT_MULTIPART_BOUNDARY = "3n6P01Nt"
DEFAULT_JSON_INDENT = 2


class EncodingErrorPolicy(str, Enum):
    """What happens when a built-in body encoder fails."""
    SUPPRESS = "suppress"
    RAISE = "raise"


class ResolverConfig(BaseModel):
    """Resolver configuration."""
    model_config = {"frozen": True}

    encoding_error_policy: EncodingErrorPolicy = EncodingErrorPolicy.SUPPRESS
    json_indent: int = Field(default=DEFAULT_JSON_INDENT, ge=0)


def validate_base_url(url: str) -> str:
    """
    Check that url is an absolute http(s) URL with a host.

    Returns the URL with trailing slashes removed from its path; query and
    fragment are kept.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidBaseURLError(url, str(e)) from e
    if parsed.scheme not in ("http", "https"):
        raise InvalidBaseURLError(url, "scheme must be http or https")
    if not parsed.host:
        raise InvalidBaseURLError(url, "no host supplied")
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=parts.path.rstrip("/")))


def resolve_config(config: Optional[ResolverConfig]) -> ResolverConfig:
    """Apply defaults."""
    return config if config is not None else ResolverConfig()
