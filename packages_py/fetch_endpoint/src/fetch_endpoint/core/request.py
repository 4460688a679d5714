"""
Endpoint to request resolution.
"""
import logging
from typing import Optional

from ..config import ResolverConfig, resolve_config, validate_base_url
from ..endpoint import Endpoint
from ..types import HttpMethod, ResolvedRequest
from .body import build_http_body
from .headers import build_headers
from .url import append_path, build_url_with_query

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[FetchEndpoint]"
MAX_LOGGED_BODY = 512


def _format_body(body: Optional[bytes]) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary data: {len(body)} bytes>"
    if len(text) > MAX_LOGGED_BODY:
        return text[:MAX_LOGGED_BODY] + "... (truncated)"
    return text


def resolve(
    endpoint: Endpoint,
    base_url: str,
    config: Optional[ResolverConfig] = None,
) -> ResolvedRequest:
    """
    Resolve an endpoint against a base URL.

    GET requests carry their parameters in the query string; every other
    method carries them in the body.

    Args:
        endpoint: The request template.
        base_url: Absolute http(s) URL the endpoint path is appended to.
        config: Resolver options, defaults when omitted.

    Raises:
        InvalidBaseURLError: base_url is not an absolute http(s) URL.
        BodyEncodingError: The body could not be encoded.
        UnsupportedValueError: A query parameter has no string form.
    """
    config = resolve_config(config)
    url = append_path(validate_base_url(base_url), endpoint.path)
    headers = build_headers(endpoint)

    # GET parameters always go in the query, never in a body
    if endpoint.method == HttpMethod.GET:
        url = build_url_with_query(endpoint, url)
        body = None
    else:
        body = build_http_body(endpoint, config)

    logger.debug(f"{LOG_PREFIX} Resolved: {endpoint.method} {url} body={_format_body(body)}")

    return ResolvedRequest(
        method=endpoint.method,
        url=url,
        headers=headers,
        body=body,
        timeout=endpoint.timeout,
    )


class RequestBuilder:
    """Resolves endpoints against one base URL."""

    def __init__(self, base_url: str, config: Optional[ResolverConfig] = None):
        self._base_url = validate_base_url(base_url)
        self._config = resolve_config(config)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def build(self, endpoint: Endpoint) -> ResolvedRequest:
        """Resolve an endpoint into a wire-ready request."""
        return resolve(endpoint, self._base_url, self._config)
