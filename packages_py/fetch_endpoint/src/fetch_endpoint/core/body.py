"""
Request body resolution.

Strategies, first match wins:
    1. custom body encoder
    2. multipart, when files are present
    3. custom parameter encoder
    4. JSON
    5. URL-encoded form

Custom encoder failures always raise BodyEncodingError. Failures of the
built-in strategies follow ResolverConfig.encoding_error_policy.
"""
import logging
from typing import Callable, Optional

from ..config import EncodingErrorPolicy, ResolverConfig
from ..encoding.multipart import build_multipart_body
from ..encoding.params import encode_form, encode_json
from ..endpoint import Endpoint
from ..errors import BodyEncodingError
from ..types import ParameterEncoding

logger = logging.getLogger(__name__)

LOG_PREFIX = "[FetchEndpoint:body]"


def _run_custom(name: str, encode: Callable[[], bytes]) -> bytes:
    try:
        return encode()
    except BodyEncodingError:
        raise
    except Exception as e:
        raise BodyEncodingError(f"{name} failed", e) from e


def _run_builtin(
    name: str,
    encode: Callable[[], Optional[bytes]],
    config: ResolverConfig,
) -> Optional[bytes]:
    try:
        return encode()
    except (TypeError, ValueError) as e:
        if config.encoding_error_policy == EncodingErrorPolicy.RAISE:
            raise BodyEncodingError(f"{name} encoding failed", e) from e
        logger.warning(f"{LOG_PREFIX} {name} encoding failed, sending no body: {e}")
        return None


def build_http_body(endpoint: Endpoint, config: ResolverConfig) -> Optional[bytes]:
    """
    Build the request body for a non-GET endpoint.

    Returns:
        The body bytes, or None when there is nothing to send.

    Raises:
        BodyEncodingError: A custom encoder failed, or a built-in encoder
            failed under the RAISE policy.
    """
    if endpoint.body_encoder is not None:
        logger.debug(f"{LOG_PREFIX} Using custom body encoder")
        return _run_custom("body encoder", endpoint.body_encoder)

    if endpoint.files:
        logger.debug(f"{LOG_PREFIX} Building multipart body with {len(endpoint.files)} file(s)")
        return _run_builtin(
            "multipart",
            lambda: build_multipart_body(endpoint.parameters, endpoint.files, endpoint.multipart_boundary),
            config,
        )

    if endpoint.parameter_encoder is not None:
        logger.debug(f"{LOG_PREFIX} Using custom parameter encoder")
        encoder = endpoint.parameter_encoder
        return _run_custom("parameter encoder", lambda: encoder(endpoint.parameters))

    if not endpoint.parameters:
        return None

    if endpoint.parameter_encoding == ParameterEncoding.JSON:
        return _run_builtin("json", lambda: encode_json(endpoint.parameters, config.json_indent), config)

    return _run_builtin("form", lambda: encode_form(endpoint.parameters), config)
