"""
Fetch Endpoint - request templates compiled into wire-ready requests
"""

__version__ = "0.1.0"

from .config import DEFAULT_MULTIPART_BOUNDARY, DEFAULT_TIMEOUT, EncodingErrorPolicy, ResolverConfig
from .core.request import RequestBuilder, resolve
from .endpoint import Endpoint
from .errors import BodyEncodingError, EndpointError, InvalidBaseURLError, UnsupportedValueError
from .types import (
    BodyEncoder,
    FileUpload,
    HTTPHeader,
    HttpMethod,
    ParameterEncoder,
    ParameterEncoding,
    ResolvedRequest,
    headers_to_dict,
)

__all__ = [
    "DEFAULT_MULTIPART_BOUNDARY", "DEFAULT_TIMEOUT", "EncodingErrorPolicy", "ResolverConfig",
    "RequestBuilder", "resolve",
    "Endpoint",
    "BodyEncodingError", "EndpointError", "InvalidBaseURLError", "UnsupportedValueError",
    "BodyEncoder", "FileUpload", "HTTPHeader", "HttpMethod", "ParameterEncoder",
    "ParameterEncoding", "ResolvedRequest", "headers_to_dict",
]
