"""
Core type definitions for fetch-endpoint.
"""
import copy
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

import httpx

# Parameter values: str, int, float, bool, None, nested mappings and lists
ParameterValue = Union[str, int, float, bool, None, Mapping[str, Any], List[Any]]
Parameters = Mapping[str, ParameterValue]


class HttpMethod:
    """
    HTTP method tokens.
    See https://tools.ietf.org/html/rfc7231#section-4.3
    """
    CONNECT = "CONNECT"
    DELETE = "DELETE"
    GET = "GET"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"
    TRACE = "TRACE"


class ParameterEncoding(str, Enum):
    """How parameters are serialized when no custom encoder applies."""
    JSON = "application/json"
    URL = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class HTTPHeader:
    """A single header entry."""
    key: str
    value: str

    @classmethod
    def accept(cls, value: str) -> "HTTPHeader":
        return cls("Accept", value)

    @classmethod
    def cache_control(cls, value: str) -> "HTTPHeader":
        return cls("Cache-Control", value)

    @classmethod
    def content_length(cls, value: str) -> "HTTPHeader":
        return cls("Content-Length", value)

    @classmethod
    def content_type(cls, value: str) -> "HTTPHeader":
        return cls("Content-Type", value)

    @classmethod
    def user_agent(cls, value: str) -> "HTTPHeader":
        return cls("User-Agent", value)


Headers = Tuple[HTTPHeader, ...]


def headers_to_dict(headers: Iterable[HTTPHeader]) -> Dict[str, str]:
    """Collapse headers into a dict; later entries win on key collision."""
    result: Dict[str, str] = {}
    for header in headers:
        result[header.key] = header.value
    return result


@dataclass(frozen=True)
class FileUpload:
    """A file to upload as one part of a multipart body."""
    data: bytes
    filename: str
    mimetype: Optional[str] = None
    # Extra form fields emitted right after the file part
    file_data: Optional[Mapping[str, ParameterValue]] = None

    def __post_init__(self) -> None:
        if self.file_data is not None:
            object.__setattr__(self, "file_data", MappingProxyType(copy.deepcopy(dict(self.file_data))))

    __hash__ = None  # type: ignore[assignment]


FileParameter = Tuple[str, FileUpload]


@runtime_checkable
class BodyEncoder(Protocol):
    """Builds the complete request body. May raise."""
    def __call__(self) -> bytes: ...


@runtime_checkable
class ParameterEncoder(Protocol):
    """Serializes request parameters into a body. May raise."""
    def __call__(self, parameters: Parameters) -> bytes: ...


@dataclass(frozen=True)
class ResolvedRequest:
    """Wire-ready request handed to an HTTP transport."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: Optional[float] = None

    def to_httpx(self) -> httpx.Request:
        """Build an httpx.Request; the timeout travels as a request extension."""
        extensions: Dict[str, Any] = {}
        if self.timeout is not None:
            extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        return httpx.Request(
            method=self.method,
            url=self.url,
            headers=self.headers,
            content=self.body,
            extensions=extensions,
        )
