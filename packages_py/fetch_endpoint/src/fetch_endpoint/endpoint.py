"""
Endpoint: an immutable request template.
"""
import copy
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .config import DEFAULT_MULTIPART_BOUNDARY, DEFAULT_TIMEOUT
from .types import (
    BodyEncoder,
    FileParameter,
    HTTPHeader,
    Headers,
    ParameterEncoder,
    ParameterEncoding,
    Parameters,
)

HeadersInput = Union[Mapping[str, str], Iterable[HTTPHeader]]


def _freeze_headers(headers: HeadersInput) -> Headers:
    if isinstance(headers, Mapping):
        return tuple(HTTPHeader(key, value) for key, value in headers.items())
    return tuple(headers)


@dataclass(frozen=True)
class Endpoint:
    """
    A representation of an API endpoint.

    method and path are fixed at construction. Every other field is changed
    through the with_* methods, which return a new Endpoint and leave this one
    untouched, so one instance can serve as a template for many requests.
    """
    # The HTTP method to use in the request
    method: str
    # The path appended to the base URL
    path: str
    # The headers to send in the request
    headers: Headers = ()
    # The parameters to send in the request
    parameters: Parameters = field(default_factory=dict)
    # Files to upload, in wire order
    files: Tuple[FileParameter, ...] = ()
    # Custom body builder; takes precedence over everything else
    body_encoder: Optional[BodyEncoder] = field(default=None, compare=False)
    # Custom parameter serializer; ignored when files are present
    parameter_encoder: Optional[ParameterEncoder] = field(default=None, compare=False)
    # How parameters are encoded when no custom encoder applies
    parameter_encoding: ParameterEncoding = ParameterEncoding.JSON
    # Separator between multipart sections
    multipart_boundary: str = DEFAULT_MULTIPART_BOUNDARY
    # Seconds after which the transport should give up
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.multipart_boundary:
            raise ValueError("multipart_boundary must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        # Store read-only deep copies; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "headers", _freeze_headers(self.headers))
        object.__setattr__(self, "parameters", MappingProxyType(copy.deepcopy(dict(self.parameters))))
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "parameter_encoding", ParameterEncoding(self.parameter_encoding))

    # Parameters are a mappingproxy, so instances cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def with_body(self, encoder: BodyEncoder) -> "Endpoint":
        """Return a copy that builds its body with a custom encoder."""
        return replace(self, body_encoder=encoder)

    def with_headers(self, headers: HeadersInput) -> "Endpoint":
        """Return a copy whose explicit headers are replaced by the given ones."""
        return replace(self, headers=_freeze_headers(headers))

    def with_parameters(self, parameters: Mapping[str, Any]) -> "Endpoint":
        return replace(self, parameters=parameters)

    def with_files(self, files: Sequence[FileParameter]) -> "Endpoint":
        return replace(self, files=tuple(files))

    def with_parameter_encoder(self, encoder: ParameterEncoder) -> "Endpoint":
        return replace(self, parameter_encoder=encoder)

    def with_parameter_encoding(self, encoding: ParameterEncoding) -> "Endpoint":
        return replace(self, parameter_encoding=encoding)

    def with_multipart_boundary(self, boundary: str) -> "Endpoint":
        return replace(self, multipart_boundary=boundary)

    def with_timeout(self, timeout: float) -> "Endpoint":
        return replace(self, timeout=timeout)
