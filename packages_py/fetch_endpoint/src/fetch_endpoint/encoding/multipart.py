"""
multipart/form-data body assembly (RFC 2046 section 5.1, RFC 7578).
"""
from typing import Mapping, Optional, Sequence

from ..types import FileParameter, ParameterValue
from .values import stringify_value

CRLF = b"\r\n"


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


class MultipartWriter:
    """Accumulates form-data parts for one boundary."""

    def __init__(self, boundary: str):
        self._boundary = boundary
        self._opening = f"--{boundary}\r\n".encode("utf-8")
        self._body = bytearray()

    def __len__(self) -> int:
        return len(self._body)

    def write_fields(self, fields: Mapping[str, ParameterValue]) -> None:
        for key, value in fields.items():
            self._body += self._opening
            self._body += f'Content-Disposition: form-data; name="{key}"\r\n\r\n'.encode("utf-8")
            self._body += stringify_value(key, value).encode("utf-8")
            self._body += CRLF

    def write_file(self, name: str, filename: str, data: bytes, mimetype: Optional[str] = None) -> None:
        self._body += self._opening
        self._body += f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'.encode("utf-8")
        if mimetype is not None:
            self._body += f"Content-Type: {mimetype}\r\n".encode("utf-8")
        self._body += CRLF
        self._body += data
        self._body += CRLF

    def finish(self) -> bytes:
        """Return the body, closed with the final boundary if anything was written."""
        if self._body:
            self._body += f"--{self._boundary}--\r\n".encode("utf-8")
        return bytes(self._body)


def build_multipart_body(
    parameters: Mapping[str, ParameterValue],
    files: Sequence[FileParameter],
    boundary: str,
) -> Optional[bytes]:
    """
    Build a multipart body.

    Parameters come first in mapping order, then each file in declared order,
    each file followed by its own extra form fields.

    Returns:
        The body bytes, or None when there are neither parameters nor files.

    Raises:
        UnsupportedValueError: A field value has no string form.
    """
    if not parameters and not files:
        return None

    writer = MultipartWriter(boundary)
    writer.write_fields(parameters)
    for name, upload in files:
        writer.write_file(name, upload.filename, upload.data, upload.mimetype)
        if upload.file_data:
            writer.write_fields(upload.file_data)
    return writer.finish()
