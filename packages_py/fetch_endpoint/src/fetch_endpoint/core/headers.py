"""
Request header resolution.
"""
from typing import Dict, Optional

from ..encoding.multipart import multipart_content_type
from ..endpoint import Endpoint
from ..types import HTTPHeader, headers_to_dict


def infer_content_type(endpoint: Endpoint) -> Optional[str]:
    """Content-Type implied by the endpoint's files and parameters."""
    if endpoint.files:
        return multipart_content_type(endpoint.multipart_boundary)
    if endpoint.parameters:
        return endpoint.parameter_encoding.value
    return None


def build_headers(endpoint: Endpoint) -> Dict[str, str]:
    """
    Merge the inferred Content-Type with the endpoint's explicit headers.

    Explicit headers always win.
    """
    content_type = infer_content_type(endpoint)
    inferred = [HTTPHeader.content_type(content_type)] if content_type is not None else []
    return {**headers_to_dict(inferred), **headers_to_dict(endpoint.headers)}
