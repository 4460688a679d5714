"""Resolution stages: headers, URL, body."""
from .body import build_http_body
from .headers import build_headers, infer_content_type
from .request import RequestBuilder, resolve
from .url import append_path, build_url_with_query

__all__ = [
    "build_http_body",
    "build_headers",
    "infer_content_type",
    "RequestBuilder",
    "resolve",
    "append_path",
    "build_url_with_query",
]
