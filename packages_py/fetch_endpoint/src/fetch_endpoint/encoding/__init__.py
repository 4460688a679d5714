"""Wire encodings for parameters and files."""
from .multipart import MultipartWriter, build_multipart_body, multipart_content_type
from .params import encode_form, encode_json
from .percent import encode_query, percent_escape, quote_path
from .values import NULL_LITERAL, stringify_value

__all__ = [
    "MultipartWriter",
    "build_multipart_body",
    "multipart_content_type",
    "encode_form",
    "encode_json",
    "encode_query",
    "percent_escape",
    "quote_path",
    "NULL_LITERAL",
    "stringify_value",
]
