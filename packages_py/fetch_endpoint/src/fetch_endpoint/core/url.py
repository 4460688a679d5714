"""
Request URL resolution.
"""
from urllib.parse import urlsplit, urlunsplit

from ..encoding.percent import encode_query, quote_path
from ..encoding.values import stringify_value
from ..endpoint import Endpoint


def append_path(base_url: str, path: str) -> str:
    """
    Append path as a component of base_url's path, joined by a single slash.

    The path is percent-escaped; the query and fragment of base_url are kept.
    """
    if not path:
        return base_url
    parts = urlsplit(base_url)
    joined = f"{parts.path.rstrip('/')}/{quote_path(path.lstrip('/'))}"
    return urlunsplit(parts._replace(path=joined))


def build_url_with_query(endpoint: Endpoint, url: str) -> str:
    """
    Put the endpoint's parameters in the query string of url.

    Any query already on url is replaced. Parameters are written in mapping
    order.

    Raises:
        UnsupportedValueError: A parameter value is a mapping, list or other
            type without a string form.
    """
    if not endpoint.parameters:
        return url
    query = encode_query(
        (key, stringify_value(key, value)) for key, value in endpoint.parameters.items()
    )
    return urlunsplit(urlsplit(url)._replace(query=query))
