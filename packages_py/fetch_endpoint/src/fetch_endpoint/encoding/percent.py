"""
Percent-encoding helpers (RFC 3986).
"""
from typing import Iterable, Tuple
from urllib.parse import quote

# Unescaped in form values besides ASCII alphanumerics and "-._~"
FORM_SAFE = "-._~/?"

# Query component characters (RFC 3986 section 3.4) minus the pair delimiters
QUERY_SAFE = "-._~!$'()*,;:@/?"


def percent_escape(value: str) -> str:
    """Escape a form value, see RFC 3986 sections 2.3 and 3.4."""
    return quote(value, safe=FORM_SAFE, errors="replace")


def encode_query(items: Iterable[Tuple[str, str]]) -> str:
    """
    Encode name/value pairs as a query string.

    A literal "+" always ends up as "%2B", so servers never read it as a space.
    """
    query = "&".join(
        f"{quote(name, safe=QUERY_SAFE, errors='replace')}={quote(value, safe=QUERY_SAFE, errors='replace')}"
        for name, value in items
    )
    return query.replace("+", "%2B")


# Path segment characters (RFC 3986 section 3.3) plus the segment separator
PATH_SAFE = "-._~!$&'()*+,;=:@/"


def quote_path(path: str) -> str:
    """Escape a URL path; "/" separates segments and stays as is."""
    return quote(path, safe=PATH_SAFE, errors="replace")
