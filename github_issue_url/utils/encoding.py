"""Percent-encoding helpers for issue URLs.

Query values follow the application/x-www-form-urlencoded serializer used by
browsers: ASCII alphanumerics and ``*-._`` are kept, spaces become ``+`` and
every other UTF-8 byte is written as an upper-case ``%XX`` escape.
"""

from collections.abc import Iterable
from urllib.parse import quote, quote_plus

# Sub-delimiters and the extra pchar characters allowed unescaped in a path
# segment (RFC 3986, section 3.3). "/" is escaped so a name stays one segment.
PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"


def quote_form(value: str) -> str:
    """Encode a single query value.

    Args:
        value: Raw text to encode

    Returns:
        The form-urlencoded representation of ``value``

    Raises:
        UnicodeEncodeError: If ``value`` cannot be encoded as UTF-8
    """
    # quote_plus always keeps "~", the form serializer escapes it
    return quote_plus(value, safe="*").replace("~", "%7E")


def encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    """Serialize ``(name, value)`` pairs into a query string, keeping order."""
    return "&".join(f"{quote_form(name)}={quote_form(value)}" for name, value in pairs)


def quote_path_segment(value: str) -> str:
    """Encode a value used as one path segment, such as an owner name.

    A "/" is escaped as %2F, so "a/b" never spans two segments. Valid GitHub
    owner and repository names contain no such characters and come out
    unchanged.
    """
    return quote(value, safe=PATH_SEGMENT_SAFE)
