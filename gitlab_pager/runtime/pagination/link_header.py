"""``Link`` response header parsing for keyset pagination.

The server sends one entry per header line, for example::

    Link: <https://gitlab.example.com/api/v4/projects?id_after=42&per_page=100>; rel="next"

Each line is parsed on its own. Lines are never joined on ``,`` and split
again, since cursor URLs may themselves contain commas.
"""

from __future__ import annotations

from collections.abc import Iterable

from yarl import URL

from ...core.exceptions import (
    InvalidHeaderEncoding,
    MalformedUrl,
    MissingBrackets,
    MissingParamValue,
)
from ...models import LinkEntry

LINK_HEADER = "Link"
NEXT_REL = "next"


def parse_link_header(value: str | bytes) -> LinkEntry:
    """Parse one ``Link`` header line.

    Args:
        value: Raw header value, ``<url>; key=value; key="quoted value"``

    Returns:
        LinkEntry with the bracketed URL and the parameters in order

    Raises:
        InvalidHeaderEncoding: The raw bytes are not a visible ASCII string
        MissingBrackets: The first segment is not ``<...>``
        MissingParamValue: A parameter segment has no ``=``
    """
    text = _header_text(value)
    url_part, *param_parts = text.split(";")

    url_part = url_part.strip()
    if not (url_part.startswith("<") and url_part.endswith(">")) or len(url_part) < 2:
        raise MissingBrackets("missing brackets around url", header=text)
    url = url_part[1:-1]

    params: list[tuple[str, str]] = []
    for part in param_parts:
        key, sep, param_value = part.strip().partition("=")
        if not sep:
            raise MissingParamValue(f"missing value for parameter {key.strip()!r}", header=text)
        if len(param_value) >= 2 and param_value.startswith('"') and param_value.endswith('"'):
            param_value = param_value[1:-1]
        params.append((key.strip(), param_value))

    return LinkEntry(url=url, params=tuple(params))


def select_next_link(entries: Iterable[LinkEntry]) -> LinkEntry | None:
    """Return the first entry carrying ``rel=next``."""
    for entry in entries:
        if entry.has_param("rel", NEXT_REL):
            return entry
    return None


def parse_url(text: str) -> URL:
    """Parse a server-supplied URL, which must be absolute.

    Raises:
        MalformedUrl: The text is not an absolute URL with a host
    """
    try:
        url = URL(text, encoded=True)
    except (TypeError, ValueError) as e:
        raise MalformedUrl(f"malformed url {text!r}: {e}", header=text) from e
    if not url.is_absolute() or not url.scheme or not url.host:
        raise MalformedUrl(f"malformed url {text!r}: not an absolute url", header=text)
    return url


def next_page_from_headers(values: Iterable[str | bytes]) -> URL | None:
    """Find the next-page URL among all ``Link`` header lines of a response.

    Every line is parsed before the ``next`` relation is looked up, so a
    malformed line fails the page even when another line is usable.

    Args:
        values: Raw values of every ``Link`` header line, in response order

    Returns:
        The ``rel=next`` URL, or None when the server sent no next page
    """
    entries = [parse_link_header(value) for value in values]
    entry = select_next_link(entries)
    if entry is None:
        return None
    return parse_url(entry.url)


def _header_text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        try:
            text = value.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidHeaderEncoding("header value is not ascii", header=value) from e
    else:
        text = value
    if any((ord(c) < 0x20 and c != "\t") or ord(c) >= 0x7F for c in text):
        raise InvalidHeaderEncoding("header value has non-visible characters", header=value)
    return text
