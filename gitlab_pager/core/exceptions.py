"""Custom exception hierarchy.

Every failure of a paginated query is fatal: the error propagates to the
caller and whatever was accumulated so far is dropped. The hierarchy lets a
caller tell a server-side failure (``HttpStatusError``) from a malformed
response (``JsonDecodeError``, ``TypeMismatchError``) and from a protocol
failure (``LinkHeaderError``).
"""

from __future__ import annotations

import json
from typing import Any

_EXCERPT_LENGTH = 200


class PagerError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(PagerError):
    """Client configuration is missing or invalid."""

    pass


class TransportError(PagerError):
    """Underlying request or connection failure."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class HttpStatusError(PagerError):
    """Server answered with a non-2xx status.

    ``payload`` holds the decoded JSON error body (or ``None`` when the body
    was not JSON). ``message`` is the most specific text available: the
    ``message`` key, then the ``error`` key, then the payload itself.
    """

    def __init__(self, message: str, status_code: int, payload: Any = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @classmethod
    def from_payload(cls, status_code: int, payload: Any) -> HttpStatusError:
        """Build the error from a decoded server error body."""
        if isinstance(payload, dict):
            if "message" in payload:
                return cls(_as_text(payload["message"]), status_code, payload)
            if "error" in payload:
                return cls(_as_text(payload["error"]), status_code, payload)
        return cls(f"unrecognized error: {_as_text(payload)}", status_code, payload)

    @classmethod
    def from_body(cls, status_code: int, body: bytes) -> HttpStatusError:
        """Build the error from a raw body that is not JSON."""
        text = body.decode("utf-8", errors="replace").strip()
        return cls(text or "empty response body", status_code)


class JsonDecodeError(PagerError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.excerpt = body[:_EXCERPT_LENGTH].decode("utf-8", errors="replace")


class TypeMismatchError(PagerError):
    """Body is valid JSON but does not match the expected item shape."""

    def __init__(self, message: str, type_name: str, errors: list[Any] | None = None) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.errors = errors or []


class LinkHeaderError(PagerError):
    """A ``Link`` response header could not be used."""

    def __init__(self, message: str, header: str | bytes | None = None) -> None:
        super().__init__(message)
        self.header = header


class InvalidHeaderEncoding(LinkHeaderError):
    """Header value is not representable as text."""

    pass


class MissingBrackets(LinkHeaderError):
    """The URL of a ``Link`` entry is not wrapped in ``<>``."""

    pass


class MissingParamValue(LinkHeaderError):
    """A ``Link`` parameter has no ``=value`` part."""

    pass


class MalformedUrl(LinkHeaderError):
    """The ``next`` URL does not parse as an absolute URL."""

    pass


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)
