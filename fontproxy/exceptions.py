"""
Exception hierarchy for the font-face CSS proxy.

Core parsing errors propagate to the HTTP layer, which decides how each one
is represented to the client.

License: MIT
"""

from typing import Optional


class FontProxyError(RuntimeError):
    """Base exception for proxy failures."""


class MalformedCssError(FontProxyError):
    """Raised when an @font-face block lacks a required property."""

    def __init__(self, field: str, block: str = ""):
        self.field = field
        self.block = block
        message = f"Missing required property '{field}' in @font-face block"
        if block:
            message = f"{message}: {block[:80]!r}"
        super().__init__(message)


class UnicodeRangeError(FontProxyError, ValueError):
    """Raised when a unicode-range token is not valid hexadecimal."""


class UpstreamError(FontProxyError):
    """Raised when the upstream font API does not answer with HTTP 200."""

    def __init__(
        self,
        status_code: int,
        body: bytes = b"",
        content_type: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        super().__init__(f"Upstream responded with status {status_code}")


class MissingParameterError(FontProxyError):
    """Raised when a request carries no family parameter."""
