# SPDX-License-Identifier: AGPL-3.0-only

"""
Exception types shared by the generation pipeline and the HTTP layer.
"""
from typing import List, Optional


class PaperPalError(Exception):
    """Base exception for all PaperPal errors."""

    pass


class MissingField(PaperPalError):
    """Required request fields are absent or empty."""

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {' and '.join(self.fields)}")


class TransportError(PaperPalError):
    """The completion endpoint could not be reached (timeout, DNS, reset)."""

    pass


class UpstreamError(PaperPalError):
    """The completion endpoint answered with a non-2xx status or an unusable body."""

    def __init__(self, status_code: int, body: str = "", reason: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        message = reason or f"Upstream API error: {status_code}"
        super().__init__(f"{message} - {body[:200]}" if body else message)


class NoJsonFound(PaperPalError):
    """Model output contains no balanced JSON object."""

    pass


class MalformedJson(PaperPalError):
    """Extracted payload is not valid JSON or does not match the expected shape."""

    pass


class PdfExtractionError(PaperPalError):
    """PDF could not be read."""

    pass
