"""Exceptions raised by the translation client."""

from __future__ import annotations

from typing import Optional


class TranslateError(Exception):
    """Base class for every failure of a single translation call."""

    prefix = "Translation failed"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        return f"{self.prefix}: {self.detail}" if self.detail else self.prefix


class RequestFailed(TranslateError):
    """The HTTP request could not be completed or returned an error status."""

    prefix = "Request failed"

    def __init__(self, detail: str = "", *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(detail)


class DecodeError(TranslateError):
    """The response body was not valid UTF-8."""

    prefix = "UTF-8 decode failed"


class ParseError(TranslateError):
    """The response body did not contain a translation segment."""

    prefix = "Parse error"


class EmptyResponse(TranslateError):
    prefix = "Empty response from server"

    def _render(self) -> str:
        return self.prefix


class RateLimited(TranslateError):
    prefix = "Rate limited by Google Translate"

    def _render(self) -> str:
        return self.prefix
