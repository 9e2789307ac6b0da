"""Request building and response scanning for the translate endpoint.

The endpoint answers with a nested JSON array whose first element holds the
translated segments. Only the first segment is needed, so the body is scanned
for the opening ``[[["`` marker instead of being decoded as JSON.
"""

from __future__ import annotations

from urllib.parse import quote

from .config import DEFAULT_ENDPOINT
from .errors import EmptyResponse, ParseError, RateLimited, RequestFailed


SEGMENT_MARKER = '[[["'
BLOCK_MARKERS = ("<html>", "503")
ERROR_PREFIX_CHARS = 120


def encode_query(text: str) -> str:
    """Percent-encode every UTF-8 byte outside ``A-Za-z0-9-_.~``."""

    try:
        return quote(text, safe="", encoding="utf-8")
    except UnicodeEncodeError as exc:
        raise RequestFailed(f"cannot encode text as UTF-8: {exc}") from exc


def build_url(
    text: str,
    source: str,
    target: str,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    client: str = "gtx",
) -> str:
    """Return the full GET url for one translation."""

    return (
        f"{endpoint}?client={client}&sl={source}&tl={target}"
        f"&dt=t&q={encode_query(text)}"
    )


def check_body(body: str) -> None:
    """Raise if the body is empty or looks like a block page."""

    if not body.strip():
        raise EmptyResponse()
    if body == "[]" or any(marker in body for marker in BLOCK_MARKERS):
        raise RateLimited()


def parse_translation(body: str) -> str:
    """Return the first translated segment found in ``body``."""

    start = body.find(SEGMENT_MARKER)
    if start != -1:
        after = body[start + len(SEGMENT_MARKER):]
        end = after.find('"')
        if end != -1:
            translated = after[:end]
            if not translated.strip():
                raise EmptyResponse()
            return translated
    raise ParseError(f"Unexpected response format: {body[:ERROR_PREFIX_CHARS]}")
