"""Pytest fixtures for webtranslate tests."""

from __future__ import annotations

import threading
import time

import httpx
import pytest

from src.webtranslate.config import Settings


TEST_ENDPOINT = "https://translate.test/translate_a/single"


def translation_body(translated: str, original: str = "source") -> str:
    """Build a response body shaped like the real endpoint's."""
    return f'[[["{translated}","{original}",null,null,3,null,null,[[]]]],null,"en"]'


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test-specific settings."""
    return Settings(
        log_level="DEBUG",
        endpoint=TEST_ENDPOINT,
        timeout=1.0,
        user_agent="webtranslate-tests",
        default_workers=4,
    )


@pytest.fixture(scope="function")
def requests_seen() -> list[httpx.Request]:
    """Collect every request the mock transports receive."""
    return []


@pytest.fixture(scope="function")
def upper_transport(requests_seen) -> httpx.MockTransport:
    """Mock endpoint that "translates" by upper-casing the query text.

    Texts starting with ``fail`` get an HTTP 500. Longer texts answer faster
    so completion order differs from input order.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        text = request.url.params["q"]
        time.sleep(max(0.0, 0.03 - 0.002 * len(text)))
        if text.startswith("fail"):
            return httpx.Response(500, text="server error")
        return httpx.Response(200, text=translation_body(text.upper(), text))

    return httpx.MockTransport(handler)


class InFlightCounter:
    """Track the peak number of concurrently running requests."""

    def __init__(self) -> None:
        self.current = 0
        self.peak = 0
        self._lock = threading.Lock()

    def enter(self) -> None:
        with self._lock:
            self.current += 1
            self.peak = max(self.peak, self.current)

    def leave(self) -> None:
        with self._lock:
            self.current -= 1


@pytest.fixture(scope="function")
def in_flight() -> InFlightCounter:
    return InFlightCounter()
