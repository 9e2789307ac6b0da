"""HTTP clients for the public translate endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import Settings, get_settings
from .errors import DecodeError, RateLimited, RequestFailed, TranslateError
from .parsing import build_url, check_body, parse_translation


logger = logging.getLogger("webtranslate.client")

RATE_LIMIT_STATUSES = {429, 503}


class Translator:
    """Translate single strings over a blocking ``httpx.Client``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client
        self._transport = transport

    def translate(self, text: str, source: str, target: str) -> str:
        """Translate ``text`` from ``source`` (or ``"auto"``) into ``target``."""

        url = _url_for(self.settings, text, source, target)
        logger.debug("Translating %d chars %s -> %s", len(text), source, target)

        close_client = False
        client = self._client
        if client is None:
            client = httpx.Client(
                timeout=httpx.Timeout(self.settings.timeout),
                headers=_headers(self.settings),
                transport=self._transport,
            )
            close_client = True

        try:
            response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Translate request failed: %s", exc)
            raise RequestFailed(str(exc)) from exc
        finally:
            if close_client:
                client.close()

        return _read_response(response)


class AsyncTranslator:
    """Translate single strings over an ``httpx.AsyncClient``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client
        self._transport = transport

    async def translate(self, text: str, source: str, target: str) -> str:
        """Translate ``text`` from ``source`` (or ``"auto"``) into ``target``."""

        url = _url_for(self.settings, text, source, target)
        logger.debug("Translating %d chars %s -> %s", len(text), source, target)

        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout),
                headers=_headers(self.settings),
                transport=self._transport,
            )
            close_client = True

        try:
            response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Translate request failed: %s", exc)
            raise RequestFailed(str(exc)) from exc
        finally:
            if close_client:
                await client.aclose()

        return _read_response(response)


def translate(
    text: str,
    source: str,
    target: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """Translate a single string."""

    return Translator(settings, client=client).translate(text, source, target)


async def translate_async(
    text: str,
    source: str,
    target: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Translate a single string without blocking the event loop."""

    return await AsyncTranslator(settings, client=client).translate(text, source, target)


def _url_for(settings: Settings, text: str, source: str, target: str) -> str:
    try:
        return build_url(
            text,
            source,
            target,
            endpoint=settings.endpoint,
            client=settings.client_name,
        )
    except RequestFailed as exc:
        logger.warning("Cannot build translate request: %s", exc)
        raise


def _headers(settings: Settings) -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def _read_response(response: httpx.Response) -> str:
    """Turn a raw endpoint response into the translated string or raise."""

    status = response.status_code
    if status in RATE_LIMIT_STATUSES:
        logger.warning("Translate endpoint refused request with HTTP %d", status)
        raise RateLimited()
    if not response.is_success:
        logger.warning("Translate endpoint returned HTTP %d", status)
        raise RequestFailed(f"HTTP status {status}", status_code=status)

    try:
        body = response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Translate response is not UTF-8: %s", exc)
        raise DecodeError(str(exc)) from exc

    try:
        check_body(body)
        return parse_translation(body)
    except TranslateError as exc:
        logger.warning("Unusable translate response: %s", exc)
        raise
