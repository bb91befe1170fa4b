"""
Page fetcher: the collaborator that turns a URL into a FetchResult.

:class:`PageFetcher` is the contract the crawler depends on.
:class:`AiohttpPageFetcher` implements it over HTTP with retry/backoff and a
per-request timeout.
"""
from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Optional, Protocol, Sequence, Type

from aiohttp import (
    ClientConnectionError,
    ClientError,
    ClientPayloadError,
    ClientSession,
    ClientTimeout,
)

from word_scout.config import SearchConfig
from word_scout.crawler.models import FetchResult, HttpError, NetworkError, NonHtml, Ok
from word_scout.logger import get_logger
from word_scout.parser.html_parser import parse_html

__all__ = ("PageFetcher", "AiohttpPageFetcher")

_HTML_TYPES = ("text/html", "application/xhtml+xml")
_MAX_BACKOFF = 60.0


class PageFetcher(Protocol):
    """Fetches one URL. Never raises: every failure is a result variant."""

    async def fetch(self, url: str) -> FetchResult:
        ...


class _RetryableStatus(ClientError):
    def __init__(self, status: int) -> None:
        super().__init__(f"retryable status {status}")
        self.status = status


_RETRYABLE_ERRORS = (_RetryableStatus, ClientConnectionError, ClientPayloadError)


class AiohttpPageFetcher:
    """HTTP fetcher backed by one aiohttp session; use as an async context manager."""
    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, config: SearchConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self.logger = get_logger("fetcher")

    async def __aenter__(self) -> AiohttpPageFetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> FetchResult:
        if not self.session:
            raise RuntimeError("Session not initialized")
        attempts = 0
        while True:
            try:
                return await self._get(self.session, url)
            except asyncio.TimeoutError:
                # no retry on timeout
                return NetworkError("timeout")
            except _RETRYABLE_ERRORS as e:
                attempts += 1
                if attempts > self.config.retry_times:
                    self.logger.debug("Giving up on %s after %d attempts: %s", url, attempts, e)
                    if isinstance(e, _RetryableStatus):
                        return HttpError(e.status)
                    return NetworkError(str(e) or type(e).__name__)
                backoff = min(self.config.retry_backoff * 2 ** (attempts - 1), _MAX_BACKOFF)
                self.logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, url, backoff
                )
                await asyncio.sleep(backoff)
            except ClientError as e:
                # invalid URL, too many redirects, bad response: retrying cannot help
                self.logger.debug("Not retrying %s: %r", url, e)
                return NetworkError(str(e) or type(e).__name__)

    async def _get(self, session: ClientSession, url: str) -> FetchResult:
        async with session.get(url) as resp:
            if resp.status in self._RETRY_STATUS:
                raise _RetryableStatus(resp.status)
            if resp.status >= 400:
                return HttpError(resp.status)
            mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
            if mime not in _HTML_TYPES:
                return NonHtml()
            try:
                text = await resp.text(errors="replace")
                page = parse_html(text, str(resp.url))
            except (LookupError, ValueError) as e:
                return NetworkError(f"unreadable page: {e}")
            return Ok(page.text, page.links)
