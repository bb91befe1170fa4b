# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Mapping

import pytest

from word_scout.config import SearchConfig
from word_scout.crawler.models import FetchResult, HttpError


class ScriptedFetcher:
    """PageFetcher returning canned results; unknown URLs answer HTTP 404."""

    def __init__(self, pages: Mapping[str, FetchResult]) -> None:
        self.pages: Dict[str, FetchResult] = dict(pages)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        return self.pages.get(url, HttpError(404))



@pytest.fixture()
def scripted_fetcher():
    """Factory building a ScriptedFetcher from a url -> result mapping."""
    return ScriptedFetcher


@pytest.fixture()
def fast_config() -> SearchConfig:
    """Config with short timeouts and no backoff delay for HTTP tests."""
    return SearchConfig(
        max_pages=10,
        timeout=2.0,
        user_agent="TestAgent/1.0",
        retry_times=2,
        retry_backoff=0.0,
    )
