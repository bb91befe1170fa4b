"""word_scout.engine: runs one word search over HTTP for a given configuration."""

from __future__ import annotations

from typing import Optional

from word_scout.config import SearchConfig
from word_scout.crawler.crawler import WordCrawler
from word_scout.crawler.fetcher import AiohttpPageFetcher
from word_scout.crawler.models import CrawlOutcome
from word_scout.logger import logger

__all__ = ["start_search"]


async def start_search(
    cfg: SearchConfig,
    seed_url: str,
    target_word: str,
    max_pages: Optional[int] = None,
) -> CrawlOutcome:
    """
    Open an HTTP fetcher for *cfg* and search for *target_word* from *seed_url*.

    Parameters
    ----------
    cfg : SearchConfig
        Fetch settings and the default page budget.
    max_pages : int, optional
        Overrides ``cfg.max_pages`` for this run.
    """
    budget = cfg.max_pages if max_pages is None else max_pages
    logger.debug(
        "Opening fetcher: timeout %.1f s, %d retries, agent %s", cfg.timeout, cfg.retry_times, cfg.user_agent
    )
    async with AiohttpPageFetcher(cfg) as fetcher:
        return await WordCrawler(fetcher).search(seed_url, target_word, budget)
