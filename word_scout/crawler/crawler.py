from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError, field_validator

from word_scout.crawler.fetcher import PageFetcher
from word_scout.crawler.frontier import EmptyFrontier, Frontier
from word_scout.crawler.models import CrawlOutcome, Ok, StopReason, VisitRecord
from word_scout.logger import get_logger

__all__ = ("InvalidInput", "CrawlRun", "WordCrawler", "contains_word")

DEFAULT_MAX_PAGES = 10


class InvalidInput(ValueError):
    """Search arguments rejected before any page is fetched."""


class _SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    seed_url: HttpUrl
    target_word: str = Field(..., min_length=1)
    max_pages: int = Field(..., ge=1, strict=True)

    @field_validator("target_word")
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("target word must not be blank")
        return v


def contains_word(text: str, word: str) -> bool:
    """Case-insensitive substring test; empty text never matches."""
    return bool(text) and word.casefold() in text.casefold()


@dataclass(slots=True)
class CrawlRun:
    """State of one search invocation."""

    seed_url: str
    target_word: str
    max_pages: int
    frontier: Frontier = field(default_factory=Frontier)
    trace: List[VisitRecord] = field(default_factory=list)

    @property
    def visits(self) -> int:
        return self.frontier.visited_count

    def budget_left(self) -> bool:
        return self.visits < self.max_pages

    def outcome(self, reason: StopReason, url: str | None = None) -> CrawlOutcome:
        return CrawlOutcome(
            seed_url=self.seed_url,
            target_word=self.target_word,
            found=reason is StopReason.FOUND,
            url=url,
            visits=self.visits,
            reason=reason,
            trace=list(self.trace),
        )


class WordCrawler:
    """Breadth-first search for a word, one page at a time, within a page budget."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher
        self.logger = get_logger("crawler")

    async def search(
        self, seed_url: str, target_word: str, max_pages: int = DEFAULT_MAX_PAGES
    ) -> CrawlOutcome:
        run = self._new_run(seed_url, target_word, max_pages)
        self.logger.info(
            "Searching for %r from %s (budget %d pages)", target_word, seed_url, max_pages
        )
        start = time.monotonic()
        outcome = await self._crawl(run)
        self.logger.info("%s in %.2f s", outcome.describe(), time.monotonic() - start)
        return outcome

    @staticmethod
    def _new_run(seed_url: str, target_word: str, max_pages: int) -> CrawlRun:
        try:
            _SearchRequest(seed_url=seed_url, target_word=target_word, max_pages=max_pages)
        except ValidationError as exc:
            raise InvalidInput(str(exc)) from exc
        return CrawlRun(seed_url=seed_url, target_word=target_word, max_pages=max_pages)

    async def _crawl(self, run: CrawlRun) -> CrawlOutcome:
        while run.budget_left():
            url = self._next_url(run)
            if url is None:
                return run.outcome(StopReason.FRONTIER_EXHAUSTED)

            result = await self.fetcher.fetch(url)
            record = VisitRecord.from_result(url, result)
            run.trace.append(record)
            self.logger.debug(
                "Visit %d: %s -> %s (%d links)", run.visits, url, record.status.value, record.link_count
            )

            if record.failed:
                self.logger.warning("Skipping %s: %s %s", url, record.status.value, record.detail)
                continue
            if isinstance(result, Ok):
                if contains_word(result.body_text, run.target_word):
                    return run.outcome(StopReason.FOUND, url)
                run.frontier.enqueue_all(result.links)

        return run.outcome(StopReason.BUDGET_EXHAUSTED)

    @staticmethod
    def _next_url(run: CrawlRun) -> str | None:
        """Pick the next page and mark it visited; None when nothing is left."""
        if run.visits == 0:
            # the seed is never enqueued
            run.frontier.mark_visited(run.seed_url)
            return run.seed_url
        try:
            url = run.frontier.next_unvisited()
        except EmptyFrontier:
            return None
        run.frontier.mark_visited(url)
        return url
