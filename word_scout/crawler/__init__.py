"""Breadth-first word search: frontier, page fetcher contract and crawler."""
from word_scout.crawler.crawler import CrawlRun, InvalidInput, WordCrawler
from word_scout.crawler.fetcher import AiohttpPageFetcher, PageFetcher
from word_scout.crawler.frontier import EmptyFrontier, Frontier
from word_scout.crawler.models import (
    CrawlOutcome,
    FetchResult,
    HttpError,
    NetworkError,
    NonHtml,
    Ok,
    StopReason,
    VisitRecord,
    VisitStatus,
)

__all__ = [
    "AiohttpPageFetcher",
    "CrawlOutcome",
    "CrawlRun",
    "EmptyFrontier",
    "FetchResult",
    "Frontier",
    "HttpError",
    "InvalidInput",
    "NetworkError",
    "NonHtml",
    "Ok",
    "PageFetcher",
    "StopReason",
    "VisitRecord",
    "VisitStatus",
    "WordCrawler",
]
