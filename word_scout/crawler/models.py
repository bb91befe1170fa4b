"""
Data models for the WordScout crawler.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


@dataclass(slots=True, frozen=True)
class Ok:
    """Fetched and parsed HTML page: visible text and absolute outbound links."""

    body_text: str
    links: List[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class NonHtml:
    """Content that is not HTML; carries no text and no links."""


@dataclass(slots=True, frozen=True)
class HttpError:
    status_code: int


@dataclass(slots=True, frozen=True)
class NetworkError:
    cause: str


FetchResult = Union[Ok, NonHtml, HttpError, NetworkError]


class VisitStatus(str, Enum):
    OK = "ok"
    NON_HTML = "non_html"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"


class StopReason(str, Enum):
    FOUND = "found"
    BUDGET_EXHAUSTED = "budget_exhausted"
    FRONTIER_EXHAUSTED = "frontier_exhausted"


@dataclass(slots=True)
class VisitRecord:
    """One entry of the per-visit trace."""

    url: str
    status: VisitStatus
    link_count: int = 0
    detail: Optional[str] = None

    @classmethod
    def from_result(cls, url: str, result: FetchResult) -> VisitRecord:
        if isinstance(result, Ok):
            return cls(url, VisitStatus.OK, len(result.links))
        if isinstance(result, NonHtml):
            return cls(url, VisitStatus.NON_HTML)
        if isinstance(result, HttpError):
            return cls(url, VisitStatus.HTTP_ERROR, detail=str(result.status_code))
        return cls(url, VisitStatus.NETWORK_ERROR, detail=result.cause)

    @property
    def failed(self) -> bool:
        return self.status in (VisitStatus.HTTP_ERROR, VisitStatus.NETWORK_ERROR)


@dataclass(slots=True)
class CrawlOutcome:
    """Terminal result of one search: where the word was found, or why the crawl stopped."""

    seed_url: str
    target_word: str
    found: bool
    url: Optional[str]
    visits: int
    reason: StopReason
    trace: List[VisitRecord] = field(default_factory=list)

    def describe(self) -> str:
        visits = f"{self.visits} visit" + ("" if self.visits == 1 else "s")
        if self.found:
            return f'Found "{self.target_word}" at {self.url} after {visits}'
        return f'"{self.target_word}" not found after {visits} ({self.reason.value})'

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["reason"] = self.reason.value
        for entry in data["trace"]:
            entry["status"] = entry["status"].value
        return data
