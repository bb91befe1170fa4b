"""HTML parsing utilities for WordScout.

:func:`parse_html` turns raw markup into a :class:`ParsedPage`:

* text  — visible text of the document, whitespace-collapsed, used for the
  word search.
* links — absolute URLs of every ``<a href="…">`` in document order.

Links are only resolved against the page URL; no further canonicalisation is
applied, so two links are the same page exactly when their strings match.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("ParsedPage", "parse_html")

_SKIP_SCHEMES = ("mailto:", "javascript:", "tel:", "data:")
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    text: str
    links: list[str] = field(default_factory=list)


def _extract_links(soup: BeautifulSoup, base_url: str) -> list[str]:
    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.lower().startswith(_SKIP_SCHEMES):
            continue
        try:
            absolute = urljoin(base_url, raw)
            scheme = urlparse(absolute).scheme
        except ValueError:
            # e.g. an unbalanced IPv6 host
            continue
        if scheme in ("http", "https"):
            links.append(absolute)
    return links


def parse_html(html: str, base_url: str) -> ParsedPage:
    """Parse *html* fetched from *base_url*.

    Parameters
    ----------
    html
        Markup of the page.
    base_url
        Final URL of the page (after redirects); relative hrefs are resolved
        against it.
    """
    soup = BeautifulSoup(html, "html.parser")
    links = _extract_links(soup, base_url)

    for element in soup(_INVISIBLE_TAGS):
        element.decompose()
    text = " ".join(soup.stripped_strings)

    return ParsedPage(url=base_url, text=text, links=links)
