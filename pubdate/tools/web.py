# pubdate/tools/web.py
from __future__ import annotations

import json
import logging
import re
from functools import partial
from typing import Any, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from pubdate.tools.url import extract_from_url

logger = logging.getLogger(__name__)

# Public API
__all__ = ["extract_from_ldjson", "extract_from_meta", "extract_from_html_tag"]

# ---- JSON-LD ----

LDJSON_TYPE = "application/ld+json"

_MISSING = object()


def _search(root: Any, key: str) -> Any:
    """Depth-first lookup of `key` through nested objects and arrays."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            if key in node:
                return node[key]
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))
    return _MISSING


def extract_from_ldjson(soup: BeautifulSoup) -> Optional[str]:
    """
    Read datePublished (or, failing that, dateCreated) from the first JSON-LD block.
    Returns None when the block is missing, not JSON, or the field isn't a string.
    """
    block = soup.find(attrs={"type": LDJSON_TYPE})
    if block is None:
        return None
    try:
        data = json.loads(block.string or "")
    except (ValueError, RecursionError):
        logger.debug("json-ld block is not valid JSON or nests too deeply")
        return None

    value = _search(data, "datePublished")
    if value is _MISSING:
        value = _search(data, "dateCreated")
    if isinstance(value, str):
        return value
    if value is not _MISSING:
        logger.debug("json-ld date field is %s, not a string", type(value).__name__)
    return None


# ---- meta tags ----

META_NAMES = frozenset({
    "pubdate",
    "publishdate",
    "timestamp",
    "dc.date.issued",
    "date",
    "sailthru.date",
    "article.published",
    "published-date",
    "article.created",
    "article_date_original",
    "cxenseparse:recs:publishtime",
    "date_published",
})
META_ITEMPROPS = frozenset({"datepublished", "datecreated"})
META_HTTP_EQUIVS = frozenset({"date"})
META_PROPERTIES = frozenset({"article:published_time", "bt:pubdate"})

# (attribute, accepted values, compare lower-cased)
_META_CHANNELS: Tuple[Tuple[str, frozenset, bool], ...] = (
    ("name", META_NAMES, True),
    ("itemprop", META_ITEMPROPS, True),
    ("http-equiv", META_HTTP_EQUIVS, True),
    ("property", META_PROPERTIES, False),
)


def extract_from_meta(soup: BeautifulSoup) -> Optional[str]:
    for meta in soup.find_all("meta"):
        content = meta.get("content")
        if content is None:
            continue
        for attr, accepted, fold in _META_CHANNELS:
            value = meta.get(attr)
            if value is None:
                continue
            if (value.lower() if fold else value) in accepted:
                logger.debug("meta %s=%s matched", attr, value)
                return content.strip()
        # og:image ends the scan even when its URL carries no date
        if meta.get("property") == "og:image":
            logger.debug("meta og:image matched, reading date from %s", content)
            return extract_from_url(content.strip())
    return None


# ---- visible tags ----

TAG_RE = re.compile(r"publishdate|pubdate|timestamp|article_date|articledate|date", re.I)


def _text(tag: Tag) -> str:
    return tag.get_text().strip()


def _from_time(soup: BeautifulSoup) -> Optional[str]:
    for time in soup.find_all("time"):
        dt = time.get("datetime")
        if dt is not None:
            return dt.strip()
        if time.get("class") == "timestamp":
            return _text(time)
    return None


def _from_itemprop(soup: BeautifulSoup) -> Optional[str]:
    for tag in soup.find_all(attrs={"itemprop": "datePublished"}):
        content = tag.get("content")
        if content is not None:
            return content.strip()
        text = _text(tag)
        if text:
            return text
    return None


def _from_class_keyword(name: str, soup: BeautifulSoup) -> Optional[str]:
    for tag in soup.find_all(name):
        if TAG_RE.search(tag.get("class") or ""):
            return _text(tag)
    return None


_TAG_STEPS = (
    _from_time,
    _from_itemprop,
    partial(_from_class_keyword, "span"),
    partial(_from_class_keyword, "p"),
    partial(_from_class_keyword, "div"),
)


def extract_from_html_tag(soup: BeautifulSoup) -> Optional[str]:
    """
    Fall back to visible markup: <time>, itemprop="datePublished", then
    span/p/div elements whose class looks date-ish.
    """
    for step in _TAG_STEPS:
        found = step(soup)
        if found is not None:
            return found
    return None
