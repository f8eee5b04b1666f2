# resolution pipeline
import logging
from datetime import date
from typing import Callable, Optional, Tuple

from bs4 import BeautifulSoup

from pubdate.errors import ParseFailure, PublishedDateError, ResolutionFailure
from pubdate.schemas import Candidate, DateResult, Source
from pubdate.tools.parsing import parse_date, parse_document
from pubdate.tools.url import extract_from_url
from pubdate.tools.web import extract_from_html_tag, extract_from_ldjson, extract_from_meta

logger = logging.getLogger(__name__)

__all__ = ["DOCUMENT_STAGES", "PublishedDateError", "find_candidate", "resolve_published_date", "extract_published_date"]

# Stages that need the parsed document, in priority order. The URL stage
# always runs first, before the document is parsed.
DOCUMENT_STAGES: Tuple[Tuple[Source, Callable[[BeautifulSoup], Optional[str]]], ...] = (
    ("ld_json", extract_from_ldjson),
    ("meta", extract_from_meta),
    ("html_tag", extract_from_html_tag),
)


def find_candidate(url: str, document_html: Optional[str] = None, *, parser: str = "lxml") -> Optional[Candidate]:
    """Run the extractors in order and return the first candidate found."""
    value = extract_from_url(url)
    if value is not None:
        logger.debug("date candidate %r from url", value)
        return Candidate(value=value, source="url")

    if not document_html:
        return None

    soup = parse_document(document_html, parser=parser)
    for source, extract in DOCUMENT_STAGES:
        value = extract(soup)
        if value is not None:
            logger.debug("date candidate %r from %s", value, source)
            return Candidate(value=value, source=source)
    return None


def resolve_published_date(url: str, document_html: Optional[str] = None, *, parser: str = "lxml") -> date:
    """
    Infer an article's publication date from its URL and HTML.

    The first candidate found is final: if it doesn't parse, ParseFailure is
    raised rather than trying the next stage. ResolutionFailure is raised when
    no stage finds anything.
    """
    candidate = find_candidate(url, document_html, parser=parser)
    if candidate is None:
        raise ResolutionFailure(url)
    return parse_date(candidate.value, source=candidate.source)


def extract_published_date(url: str, document_html: Optional[str] = None, *, parser: str = "lxml") -> DateResult:
    candidate = find_candidate(url, document_html, parser=parser)
    if candidate is None:
        logger.info("no date signal found for %s", url or "<no url>")
        return DateResult(ok=False, why=["no_date_signal"], url=url or None)

    try:
        published = parse_date(candidate.value, source=candidate.source)
    except ParseFailure as e:
        logger.info("unparsable %s date %r for %s", e.source, e.candidate, url or "<no url>")
        return DateResult(
            ok=False,
            why=["unparsable_date"],
            url=url or None,
            source=candidate.source,
            candidate=candidate.value,
        )
    return DateResult(
        ok=True,
        url=url or None,
        published_at=published,
        source=candidate.source,
        candidate=candidate.value,
    )

