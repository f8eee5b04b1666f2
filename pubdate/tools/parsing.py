# parsing implementation
from __future__ import annotations

import logging
import time
from datetime import date, datetime
from typing import Optional, Tuple

from bs4 import BeautifulSoup

from pubdate.errors import ParseFailure

logger = logging.getLogger(__name__)

__all__ = ["FORMATS", "parse_document", "parse_date"]

# Tried in order; the first format that parses wins, so month-first path
# dates shadow day-first ones.
FORMATS: Tuple[str, ...] = (
    "%A, %B %d, %Y",
    "%Y-%m-%dT%H:%M:%S%z",
    "/%Y/%m/%d/",
    "/%Y/%d/%m/",
    "%Y-%m-%d",
    "%B %d, %Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    # day in the day slot, then a 12-hour time: "March 16, 2017, 10:30 AM";
    # an hour-in-the-day-slot layout could never yield a date
    "%B %d, %Y, %I:%M %p",
    "%Y-%m-%d %H:%M:%S.000000",
)


def parse_document(html: str, parser: str = "lxml") -> BeautifulSoup:
    # class stays a plain string so it can be compared and regex-matched as written
    return BeautifulSoup(html, parser, multi_valued_attributes=None)


def parse_date(candidate: str, *, source: Optional[str] = None) -> date:
    """
    Parse a date candidate against FORMATS and return the calendar date.
    Raises ParseFailure when no format matches.
    """
    for fmt in FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        # strptime ignores a weekday that contradicts the date
        if "%A" in fmt and time.strptime(candidate, fmt).tm_wday != parsed.weekday():
            continue
        logger.debug("candidate %r matched format %r", candidate, fmt)
        return parsed.date()
    raise ParseFailure(candidate, source=source)
