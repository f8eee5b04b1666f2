# error types
from typing import Optional


class PublishedDateError(Exception):
    """The publication date could not be determined."""


class ResolutionFailure(PublishedDateError):
    def __init__(self, url: str = ""):
        self.url = url
        super().__init__("no date signal found")


class ParseFailure(PublishedDateError):
    """A candidate was found but none of the known formats matched it."""

    def __init__(self, candidate: str, source: Optional[str] = None):
        self.candidate = candidate
        self.source = source
        super().__init__("no matching format")
