# date patterns embedded in article URLs
import re
from typing import Optional

__all__ = ["URL_DATE_RE", "extract_from_url"]

# Year 19xx/20xx, then a 1-2 digit number or a short word (month/day name),
# then a 1-2 digit number, each optionally separated by . / - _
URL_DATE_RE = re.compile(
    r"([\./\-_]{0,1}(19|20)\d{2})[\./\-_]{0,1}"
    r"(([0-3]{0,1}[0-9][\./\-_])|(\w{3,5}[\./\-_]))"
    r"([0-3]{0,1}[0-9][\./\-]{0,1})"
)


def extract_from_url(url: str) -> Optional[str]:
    """Return the leftmost date-like run of the URL, separators included."""
    if not url:
        return None
    m = URL_DATE_RE.search(url)
    return m.group(0) if m else None
