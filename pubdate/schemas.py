from datetime import date
from typing import Optional, Literal, List
from pydantic import BaseModel, ConfigDict


Source = Literal["url", "ld_json", "meta", "html_tag"]


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    source: Source


class DateResult(BaseModel):
    ok: bool
    why: List[str] = []
    url: Optional[str] = None
    published_at: Optional[date] = None
    source: Optional[Source] = None
    candidate: Optional[str] = None          # raw string handed to the format matcher
