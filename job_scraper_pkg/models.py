from datetime import datetime, timezone
from enum import Enum
from typing import List, Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

from .config import DEFAULT_CITY, DEFAULT_KEYWORD, MAX_DETAIL_FETCHES, SITE_ORIGIN


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CrawlRequest(BaseModel):
    """Incoming request payload for a listing crawl.

    Waits are in milliseconds. `max_details` bounds how many detail pages a
    single run visits so the crawl stays short.
    """
    keyword: str = DEFAULT_KEYWORD
    city: str = DEFAULT_CITY
    debug: bool = False
    headless: Optional[bool] = None
    proxy: Optional[str] = None
    max_wait: int = 60000
    detail_wait: int = 30000
    list_marker_wait: int = 10000
    detail_marker_wait: int = 5000
    settle_ms: int = 3000
    detail_settle_ms: int = 2000
    item_delay_ms: int = 1000
    max_details: int = Field(default=MAX_DETAIL_FETCHES, ge=0)

    @property
    def listing_url(self) -> str:
        return f"{SITE_ORIGIN}/web/geek/job?query={quote(self.keyword)}&city={self.city}"


class AdzunaRequest(BaseModel):
    """Request payload for the job-search API import."""
    country: str = "gb"
    query: str = "developer"
    page: int = Field(default=1, ge=1)


class CandidateReference(BaseModel):
    """A discovered (title, url) pair pointing at a detail page."""
    title: str
    url: str
    index: int


class JobPosting(BaseModel):
    """Normalized job posting as persisted to the job store.

    Both sources share this shape. `source` tells them apart; API postings
    carry numeric salary bounds and a free-text salary rendered from them.
    """
    source: Literal["boss", "adzuna"] = "boss"
    title: str
    company: str = ""
    salary: str = ""
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    location: str = ""
    experience: str = ""
    education: str = ""
    description: str = ""
    skills: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow, serialization_alias="createdAt")

    @classmethod
    def degraded(cls, title: str) -> "JobPosting":
        """Posting kept when the detail page failed: only the listing title survives."""
        return cls(title=title)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class CrawlState(str, Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    ITERATING = "iterating"
    AGGREGATING = "aggregating"
    DONE = "done"
    FAILED = "failed"
