"""Shared fakes for browser sessions and the job store.

The fakes implement just the slice of the Playwright and store APIs the
scraper touches, so crawls run without a browser, network or database.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest

from job_scraper_pkg.models import CrawlRequest

LISTING_URL = CrawlRequest().listing_url


def listing_html(*hrefs: str) -> str:
    anchors = "\n".join(
        f'<li class="job-card-box"><a href="{href}"><span class="job-name">Job {i}</span></a></li>'
        for i, href in enumerate(hrefs)
    )
    return f'<html><body><ul class="job-list-box">{anchors}</ul></body></html>'


def detail_html(title: str, description: str = "", company: str = "Acme") -> str:
    return f"""
    <html><body>
      <div class="job-primary">
        <div class="name"><h1 class="job-name">{title}</h1></div>
        <span class="salary">15-25K</span>
        <div class="company"><span class="name">{company}</span></div>
        <p class="area">北京</p>
        <div class="tag-list"><span class="tag">3-5年</span><span class="tag">本科</span></div>
      </div>
      <div class="job-detail"><div class="job-sec-text">{description}</div></div>
    </body></html>
    """


class FakePage:
    def __init__(self, pages: Dict[str, Union[str, Exception]], session: "FakeSession"):
        self.pages = pages
        self.session = session
        self.url = "about:blank"
        self.closed = False

    async def goto(self, url: str, timeout: int = 0, wait_until: str = "load"):
        self.session.visited.append(url)
        self.url = url
        outcome = self.pages.get(url)
        if outcome is None:
            raise TimeoutError(f"Timeout {timeout}ms exceeded navigating to {url}")
        if isinstance(outcome, Exception):
            raise outcome

    async def wait_for_selector(self, selector: str, timeout: int = 0):
        if self.session.missing_markers:
            raise TimeoutError(f"waiting for {selector}")

    async def wait_for_timeout(self, ms: int):
        self.session.waits.append(ms)

    async def content(self) -> str:
        return self.pages[self.url]

    async def close(self):
        self.closed = True
        self.session.open_pages -= 1


class FakeSession:
    def __init__(self, pages: Dict[str, Union[str, Exception]], missing_markers: bool = False):
        self.pages = pages
        self.missing_markers = missing_markers
        self.visited: List[str] = []
        self.waits: List[int] = []
        self.open_pages = 0
        self.max_open_pages = 0
        self.close_calls = 0
        self.closed = False

    async def new_page(self) -> FakePage:
        self.open_pages += 1
        self.max_open_pages = max(self.max_open_pages, self.open_pages)
        return FakePage(self.pages, self)

    async def close(self):
        self.close_calls += 1
        self.closed = True


class FakeStore:
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.insert_calls: List[list] = []
        self.close_calls = 0

    def insert_jobs(self, jobs):
        if not jobs:
            return 0
        self.insert_calls.append(list(jobs))
        if self.error is not None:
            raise self.error
        return len(jobs)

    def close(self):
        self.close_calls += 1


@pytest.fixture
def fast_request() -> CrawlRequest:
    return CrawlRequest(settle_ms=0, detail_settle_ms=0, item_delay_ms=0)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def session_factory():
    """Build a session factory returning one FakeSession over `pages`."""

    def make(pages: Dict[str, Union[str, Exception]], **kwargs):
        session = FakeSession(pages, **kwargs)

        async def factory(**_options):
            return session

        factory.session = session
        return factory

    return make
