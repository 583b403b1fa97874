#!/usr/bin/env python3
"""
Job Posting Scraper - crawl and import runners

Crawls a BOSS Zhipin search listing with a Playwright browser, visits each
discovered job detail page, tags postings with the skills they mention and
appends the batch to MongoDB. A second runner imports postings from the
Adzuna search API into the same collection.

Usage:
    python scraper.py
"""

import asyncio
import json
import logging
import sys
from typing import Awaitable, Callable, List, Optional, Tuple

import httpx

from job_scraper_pkg import adzuna
from job_scraper_pkg.browser import BrowserSession, open_session
from job_scraper_pkg.config import HEADLESS
from job_scraper_pkg.discovery import discover_references
from job_scraper_pkg.errors import DetailError, ScrapeError, SetupError
from job_scraper_pkg.extraction import extract_detail
from job_scraper_pkg.models import AdzunaRequest, CandidateReference, CrawlRequest, CrawlState, JobPosting
from job_scraper_pkg.navigation import goto_page, pause, settle, wait_for_marker
from job_scraper_pkg.response import build_error, build_response
from job_scraper_pkg.scraper_logging import add_debug, save_debug_files, setup_logging
from job_scraper_pkg.selectors import DETAIL_READY_SELECTOR, LISTING_READY_SELECTOR
from job_scraper_pkg.skills import SkillExtractor
from job_scraper_pkg.stats import top_skills
from job_scraper_pkg.storage import JobStore

logger = logging.getLogger(__name__)

SessionFactory = Callable[..., Awaitable[BrowserSession]]


async def discover_listing(
    session: BrowserSession,
    data: CrawlRequest,
    debug_msg: List[str],
) -> Tuple[List[CandidateReference], Optional[dict]]:
    """Load the listing page and collect candidate detail references.

    A listing that cannot be loaded is fatal; a missing list container only
    produces a warning and the page is read as it is.
    """
    url = data.listing_url
    debug_files = None
    page = await session.new_page()
    try:
        logger.info("Opening listing: %s", url)
        ok, err = await goto_page(page, url, timeout_ms=data.max_wait)
        if not ok:
            raise SetupError(f"Listing navigation failed: {err}")

        if not await wait_for_marker(page, LISTING_READY_SELECTOR, data.list_marker_wait):
            add_debug(debug_msg, "LIST_MARKER_MISSING")
        await settle(page, data.settle_ms)

        refs = discover_references(await page.content())
        add_debug(debug_msg, f"LINKS:{len(refs)}")
        if not refs and data.debug:
            debug_files = await save_debug_files(page, "listing_empty")
    finally:
        await page.close()
    return refs, debug_files


async def scrape_detail(
    session: BrowserSession,
    ref: CandidateReference,
    data: CrawlRequest,
    extractor: SkillExtractor,
) -> JobPosting:
    """Visit one detail page in its own tab and build the tagged posting."""
    page = await session.new_page()
    try:
        ok, err = await goto_page(page, ref.url, timeout_ms=data.detail_wait)
        if not ok:
            raise DetailError(f"Navigation failed: {err}")
        await wait_for_marker(page, DETAIL_READY_SELECTOR, data.detail_marker_wait)
        await settle(page, data.detail_settle_ms)
        html = await page.content()
    finally:
        await page.close()

    job = extract_detail(html)
    title = job.title or ref.title
    return job.model_copy(update={"title": title, "skills": extractor.extract(job.description or title)})


async def collect_details(
    session: BrowserSession,
    refs: List[CandidateReference],
    data: CrawlRequest,
    extractor: SkillExtractor,
    debug_msg: List[str],
) -> List[JobPosting]:
    """Visit references one at a time, keeping a record for every one.

    A failing reference degrades to a title-only posting and the loop moves
    on to the next one.
    """
    jobs: List[JobPosting] = []
    total = len(refs)
    for i, ref in enumerate(refs):
        logger.info("[%d/%d] Scraping: %s", i + 1, total, ref.title)
        try:
            job = await scrape_detail(session, ref, data, extractor)
            logger.info("  Extracted skills: %s", ", ".join(job.skills[:3]) or "-")
        except Exception as e:
            logger.warning("  Detail scrape failed for %s: %s", ref.url, e)
            add_debug(debug_msg, f"DETAIL_FAIL:{ref.index}")
            job = JobPosting.degraded(ref.title)
        jobs.append(job)
        if i < total - 1:
            await pause(data.item_delay_ms)
    return jobs


def log_top_skills(ranking: List[Tuple[str, int]]) -> None:
    if not ranking:
        return
    logger.info("Top skills:")
    for skill, count in ranking:
        logger.info("  - %s: %d", skill, count)


def open_store(store: Optional[JobStore]) -> JobStore:
    if store is not None:
        return store
    try:
        return JobStore()
    except Exception as e:
        raise SetupError(f"Job store unavailable: {e}") from e


async def persist(store: JobStore, jobs: List[JobPosting]) -> int:
    if not jobs:
        return 0
    return await asyncio.to_thread(store.insert_jobs, jobs)


async def scrape_boss_jobs(
    data: CrawlRequest,
    store: Optional[JobStore] = None,
    session_factory: SessionFactory = open_session,
    extractor: Optional[SkillExtractor] = None,
) -> dict:
    """
    Crawl the listing, extract up to `data.max_details` postings and store them.

    Args:
        data: CrawlRequest with keyword, waits and limits
        store: job sink; one is opened from config when omitted
        session_factory: coroutine returning a BrowserSession
        extractor: skill tagger; the default catalog is used when omitted

    Returns:
        Dictionary summarizing the run. The browser session and the store
        connection are released on every path.
    """
    extractor = extractor or SkillExtractor()
    debug_msg: List[str] = []
    jobs: List[JobPosting] = []
    session: Optional[BrowserSession] = None
    state = CrawlState.IDLE
    target = data.listing_url

    try:
        store = open_store(store)
        state = CrawlState.DISCOVERING
        headless = data.headless if data.headless is not None else HEADLESS
        try:
            session = await session_factory(headless=headless, proxy=data.proxy, debug=data.debug)
        except Exception as e:
            raise SetupError(f"Browser launch failed: {e}") from e

        refs, debug_files = await discover_listing(session, data, debug_msg)

        if refs:
            state = CrawlState.ITERATING
            limit = min(len(refs), data.max_details)
            logger.info("Scraping %d of %d job details", limit, len(refs))
            jobs = await collect_details(session, refs[:limit], data, extractor, debug_msg)
        else:
            logger.warning("No job links found, skipping detail pages")

        state = CrawlState.AGGREGATING
        ranking = top_skills(jobs)
        log_top_skills(ranking)
        inserted = await persist(store, jobs)

        state = CrawlState.DONE
        logger.info("Scraping complete: %d postings, %d stored", len(jobs), inserted)
        return build_response("boss", target, jobs, ranking, inserted, debug_msg, debug_files)

    except ScrapeError as e:
        logger.error("Crawl failed while %s: %s", state.value, e)
        return build_error("boss", target, str(e), debug_msg, total_jobs=len(jobs))

    except Exception as e:
        logger.exception("Unexpected error while %s", state.value)
        return build_error("boss", target, str(e), debug_msg, total_jobs=len(jobs))

    finally:
        if session is not None:
            await session.close()
        if store is not None:
            store.close()


async def import_adzuna_jobs(
    data: AdzunaRequest,
    store: Optional[JobStore] = None,
    client: Optional[httpx.AsyncClient] = None,
    extractor: Optional[SkillExtractor] = None,
) -> dict:
    """Fetch one Adzuna search page, tag skills and append it to the store."""
    debug_msg: List[str] = []
    jobs: List[JobPosting] = []
    target = adzuna.ADZUNA_SEARCH_URL.format(country=data.country, page=data.page)

    try:
        store = open_store(store)
        jobs = await adzuna.fetch_jobs(data, client=client, extractor=extractor)
        add_debug(debug_msg, f"RESULTS:{len(jobs)}")
        ranking = top_skills(jobs)
        log_top_skills(ranking)
        inserted = await persist(store, jobs)
        return build_response("adzuna", target, jobs, ranking, inserted, debug_msg)

    except ScrapeError as e:
        logger.error("Adzuna import failed: %s", e)
        return build_error("adzuna", target, str(e), debug_msg, total_jobs=len(jobs))

    except Exception as e:
        logger.exception("Unexpected error during Adzuna import")
        return build_error("adzuna", target, str(e), debug_msg, total_jobs=len(jobs))

    finally:
        if store is not None:
            store.close()


def main():
    """Console entry point: crawl with the default request and print the summary."""
    setup_logging()
    try:
        result = asyncio.run(scrape_boss_jobs(CrawlRequest()))
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    sys.exit(0 if result.get("state") == "done" else 1)


if __name__ == "__main__":
    main()
