"""Client for the Adzuna job-search API.

This source skips discovery and detail pages entirely: the search endpoint
already returns structured postings, which are mapped straight into
`JobPosting` records with numeric salary bounds.
"""
import logging
from typing import List, Optional

import httpx

from .config import ADZUNA_APP_ID, ADZUNA_APP_KEY
from .errors import SetupError
from .models import AdzunaRequest, JobPosting
from .skills import SkillExtractor

logger = logging.getLogger(__name__)

ADZUNA_SEARCH_URL = "https://api.adzuna.com/v1/api/jobs/{country}/search/{page}"


def _amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def salary_text(salary_min: Optional[float], salary_max: Optional[float]) -> str:
    """Free-text salary range rendered from numeric bounds."""
    if salary_min is not None and salary_max is not None:
        if salary_min == salary_max:
            return _amount(salary_min)
        return f"{_amount(salary_min)}-{_amount(salary_max)}"
    if salary_min is not None:
        return f"{_amount(salary_min)}+"
    if salary_max is not None:
        return f"up to {_amount(salary_max)}"
    return ""


def _display_name(raw: dict, key: str) -> str:
    nested = raw.get(key) or {}
    return (nested.get("display_name") or "").strip()


def map_result(raw: dict, extractor: SkillExtractor) -> JobPosting:
    title = (raw.get("title") or "").strip()
    description = (raw.get("description") or "").strip()
    salary_min = raw.get("salary_min")
    salary_max = raw.get("salary_max")
    return JobPosting(
        source="adzuna",
        title=title,
        company=_display_name(raw, "company"),
        location=_display_name(raw, "location"),
        description=description,
        salary_min=salary_min,
        salary_max=salary_max,
        salary=salary_text(salary_min, salary_max),
        skills=extractor.extract(description or title),
    )


async def fetch_results(
    client: httpx.AsyncClient,
    req: AdzunaRequest,
    app_id: str = ADZUNA_APP_ID,
    app_key: str = ADZUNA_APP_KEY,
    timeout: float = 30.0,
) -> List[dict]:
    """Return the raw `results` array of one search page."""
    url = ADZUNA_SEARCH_URL.format(country=req.country, page=req.page)
    params = {
        "app_id": app_id,
        "app_key": app_key,
        "what": req.query,
        "content-type": "application/json",
    }
    try:
        response = await client.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise SetupError(f"Adzuna request failed: {e}") from e
    if not isinstance(data, dict):
        raise SetupError("Adzuna response is not a JSON object")
    results = data.get("results") or []
    logger.info("Adzuna returned %d results for %r (%s)", len(results), req.query, req.country)
    return results


async def fetch_jobs(
    req: AdzunaRequest,
    client: Optional[httpx.AsyncClient] = None,
    extractor: Optional[SkillExtractor] = None,
) -> List[JobPosting]:
    extractor = extractor or SkillExtractor()
    if client is not None:
        results = await fetch_results(client, req)
    else:
        async with httpx.AsyncClient() as own_client:
            results = await fetch_results(own_client, req)
    return [map_result(raw, extractor) for raw in results]
