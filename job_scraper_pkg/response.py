from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import CrawlState, JobPosting


def build_response(
    source: str,
    target: str,
    jobs: Sequence[JobPosting],
    top_skills: List[Tuple[str, int]],
    inserted: int,
    debug_msgs: List[str],
    debug_files: Optional[dict] = None,
) -> Dict[str, Any]:
    """Compose the run summary returned to callers.

    - `jobs_list` is a list when postings exist, otherwise the string
      "not found".
    - `found` and `total_jobs` reflect the batch, `inserted` what the store
      accepted.
    """
    resp = {
        "source": source,
        "url": target,
        "found": len(jobs) > 0,
        "total_jobs": len(jobs),
        "jobs_list": [j.model_dump(mode="json", exclude_none=True) for j in jobs] if jobs else "not found",
        "top_skills": [{"skill": skill, "count": count} for skill, count in top_skills],
        "inserted": inserted,
        "state": CrawlState.DONE.value,
        "debug": " | ".join(debug_msgs),
    }
    if debug_files:
        resp["debug_files"] = debug_files
    return resp


def build_error(
    source: str,
    target: str,
    error: str,
    debug_msgs: List[str],
    total_jobs: int = 0,
) -> Dict[str, Any]:
    """Build a consistent error response; `jobs_list` is set to "error"."""
    return {
        "source": source,
        "url": target,
        "found": False,
        "error": error,
        "total_jobs": total_jobs,
        "jobs_list": "error",
        "inserted": 0,
        "state": CrawlState.FAILED.value,
        "debug": " | ".join(debug_msgs),
    }
