from collections import Counter
from typing import Iterable, List, Tuple

from .config import TOP_SKILLS
from .models import JobPosting


def skill_frequency(jobs: Iterable[JobPosting]) -> Counter:
    """Count skill occurrences across all postings, in first-seen order."""
    counts: Counter = Counter()
    for job in jobs:
        counts.update(job.skills)
    return counts


def top_skills(jobs: Iterable[JobPosting], k: int = TOP_SKILLS) -> List[Tuple[str, int]]:
    """Most frequent skills, descending by count.

    Ties keep first-seen order because `most_common` sorts stably.
    """
    return skill_frequency(jobs).most_common(k)
