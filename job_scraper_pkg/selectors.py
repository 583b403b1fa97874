# FILE: job_scraper_pkg/selectors.py
"""Selector tables for the listing and detail pages.

Each entry is tried in order until one yields something usable, so adding a
markup variant means adding a selector here rather than touching the
extraction code.
"""
from typing import Dict, Tuple

# Readiness markers used for the soft waits after navigation.
LISTING_READY_SELECTOR = ".job-list-box"
DETAIL_READY_SELECTOR = ".job-detail, .job-sec-text, .job-name"

# Listing page: card containers and bare anchors, matched together in
# document order. A card wins over the anchor inside it.
LISTING_STRATEGIES: Tuple[str, ...] = (
    ".job-card-wrapper",
    ".job-card-box",
    ".job-list-box a",
    "a[href*='/job_detail/']",
)
CARD_LINK_SELECTOR = "a[href*='/job_detail/'], a[href*='/job/']"
CARD_TITLE_SELECTOR = ".job-name, .job-info .job-name, .job-title"
JOB_PATH_MARKER = "/job"

# Detail page: field -> ordered candidates. Primary markup class first,
# then the secondary class, then a generic element where one makes sense.
DETAIL_FIELD_SELECTORS: Dict[str, Tuple[str, ...]] = {
    "title": (".job-name", ".job-primary .name", "h1"),
    "company": (".company-name", ".job-primary .company .name"),
    "salary": (".job-primary .salary", ".salary"),
    "location": (".job-primary .area", ".job-area"),
    "experience": (".job-primary .tag-list .tag:nth-child(1)", ".job-primary .tag-list", ".tag-list .tag"),
    "education": (".job-primary .tag-list .tag:nth-child(2)",),
    "description": (
        # content block
        ".job-segment-text",
        ".job-sec-text",
        ".job-detail",
        # detail block
        ".job-primary .job-detail",
        ".detail",
    ),
}

# Fields whose text keeps line breaks instead of being folded to one line.
MULTILINE_FIELDS = frozenset({"description"})
