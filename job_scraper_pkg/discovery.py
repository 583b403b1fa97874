import logging
from typing import List, Optional, Sequence
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .config import SITE_ORIGIN
from .models import CandidateReference
from .selectors import (
    CARD_LINK_SELECTOR,
    CARD_TITLE_SELECTOR,
    JOB_PATH_MARKER,
    LISTING_STRATEGIES,
)

logger = logging.getLogger(__name__)


def element_text(el: Optional[Tag], multiline: bool = False) -> str:
    """Trimmed text of an element.

    Whitespace runs fold to single spaces unless `multiline` is set, in which
    case each text node keeps its own line.
    """
    if el is None:
        return ""
    if multiline:
        return el.get_text("\n", strip=True)
    return " ".join(el.get_text(" ").split())


def resolve_url(href: str, origin: str = SITE_ORIGIN) -> str:
    if href.startswith("http"):
        return href
    return urljoin(origin, href)


def _resolve_anchor(el: Tag) -> Optional[Tag]:
    if el.name == "a" and el.get("href"):
        return el
    return el.select_one(CARD_LINK_SELECTOR)


def _candidate(el: Tag, origin: str) -> Optional[tuple]:
    link = _resolve_anchor(el)
    if link is None:
        return None
    title = element_text(el.select_one(CARD_TITLE_SELECTOR)) or element_text(el)
    href = (link.get("href") or "").strip()
    if not title or not href or JOB_PATH_MARKER not in href:
        return None
    return title, resolve_url(href, origin)


def discover_references(
    html: str,
    origin: str = SITE_ORIGIN,
    strategies: Sequence[str] = LISTING_STRATEGIES,
) -> List[CandidateReference]:
    """Collect unique detail-page references from a rendered listing page.

    All strategies are matched as one selector group, so references follow
    document order whichever strategy found them. The first occurrence of a
    URL wins and later duplicates are dropped. An empty result is a valid
    outcome meaning there is nothing to visit.
    """
    if not strategies:
        return []
    soup = BeautifulSoup(html or "", "html.parser")
    refs: List[CandidateReference] = []
    seen = set()

    matched = soup.select(", ".join(strategies))
    logger.debug("Listing selectors matched %d elements", len(matched))
    for el in matched:
        found = _candidate(el, origin)
        if found is None:
            continue
        title, url = found
        if url in seen:
            continue
        seen.add(url)
        refs.append(CandidateReference(title=title, url=url, index=len(refs)))

    logger.info("Discovered %d unique job links", len(refs))
    return refs
