import logging
from typing import Dict, Mapping, Sequence

from bs4 import BeautifulSoup

from .discovery import element_text
from .models import JobPosting
from .selectors import DETAIL_FIELD_SELECTORS, MULTILINE_FIELDS

logger = logging.getLogger(__name__)


def first_text(soup: BeautifulSoup, selectors: Sequence[str], multiline: bool = False) -> str:
    """Text of the first element, across the ordered selectors, that has any."""
    for sel in selectors:
        for el in soup.select(sel):
            text = element_text(el, multiline=multiline)
            if text:
                return text
    return ""


def extract_fields(
    html: str,
    table: Mapping[str, Sequence[str]] = DETAIL_FIELD_SELECTORS,
) -> Dict[str, str]:
    soup = BeautifulSoup(html or "", "html.parser")
    fields: Dict[str, str] = {}
    for name, selectors in table.items():
        fields[name] = first_text(soup, selectors, multiline=name in MULTILINE_FIELDS)
    missing = [name for name, value in fields.items() if not value]
    if missing:
        logger.debug("Detail fields not found: %s", ", ".join(missing))
    return fields


def extract_detail(html: str, table: Mapping[str, Sequence[str]] = DETAIL_FIELD_SELECTORS) -> JobPosting:
    """Extract a normalized posting from a rendered detail page.

    Never raises for missing markup: absent fields come back as empty strings.
    Skills are left empty; tagging belongs to the caller.
    """
    return JobPosting(**{"title": "", **extract_fields(html, table)})
