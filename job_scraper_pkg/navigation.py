import asyncio
import logging
from typing import Tuple

from playwright.async_api import Page

logger = logging.getLogger(__name__)


async def pause(ms: int) -> None:
    """Fixed delay between steps. Zero or negative values return immediately."""
    if ms > 0:
        await asyncio.sleep(ms / 1000)


async def goto_page(page: Page, url: str, timeout_ms: int) -> Tuple[bool, str]:
    """Navigate once and wait for network idle within a bounded time.

    Returns (success, error_message). There is no retry: a failed navigation
    is reported to the caller, which decides whether it is fatal.
    """
    try:
        await page.goto(url, timeout=timeout_ms, wait_until="networkidle")
        return True, ""
    except Exception as e:
        return False, str(e)


async def wait_for_marker(page: Page, selector: str, timeout_ms: int) -> bool:
    """Wait for a readiness marker without failing the caller.

    Returns False when the marker did not show up in time; the page is read
    with whatever content it has.
    """
    try:
        await page.wait_for_selector(selector, timeout=timeout_ms)
        return True
    except Exception as e:
        logger.warning("Marker %r not found within %d ms: %s", selector, timeout_ms, str(e)[:80])
        return False


async def settle(page: Page, ms: int) -> None:
    """Short idle buffer for client-side rendering after the readiness wait."""
    if ms > 0:
        await page.wait_for_timeout(ms)
