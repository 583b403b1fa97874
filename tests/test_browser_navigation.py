from unittest import mock

import pytest

from job_scraper_pkg.browser import BrowserSession
from job_scraper_pkg.navigation import goto_page, pause, settle, wait_for_marker


def _session(block_images: bool = True):
    playwright, browser, context = mock.AsyncMock(), mock.AsyncMock(), mock.AsyncMock()
    page = mock.AsyncMock()
    context.new_page.return_value = page
    return BrowserSession(playwright, browser, context, block_images=block_images), page


@pytest.mark.asyncio
async def test_session_close_releases_everything_once():
    session, _ = _session()
    await session.close()
    await session.close()
    session.context.close.assert_awaited_once()
    session.browser.close.assert_awaited_once()
    session.playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_close_survives_errors():
    session, _ = _session()
    session.browser.close.side_effect = RuntimeError("Browser has been closed")
    await session.close()
    session.playwright.stop.assert_awaited_once()
    assert session.closed


@pytest.mark.asyncio
async def test_new_page_blocks_images_unless_disabled():
    session, page = _session(block_images=True)
    assert await session.new_page() is page
    page.route.assert_awaited_once()

    session, page = _session(block_images=False)
    await session.new_page()
    page.route.assert_not_awaited()


@pytest.mark.asyncio
async def test_goto_page_reports_failure_instead_of_raising():
    page = mock.AsyncMock()
    page.goto.side_effect = TimeoutError("Timeout 30000ms exceeded")
    ok, err = await goto_page(page, "https://www.zhipin.com/job_detail/x.html", timeout_ms=30000)
    assert ok is False
    assert "Timeout" in err

    page = mock.AsyncMock()
    assert await goto_page(page, "https://www.zhipin.com", timeout_ms=1000) == (True, "")
    page.goto.assert_awaited_once_with("https://www.zhipin.com", timeout=1000, wait_until="networkidle")


@pytest.mark.asyncio
async def test_wait_for_marker_is_soft():
    page = mock.AsyncMock()
    page.wait_for_selector.side_effect = TimeoutError("waiting for locator('.job-list-box')")
    assert await wait_for_marker(page, ".job-list-box", 10) is False

    page = mock.AsyncMock()
    assert await wait_for_marker(page, ".job-list-box", 10) is True


@pytest.mark.asyncio
async def test_zero_delays_do_not_wait():
    page = mock.AsyncMock()
    await settle(page, 0)
    page.wait_for_timeout.assert_not_awaited()
    await settle(page, 5)
    page.wait_for_timeout.assert_awaited_once_with(5)
    await pause(0)
