import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, Route
from playwright.async_api import async_playwright

from .config import BLOCK_IMAGES, SLOW_MO_MS, random_user_agent

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-infobars",
    "--window-size=1920,1080",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--mute-audio",
    "--no-first-run",
    "--disable-extensions",
]

STEALTH_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
Object.defineProperty(navigator, 'languages', { get: () => ['zh-CN', 'zh', 'en'] });
window.chrome = { runtime: {} };
"""


async def launch_browser(playwright: Playwright, headless: bool = True, proxy: str | None = None) -> Browser:
    """Launch a Chromium browser with flags suited to scraping."""
    return await playwright.chromium.launch(
        headless=headless,
        proxy={"server": proxy} if proxy else None,
        slow_mo=SLOW_MO_MS if SLOW_MO_MS > 0 else None,
        args=LAUNCH_ARGS,
    )


async def new_context(
    browser: Browser,
    locale: str = "zh-CN",
    timezone_id: str = "Asia/Shanghai",
    user_agent: str | None = None,
) -> BrowserContext:
    """Create a desktop browser context with realistic headers and locale.

    The context also gets a small init script hiding the most common
    automation fingerprints.
    """
    context = await browser.new_context(
        user_agent=user_agent or random_user_agent(),
        viewport={"width": 1920, "height": 1080},
        locale=locale,
        timezone_id=timezone_id,
        extra_http_headers={
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
            "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
            "Upgrade-Insecure-Requests": "1",
        },
    )
    await context.add_init_script(STEALTH_SCRIPT)
    return context


async def _block_images(route: Route) -> None:
    await route.abort()


class BrowserSession:
    """One browser plus one context, owned by a single crawl.

    `close()` releases everything exactly once; further calls do nothing.
    """

    def __init__(
        self,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        block_images: bool = BLOCK_IMAGES,
    ):
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.block_images = block_images
        self.closed = False

    async def new_page(self) -> Page:
        page = await self.context.new_page()
        if self.block_images:
            await page.route("**/*.{png,jpg,jpeg,gif,svg,ico,webp}", _block_images)
        return page

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        for name, closer in (
            ("context", self.context.close),
            ("browser", self.browser.close),
            ("playwright", self.playwright.stop),
        ):
            try:
                await closer()
            except Exception as e:
                logger.debug("Ignoring %s close error: %s", name, e)
        logger.info("Browser session closed")


async def open_session(headless: bool = True, proxy: Optional[str] = None, debug: bool = False) -> BrowserSession:
    """Start Playwright, launch Chromium and prepare a scraping context.

    Images stay enabled in debug mode so saved screenshots are readable.
    """
    playwright = await async_playwright().start()
    try:
        browser = await launch_browser(playwright, headless=headless, proxy=proxy)
        context = await new_context(browser)
    except Exception:
        await playwright.stop()
        raise
    return BrowserSession(playwright, browser, context, block_images=BLOCK_IMAGES and not debug)
