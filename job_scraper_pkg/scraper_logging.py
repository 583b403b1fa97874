import logging
import time
from typing import List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for console runs and the HTTP app."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def add_debug(debug_list: List[str], tag: str) -> None:
    """Append a debug tag to the in-flight list.

    Short structured tags trace which strategies and decisions a run took
    and are returned to the caller in the `debug` field.
    """
    debug_list.append(tag)


async def save_debug_files(page, prefix: str = "debug") -> Optional[dict]:
    """Save a full-page screenshot and HTML content to /tmp for diagnostics.

    Returns a map with file paths or None if saving fails. Only used when a
    request sets `debug`.
    """
    try:
        ts = int(time.time())
        screenshot_path = f"/tmp/{prefix}_{ts}.png"
        html_path = f"/tmp/{prefix}_{ts}.html"
        await page.screenshot(path=screenshot_path, full_page=True)
        content = await page.content()
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(content)
        return {"screenshot": screenshot_path, "html": html_path}
    except Exception as e:
        logging.getLogger(__name__).debug("Could not save debug files: %s", e)
        return None
