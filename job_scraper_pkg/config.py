import os
import random


MONGO_URI = os.environ.get("JOBS_MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.environ.get("JOBS_MONGO_DB", "software")
MONGO_COLLECTION = os.environ.get("JOBS_MONGO_COLLECTION", "jobCollection")
MONGO_TIMEOUT_MS = int(os.environ.get("JOBS_MONGO_TIMEOUT_MS", "5000"))

SLOW_MO_MS = int(os.environ.get("SCRAPER_SLOW_MO_MS", "0"))
BLOCK_IMAGES = os.environ.get("SCRAPER_BLOCK_IMAGES", "true").lower() != "false"
HEADLESS = os.environ.get("SCRAPER_HEADLESS", "true").lower() in ["1", "true", "yes"]

ADZUNA_APP_ID = os.environ.get("ADZUNA_APP_ID", "")
ADZUNA_APP_KEY = os.environ.get("ADZUNA_APP_KEY", "")

SITE_ORIGIN = "https://www.zhipin.com"
DEFAULT_KEYWORD = "前端开发"
DEFAULT_CITY = "101010100"
MAX_DETAIL_FETCHES = 10
TOP_SKILLS = 10


def user_agents():
    """Return a curated pool of desktop Chrome user agents."""
    return [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ]


def random_user_agent():
    """Pick a random user agent from the pool.

    Callers can seed `random` externally when they need reproducibility.
    """
    return random.choice(user_agents())
