class ScrapeError(Exception):
    """Base class for failures reported by the scraper runners."""


class SetupError(ScrapeError):
    """The browser, the listing page or the API source could not be brought up."""


class DetailError(ScrapeError):
    """A single detail page could not be loaded; the crawl continues."""


class PersistenceError(ScrapeError):
    """The bulk write to the job store failed."""
