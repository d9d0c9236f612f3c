__all__ = (
    "ScraperError",
    "ParserError",
    "SelectorSyntaxError",
    "InvalidScrapeConfigError",
    "NoMatchingElementError",
)


class ScraperError(Exception):
    """Base Scraper Error"""


class ParserError(Exception):
    """Parser Error"""


class SelectorSyntaxError(ScraperError):
    """The XPath expression could not be parsed or evaluated."""

    def __init__(self, selector: str, message: str = ""):
        self.selector = selector
        super().__init__(message or f"Invalid selector: {selector!r}")


class InvalidScrapeConfigError(ScraperError):
    """A ScrapeConfig cannot be executed (empty main selector or no columns)."""

    def __init__(self, reason: str, message: str = ""):
        self.reason = reason
        super().__init__(message or reason)


class NoMatchingElementError(ScraperError):
    """The selector matched no element to guess a config from."""
