"""
Scrape Similar
"""
__version__ = "0.1.0"

from .document import load_document
from .exceptions import (
    InvalidScrapeConfigError,
    NoMatchingElementError,
    ParserError,
    ScraperError,
    SelectorSyntaxError,
)
from .extraction import extract_data, scrape_page
from .heuristics import AnchorKind, guess_scrape_config, guess_scrape_config_from_selector
from .models import ColumnDefinition, Preset, RowMetadata, ScrapeConfig, ScrapedRow, ScrapeResult
from .presets import SYSTEM_PRESETS, get_preset
from .scraper import Scraper, scrape_html
from .xpath import LxmlPathEvaluator, PathEvaluator, PathResult, ResultKind, generate_xpath, minimize_xpath

__all__ = [
    "AnchorKind",
    "ColumnDefinition",
    "InvalidScrapeConfigError",
    "LxmlPathEvaluator",
    "NoMatchingElementError",
    "ParserError",
    "PathEvaluator",
    "PathResult",
    "Preset",
    "ResultKind",
    "RowMetadata",
    "SYSTEM_PRESETS",
    "ScrapeConfig",
    "ScrapeResult",
    "ScrapedRow",
    "Scraper",
    "ScraperError",
    "SelectorSyntaxError",
    "extract_data",
    "generate_xpath",
    "get_preset",
    "guess_scrape_config",
    "guess_scrape_config_from_selector",
    "load_document",
    "minimize_xpath",
    "scrape_html",
    "scrape_page",
]
