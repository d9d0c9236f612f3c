from __future__ import annotations

from typing import Any, Optional

from .document import Markup, load_document
from .extraction import extract_data, scrape_page
from .heuristics import guess_scrape_config, guess_scrape_config_from_selector
from .models.config import ColumnDefinition, ScrapeConfig
from .models.result import ScrapeResult
from .xpath.address import generate_xpath
from .xpath.base import PathEvaluator
from .xpath.evaluator import LxmlPathEvaluator
from .xpath.minimizer import minimize_xpath


class Scraper:
    """
    Entry point tying one document snapshot to the extraction engine:
    evaluation, selector minimization, config guessing and row extraction.

    The scraper keeps no state between calls besides the evaluator, so calls
    on an unchanged document are repeatable.
    """

    def __init__(self, evaluator: PathEvaluator):
        """
        Initializes the Scraper.

        Args:
            evaluator: The PathEvaluator bound to the document to scrape.
        """
        if not isinstance(evaluator, PathEvaluator):
            raise TypeError("`evaluator` must be a PathEvaluator instance.")
        self.evaluator = evaluator

    @classmethod
    def from_html(cls, markup: Markup, encoding: Optional[str] = None) -> "Scraper":
        """Parse `markup` and build a scraper over an lxml evaluator."""
        return cls(LxmlPathEvaluator(load_document(markup, encoding)))

    @property
    def document(self) -> Any:
        return getattr(self.evaluator, "document", None)

    def count(self, selector: str) -> int:
        return self.evaluator.count(selector)

    def select(self, selector: str) -> list:
        """Elements matched by `selector` from the document root."""
        return self.evaluator.evaluate_elements(selector)

    def xpath_for(self, element: Any) -> str:
        return generate_xpath(element)

    def minimize(self, element: Any) -> str:
        return minimize_xpath(element, self.evaluator)

    def guess_config(self, element: Any) -> ScrapeConfig:
        return guess_scrape_config(element, self.evaluator)

    def guess_config_from_selector(self, selector: str) -> ScrapeConfig:
        return guess_scrape_config_from_selector(selector, self.evaluator)

    def extract(self, element: Any, column: ColumnDefinition) -> str:
        return extract_data(element, column, self.evaluator)

    def scrape(self, config: ScrapeConfig) -> ScrapeResult:
        return scrape_page(config, self.evaluator)


def scrape_html(markup: Markup, config: ScrapeConfig) -> ScrapeResult:
    """
    High-level function to take raw HTML and a scrape config,
    and return the extracted rows.
    """
    return Scraper.from_html(markup).scrape(config)
