from __future__ import annotations

import logging
from typing import Any, Dict, List

from .document import element_text
from .exceptions import SelectorSyntaxError
from .models.config import ColumnDefinition, ScrapeConfig
from .models.result import RowMetadata, ScrapedRow, ScrapeResult
from .utils.text import clean_text, is_blank
from .xpath.base import PathEvaluator

log = logging.getLogger(__name__)

SELF_SELECTOR = "."


def extract_data(element: Any, column: ColumnDefinition, evaluator: PathEvaluator) -> str:
    """
    Read one column value from a row anchor.

    - "."        -> the anchor's trimmed text content
    - "@name"    -> the anchor's `name` attribute, "" when absent
    - otherwise  -> first result of the XPath evaluated relative to the anchor;
                    elements give their trimmed text, strings are trimmed

    A malformed column selector yields "" so the rest of the row survives.
    """
    selector = column.selector

    if selector == SELF_SELECTOR:
        return element_text(element)

    if selector.startswith("@") and "(" not in selector:
        try:
            return element.get(selector[1:]) or ""
        except (ValueError, TypeError) as e:
            log.error(f"Error extracting column '{column.name}': invalid attribute name {selector[1:]!r} ({e})")
            return ""

    try:
        results = evaluator.evaluate(selector, element)
    except SelectorSyntaxError as e:
        log.error(f"Error extracting column '{column.name}': {e}")
        return ""

    if not results:
        return ""
    first = results[0]
    if first.is_element:
        return element_text(first.value)
    return clean_text(first.value)


def extract_row(element: Any, index: int, columns: List[ColumnDefinition], evaluator: PathEvaluator) -> ScrapedRow:
    data: Dict[str, str] = {}
    is_empty = True
    for column in columns:
        value = extract_data(element, column, evaluator)
        # Duplicate column names: last write wins.
        data[column.name] = value
        if not is_blank(value):
            is_empty = False
    return ScrapedRow(data=data, metadata=RowMetadata(original_index=index, is_empty=is_empty))


def scrape_page(config: ScrapeConfig, evaluator: PathEvaluator) -> ScrapeResult:
    """
    Run `config` against the evaluator's document.

    Every anchor matched by the main selector produces one row, in document
    order, including rows whose values are all blank (flagged with
    `metadata.is_empty`).

    Raises:
        SelectorSyntaxError: the main selector is malformed.
    """
    try:
        anchors = evaluator.evaluate_elements(config.main_selector)
    except SelectorSyntaxError as e:
        log.error(f"Error scraping page: {e}")
        raise

    rows = [extract_row(element, index, config.columns, evaluator) for index, element in enumerate(anchors)]
    result = ScrapeResult(data=rows, column_order=config.column_names)
    log.info(f"Scraped '{config.main_selector}': {result.summary()}.")
    return result
