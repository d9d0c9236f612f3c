"""
Scrape Configuration Models
===========================

A scrape configuration is the reusable rule derived from one element of a page:

1. ColumnDefinition - one output column
   - `name`: the column header (need not be unique)
   - `selector`: how to read the value from each row anchor

2. ScrapeConfig - the whole rule
   - `main_selector`: XPath selecting the repeated row anchors
   - `columns`: ordered column definitions (order = display/export order)

Column selector shorthands:
===========================

"."          -> the anchor's own text content, trimmed
"@href"      -> the anchor's `href` attribute ("" when absent)
anything else -> XPath evaluated relative to the anchor; the first result wins

JSON form (camelCase on the wire):
{
    "mainSelector": "//ul/li",
    "columns": [
        {"name": "Text", "selector": "."},
        {"name": "Link", "selector": "a/@href"}
    ]
}
"""
from __future__ import annotations

from typing import List

from pydantic import Field

from ..exceptions import InvalidScrapeConfigError
from .base import BaseModel

EMPTY_MAIN_SELECTOR = "EmptyMainSelector"
EMPTY_COLUMN_LIST = "EmptyColumnList"


class ColumnDefinition(BaseModel):
    """A named column and the selector used to fill it for every row."""

    name: str = Field(description="Column header. Duplicate names share one data key.")
    selector: str = Field(description="'.', '@attribute' or an XPath relative to the row anchor.")

    model_config = {"frozen": True}


class ScrapeConfig(BaseModel):
    """
    The immutable input of one extraction run.

    The pipeline does not validate a config before running it; callers that
    want the `EmptyMainSelector` / `EmptyColumnList` checks use
    `ensure_executable()` first.
    """

    main_selector: str = Field(description="XPath selecting the row anchors, evaluated from the document root.")
    columns: List[ColumnDefinition] = Field(default_factory=list)

    model_config = {"frozen": True, "title": "Scrape Configuration"}

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def is_executable(self) -> bool:
        return bool(self.main_selector.strip()) and bool(self.columns)

    def ensure_executable(self) -> "ScrapeConfig":
        if not self.main_selector.strip():
            raise InvalidScrapeConfigError(EMPTY_MAIN_SELECTOR, "Main selector must not be empty.")
        if not self.columns:
            raise InvalidScrapeConfigError(EMPTY_COLUMN_LIST, "At least one column is required.")
        return self
