from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .base import BaseModel


class RowMetadata(BaseModel):
    original_index: int = Field(ge=0, description="Rank of the anchor in main-selector order.")
    is_empty: bool = Field(description="True when every extracted value is blank.")


class ScrapedRow(BaseModel):
    data: Dict[str, str] = Field(default_factory=dict)
    metadata: RowMetadata


class ScrapeResult(BaseModel):
    """
    Rows produced by one extraction run.

    `column_order` is authoritative for display order: a row's `data` may
    iterate in another order, and duplicate column names appear twice here
    while sharing one key in `data`.
    """

    data: List[ScrapedRow] = Field(default_factory=list)
    column_order: List[str] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.data)

    @property
    def empty_count(self) -> int:
        return sum(1 for row in self.data if row.metadata.is_empty)

    def rows(self, hide_empty: bool = False) -> List[ScrapedRow]:
        if not hide_empty:
            return list(self.data)
        return [row for row in self.data if not row.metadata.is_empty]

    def summary(self) -> str:
        return f"{self.row_count} rows found, {self.empty_count} empty"
