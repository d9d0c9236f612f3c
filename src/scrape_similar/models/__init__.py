from .base import BaseModel
from .config import ColumnDefinition, ScrapeConfig
from .preset import Preset
from .result import RowMetadata, ScrapedRow, ScrapeResult

__all__ = (
    "BaseModel",
    "ColumnDefinition",
    "Preset",
    "RowMetadata",
    "ScrapeConfig",
    "ScrapedRow",
    "ScrapeResult",
)
