from __future__ import annotations

from pydantic import Field

from .base import BaseModel
from .config import ScrapeConfig


class Preset(BaseModel):
    """A named, reusable ScrapeConfig."""

    id: str
    name: str
    config: ScrapeConfig
    created_at: int = Field(default=0, description="Creation time in epoch milliseconds; 0 for built-ins.")

    model_config = {"frozen": True}
