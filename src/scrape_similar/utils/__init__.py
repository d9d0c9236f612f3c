from __future__ import annotations

from .aliases import AliasGenerator
from .text import clean_text, is_blank, stringify_scalar

__all__ = (
    "AliasGenerator",
    "clean_text",
    "is_blank",
    "stringify_scalar",
)
