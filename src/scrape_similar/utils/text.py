"""
Text helpers shared by the extraction pipeline and the config heuristics.
"""
from __future__ import annotations

import math
from typing import Any

__all__ = [
    "clean_text",
    "is_blank",
    "stringify_scalar",
]


def clean_text(value: Any) -> str:
    """
    Return `value` as a trimmed string, treating None as empty.

    Examples:
        >>> clean_text("  Hello  ")
        'Hello'
        >>> clean_text(None)
        ''
    """
    if value is None:
        return ""
    return str(value).strip()


def is_blank(value: Any) -> bool:
    """True for None, "" and whitespace-only strings."""
    return clean_text(value) == ""


def stringify_scalar(value: Any) -> str:
    """
    Render an XPath scalar (string, number or boolean) the way a browser does.

    Examples:
        >>> stringify_scalar(3.0)
        '3'
        >>> stringify_scalar(2.5)
        '2.5'
        >>> stringify_scalar(True)
        'true'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return clean_text(value)
