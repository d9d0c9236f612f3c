"""
Path evaluation interface.

Every part of the engine (address minimization, config guessing, row
extraction) talks to the document through a `PathEvaluator`. Implementations
only provide `evaluate`; counting and the element/value projections are built
on top of it here.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from ..exceptions import SelectorSyntaxError

log = logging.getLogger(__name__)


class ResultKind(str, Enum):
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    TEXT = "text"
    VALUE = "value"  # string/number/boolean XPath result


@dataclass(frozen=True)
class PathResult:
    """One item of an evaluation: an element handle or a string value."""

    kind: ResultKind
    value: Any

    @property
    def is_element(self) -> bool:
        return self.kind is ResultKind.ELEMENT


class PathEvaluator(ABC):
    """Evaluates XPath expressions against one document snapshot."""

    @abstractmethod
    def evaluate(self, expression: str, context: Optional[Any] = None) -> List[PathResult]:
        """
        Evaluate `expression` relative to `context` (the document root when
        None) and return results in document order.

        Raises:
            SelectorSyntaxError: the expression cannot be parsed or evaluated.
        """

    def count(self, expression: str, context: Optional[Any] = None) -> int:
        return len(self.evaluate(expression, context))

    def evaluate_elements(self, expression: str, context: Optional[Any] = None) -> List[Any]:
        """Element results only. Raises `SelectorSyntaxError` like `evaluate`."""
        return [result.value for result in self.evaluate(expression, context) if result.is_element]

    def evaluate_values(self, expression: str, context: Optional[Any] = None) -> List[Union[Any, str]]:
        """
        Elements and string values, or an empty list when the expression is
        malformed. For callers that tolerate partial results.
        """
        try:
            results = self.evaluate(expression, context)
        except SelectorSyntaxError as e:
            log.error(f"Error evaluating XPath '{expression}': {e}")
            return []
        return [result.value for result in results]
