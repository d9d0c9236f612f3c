from __future__ import annotations

import logging
from typing import Any, List, Optional

from lxml import etree

from ..exceptions import SelectorSyntaxError
from ..utils.text import stringify_scalar
from .base import PathEvaluator, PathResult, ResultKind

log = logging.getLogger(__name__)


class LxmlPathEvaluator(PathEvaluator):
    """
    `PathEvaluator` backed by libxml2's XPath 1.0 engine via lxml.

    The evaluator holds the document root; `context=None` evaluates against the
    whole tree so absolute and `//` expressions behave as in a browser.
    """

    def __init__(self, document: etree._Element):
        if not isinstance(document, etree._Element):
            raise TypeError("`document` must be an lxml element.")
        self.document = document
        self.tree = document.getroottree()

    def _xpath(self, expression: str, context: Optional[Any]) -> Any:
        target = self.tree if context is None else context
        try:
            return target.xpath(expression)
        except (etree.XPathError, ValueError) as e:
            # ValueError covers NUL bytes and unencodable surrogates.
            raise SelectorSyntaxError(expression, f"Invalid XPath '{expression}': {e}") from e

    def evaluate(self, expression: str, context: Optional[Any] = None) -> List[PathResult]:
        raw = self._xpath(expression, context)
        if not isinstance(raw, list):
            if isinstance(raw, etree._ElementUnicodeResult):
                return [self._wrap(raw)]
            if isinstance(raw, str):
                return [PathResult(ResultKind.VALUE, raw)]
            return [PathResult(ResultKind.VALUE, stringify_scalar(raw))]

        results = []
        for item in raw:
            result = self._wrap(item)
            if result is not None:
                results.append(result)
        return results

    def count(self, expression: str, context: Optional[Any] = None) -> int:
        raw = self._xpath(expression, context)
        if not isinstance(raw, list):
            return 1
        return sum(1 for item in raw if self._wrap(item) is not None)

    @staticmethod
    def _wrap(item: Any) -> Optional[PathResult]:
        if isinstance(item, etree._Element):
            # Comments and processing instructions have a non-string tag.
            if isinstance(item.tag, str):
                return PathResult(ResultKind.ELEMENT, item)
            return None
        if isinstance(item, etree._ElementUnicodeResult):
            if item.is_attribute:
                return PathResult(ResultKind.ATTRIBUTE, str(item))
            if item.is_text or item.is_tail:
                return PathResult(ResultKind.TEXT, str(item))
            return PathResult(ResultKind.VALUE, str(item))
        if isinstance(item, (str, bytes)):
            if isinstance(item, bytes):
                item = item.decode("utf-8", errors="ignore")
            return PathResult(ResultKind.VALUE, item)
        # Namespace tuples and other exotic results.
        return None
