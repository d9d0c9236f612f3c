"""
Selector minimization.

Turns the exact address of a clicked element into a shorter selector that a
user can reuse for "similar" elements:

1. Trailing predicates are dropped while the expression still matches a
   single node, so `/html/body/ul/li[2]` widens to `/html/body/ul/li`. The
   count seen when the loop stops becomes the target count.
2. Leading steps are then stripped (`/html/body/ul/li` -> `//body/ul/li` ->
   `//ul/li`) for as long as the match count stays equal to the target count.

Only counts are compared after trimming, never node identity: a trimmed
selector elsewhere in the page with the same cardinality is accepted.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from .address import generate_xpath
from .base import PathEvaluator

log = logging.getLogger(__name__)

LAST_PREDICATE_RE = re.compile(r"^(.*)(\[\d+\])([^\[\]]*)$")
FIRST_SEGMENT_RE = re.compile(r"^(/+[^/]+)(.*)$")


def minimize_xpath(node: Any, evaluator: PathEvaluator) -> str:
    """
    Return the shortest selector for `node` that keeps the match count found
    while relaxing its positional predicates.

    Raises:
        SelectorSyntaxError: propagated from `evaluator`.
    """
    xpath = generate_xpath(node)
    log.debug(f"Minimizing XPath '{xpath}'")

    selection = None
    match = LAST_PREDICATE_RE.match(xpath)
    while match is not None:
        selection = evaluator.count(xpath)
        if selection > 1:
            break
        xpath = match.group(1) + match.group(3)
        match = LAST_PREDICATE_RE.match(xpath)

    if selection is None:
        return xpath

    match = FIRST_SEGMENT_RE.match(xpath)
    while match is not None and match.group(2):
        trimmed = "/" + match.group(2)
        if evaluator.count(trimmed) != selection:
            break
        xpath = trimmed
        match = FIRST_SEGMENT_RE.match(xpath)

    log.debug(f"Minimized XPath to '{xpath}' ({selection} match(es) at the stop point)")
    return xpath
