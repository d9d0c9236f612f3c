"""
XPath layer: evaluation interface, lxml implementation, absolute addressing
and selector minimization.
"""
from .address import BODY_XPATH, generate_xpath, get_element_index
from .base import PathEvaluator, PathResult, ResultKind
from .evaluator import LxmlPathEvaluator
from .minimizer import minimize_xpath

__all__ = [
    "BODY_XPATH",
    "LxmlPathEvaluator",
    "PathEvaluator",
    "PathResult",
    "ResultKind",
    "generate_xpath",
    "get_element_index",
    "minimize_xpath",
]
