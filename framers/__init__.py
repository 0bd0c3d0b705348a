"""Plain-language framing takeoff calculator."""

from .classifier import Category, classify
from .estimators.base import LineItem, TakeoffResult
from .service import InterpretationRun, interpret, run_interpretation

__all__ = [
    "Category",
    "InterpretationRun",
    "LineItem",
    "TakeoffResult",
    "classify",
    "interpret",
    "run_interpretation",
]
