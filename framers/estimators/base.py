"""Base classes and utilities for framing estimators."""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Dict, Generic, NamedTuple, Sequence, Tuple, TypeVar

from ..classifier import Category
from ..human_review import ReviewChecklist

WASTE = 0.10
CONCRETE_WASTE = WASTE / 2
LUMBER_LENGTHS: Tuple[int, ...] = (8, 10, 12, 14, 16, 20)
SHEET_AREA_SQFT = 32  # 4' x 8'


def waste(quantity: float) -> int:
    """Add lumber/sheet waste and round up to whole pieces."""

    return math.ceil(quantity * (1 + WASTE))


def best_length(feet: float) -> int:
    """Smallest stock length that covers ``feet``; the longest stock if none does."""

    for length in LUMBER_LENGTHS:
        if length >= feet:
            return length
    return LUMBER_LENGTHS[-1]


def mentions_on_center(text: str, inches: int, *, inch_spacing: bool = False) -> bool:
    """True when ``text`` asks for ``inches`` on-center spacing ("24 o.c.", "12 on center")."""

    suffixes = r"on\s*cent|o\.?c|oc"
    if inch_spacing:
        suffixes += r"|inch\s*spac"
    return re.search(rf"{inches}\s*({suffixes})", text) is not None


class LineItem(NamedTuple):
    """One row of an estimate, in display order."""

    label: str
    value: str


@dataclass(frozen=True)
class TakeoffResult:
    """Complete result of an estimator."""

    title: str
    highlight: str
    lines: Tuple[LineItem, ...] = ()
    note: str = ""
    error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "highlight": self.highlight,
            "lines": [{"label": item.label, "value": item.value} for item in self.lines],
            "note": self.note,
            "error": self.error,
        }


P = TypeVar("P")


class BaseEstimator(Generic[P]):
    """Common interface for all framing estimators.

    ``extract`` turns request text into a fully populated parameter record and
    ``calculate`` turns that record into a :class:`TakeoffResult`. Neither
    raises on odd input; anything not found in the text keeps its default and
    is noted on the review checklist.
    """

    category: Category

    def __init__(self, *, review: ReviewChecklist | None = None) -> None:
        self.review = review if review is not None else ReviewChecklist()

    def extract(self, text: str, numbers: Sequence[float]) -> P:
        raise NotImplementedError

    def calculate(self, params: P) -> TakeoffResult:
        raise NotImplementedError

    def estimate(self, text: str, numbers: Sequence[float]) -> Tuple[P, TakeoffResult]:
        params = self.extract(text, numbers)
        return params, self.calculate(params)


def parameters_to_dict(params: Any) -> Dict[str, Any]:
    if is_dataclass(params) and not isinstance(params, type):
        return asdict(params)
    return dict(params)
