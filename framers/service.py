"""High-level helpers for interpreting framing requests programmatically."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .classifier import Category, classify
from .estimators import ESTIMATOR_REGISTRY, BaseEstimator
from .estimators.base import LineItem, TakeoffResult, parameters_to_dict
from .human_review import ReviewChecklist
from .text import tokenize

logger = logging.getLogger(__name__)

NOT_UNDERSTOOD = TakeoffResult(
    title="Not sure what to calculate",
    highlight="?",
    lines=(
        LineItem(
            "Tip",
            "Try mentioning: wall, studs, floor joists, roof rafters, sheathing/OSB, or concrete/slab/footing",
        ),
    ),
    note='Example: "I need studs for a 40 foot wall, 9 feet high, 3 windows and a door"',
    error=True,
)


NOTHING_TO_CALCULATE = TakeoffResult(
    title="Nothing to calculate",
    highlight="?",
    note="Describe what you are framing, e.g. '40 foot wall, 9 feet high'.",
    error=True,
)


@dataclass
class InterpretationRun:
    """Container describing one interpreted request."""

    query: str
    category: Category
    parameters: Optional[Any]
    result: TakeoffResult
    review: ReviewChecklist

    @property
    def blank(self) -> bool:
        """True when there was no text to interpret."""
        return not self.query.strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "category": self.category.value,
            "parameters": parameters_to_dict(self.parameters) if self.parameters is not None else None,
            "result": self.result.to_dict(),
            "review": self.review.to_dicts(),
        }


def run_interpretation(text: str, *, review: ReviewChecklist | None = None) -> InterpretationRun:
    """Classify ``text``, extract its parameters and compute the takeoff."""

    review = review or ReviewChecklist()
    if not text or not text.strip():
        return InterpretationRun(
            query=text or "",
            category=Category.UNRECOGNIZED,
            parameters=None,
            result=NOTHING_TO_CALCULATE,
            review=review,
        )

    tokens = tokenize(text)
    category = classify(text)

    if category is Category.UNRECOGNIZED:
        return InterpretationRun(
            query=text, category=category, parameters=None, result=NOT_UNDERSTOOD, review=review
        )

    estimator_cls: type[BaseEstimator] = ESTIMATOR_REGISTRY[category]
    estimator = estimator_cls(review=review)
    parameters, result = estimator.estimate(text, tokens.numbers)
    logger.debug("Interpreted %r as %s with %s", text, category.value, parameters)

    return InterpretationRun(
        query=text, category=category, parameters=parameters, result=result, review=review
    )


def interpret(text: str) -> TakeoffResult:
    """Return the takeoff for a free-form request, or an ``error`` result when it is blank or not understood."""

    return run_interpretation(text).result
