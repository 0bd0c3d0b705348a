"""Framing estimator registry."""

from __future__ import annotations

from typing import Dict, Type

from ..classifier import Category
from .base import BaseEstimator, LineItem, TakeoffResult
from .concrete import ConcreteEstimator, ConcreteParameters
from .floor import FloorEstimator, FloorParameters
from .roof import RoofEstimator, RoofParameters
from .sheathing import SheathingEstimator, SheathingParameters
from .wall import WallEstimator, WallParameters

ESTIMATOR_REGISTRY: Dict[Category, Type[BaseEstimator]] = {
    WallEstimator.category: WallEstimator,
    FloorEstimator.category: FloorEstimator,
    RoofEstimator.category: RoofEstimator,
    SheathingEstimator.category: SheathingEstimator,
    ConcreteEstimator.category: ConcreteEstimator,
}

_unhandled = set(Category) - set(ESTIMATOR_REGISTRY) - {Category.UNRECOGNIZED}
if _unhandled:  # pragma: no cover - guards against adding a category without an estimator
    raise RuntimeError(f"No estimator registered for: {sorted(c.value for c in _unhandled)}")

__all__ = [
    "BaseEstimator",
    "ConcreteEstimator",
    "ConcreteParameters",
    "ESTIMATOR_REGISTRY",
    "FloorEstimator",
    "FloorParameters",
    "LineItem",
    "RoofEstimator",
    "RoofParameters",
    "SheathingEstimator",
    "SheathingParameters",
    "TakeoffResult",
    "WallEstimator",
    "WallParameters",
]
