"""Gable roof estimator: rafters, ridge board and roof sheathing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

from ..classifier import Category
from ..text import format_fixed, format_number
from .base import (
    SHEET_AREA_SQFT,
    BaseEstimator,
    LineItem,
    TakeoffResult,
    best_length,
    mentions_on_center,
    waste,
)

RIDGE_STOCK_FT = 16

_SLASH_PITCH = re.compile(r"(\d+)\s*[/\\]\s*12")
_SPOKEN_PITCH = re.compile(r"(\d+)\s*(twelve|over\s*12|on\s*12)")


@dataclass(frozen=True)
class RoofParameters:
    width: float = 28
    length: float = 40
    pitch: int = 5
    overhang: int = 16  # inches
    spacing: int = 16
    rafter_size: str = "2x8"

    @property
    def slope_factor(self) -> float:
        """Sloped length per foot of horizontal run."""
        return math.sqrt(1 + (self.pitch / 12) ** 2)


def roof_angle(pitch: float) -> float:
    return math.degrees(math.atan(pitch / 12))


class RoofEstimator(BaseEstimator[RoofParameters]):
    category = Category.ROOF

    def extract(self, text: str, numbers: Sequence[float]) -> RoofParameters:
        lowered = text.lower()
        defaults = RoofParameters()

        pitch = defaults.pitch
        match = _SLASH_PITCH.search(lowered) or _SPOKEN_PITCH.search(lowered)
        if match:
            pitch = int(match.group(1))
        else:
            self.review.assumed("roof pitch", f"{pitch}/12")

        rafter_size = defaults.rafter_size
        if re.search(r"2\s*x\s*6|2x6", lowered):
            rafter_size = "2x6"
        if re.search(r"2\s*x\s*10|2x10", lowered):
            rafter_size = "2x10"
        if re.search(r"2\s*x\s*12|2x12", lowered):
            rafter_size = "2x12"

        spacing = 24 if mentions_on_center(lowered, 24) else defaults.spacing

        width = defaults.width
        length = defaults.length
        dimensions = [n for n in numbers if n > 3 and n != pitch and n != 12]
        if len(dimensions) >= 2:
            width = min(dimensions[0], dimensions[1])
            length = max(dimensions[0], dimensions[1])
        elif len(dimensions) == 1:
            width = dimensions[0]
            self.review.assumed("building length", f"{format_number(length)}'")
        else:
            self.review.assumed("building size", f"{format_number(width)}' x {format_number(length)}'")
        self.review.assumed("overhang", f'{defaults.overhang}"')

        return RoofParameters(
            width=width,
            length=length,
            pitch=pitch,
            overhang=defaults.overhang,
            spacing=spacing,
            rafter_size=rafter_size,
        )

    def calculate(self, params: RoofParameters) -> TakeoffResult:
        spacing_ft = params.spacing / 12
        half_span = params.width / 2
        rise = (params.pitch / 12) * half_span
        rafter_run = math.sqrt(half_span ** 2 + rise ** 2)
        overhang_ft = params.overhang / 12
        overhang_length = overhang_ft * params.slope_factor
        rafter_length = rafter_run + overhang_length
        rafter_stock = best_length(math.ceil(rafter_length))

        per_side = math.floor(params.length / spacing_ft) + 1
        rafters = waste(per_side * 2)
        ridge_pcs = waste(math.ceil(params.length / RIDGE_STOCK_FT))

        # Both slopes, eave to ridge, including the overhang.
        roof_area = params.length * (half_span + overhang_ft) * params.slope_factor * 2
        sheathing_sheets = waste(math.ceil(roof_area / SHEET_AREA_SQFT))
        angle = roof_angle(params.pitch)

        lines = (
            LineItem("Rafters", f"{rafters} pcs ({params.rafter_size} x {rafter_stock}')"),
            LineItem("Rafter Length", f"{format_fixed(rafter_length, 1)}' (cut length)"),
            LineItem(
                "Ridge Board",
                f"{ridge_pcs} pcs ({RIDGE_STOCK_FT}'), {format_fixed(params.length)}' total",
            ),
            LineItem("Ridge Height", f"{format_fixed(rise, 1)}' above plate"),
            LineItem("Roof Sheathing", f"{sheathing_sheets} sheets (OSB/plywood 4'x8')"),
            LineItem("Roof Area", f"{format_fixed(roof_area)} sq.ft"),
            LineItem("Roof Angle", f"{format_fixed(angle, 1)} degrees ({params.pitch}/12)"),
        )

        return TakeoffResult(
            title=(
                f"Roof Rafters: {format_number(params.width)}' x {format_number(params.length)}', "
                f"{params.pitch}/12 pitch"
            ),
            highlight=f"{rafters} rafters",
            lines=lines,
            note="Alberta snow loads vary by region. Verify rafter spans per NBC 9.23 for your area.",
        )
