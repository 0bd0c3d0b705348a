"""Floor system estimator: joists, rim board, blocking and subfloor."""

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

RIM_STOCK_FT = 16
BLOCKING_ROW_SPACING_FT = 8


@dataclass(frozen=True)
class FloorParameters:
    span: float = 14
    width: float = 28
    spacing: int = 16
    joist_size: str = "2x10"


class FloorEstimator(BaseEstimator[FloorParameters]):
    category = Category.FLOOR

    def extract(self, text: str, numbers: Sequence[float]) -> FloorParameters:
        lowered = text.lower()
        defaults = FloorParameters()

        joist_size = defaults.joist_size
        if re.search(r"2\s*x\s*8|2x8", lowered):
            joist_size = "2x8"
        if re.search(r"2\s*x\s*12|2x12", lowered):
            joist_size = "2x12"
        if re.search(r"tji|i-joist|i\s*joist", lowered):
            joist_size = "TJI"
        if joist_size == defaults.joist_size:
            self.review.assumed("joist size", joist_size)

        spacing = defaults.spacing
        if mentions_on_center(lowered, 24):
            spacing = 24
        if mentions_on_center(lowered, 12):
            spacing = 12

        span = defaults.span
        width = defaults.width
        dimensions = [n for n in numbers if n > 3]
        if len(dimensions) >= 2:
            # Joists always run the short way: the larger dimension is what they space along.
            width = max(dimensions[0], dimensions[1])
            span = min(dimensions[0], dimensions[1])
        elif len(dimensions) == 1:
            span = dimensions[0]
            self.review.assumed("floor width", f"{format_number(width)}'")
        else:
            self.review.assumed("floor dimensions", f"{format_number(width)}' x {format_number(span)}'")

        return FloorParameters(span=span, width=width, spacing=spacing, joist_size=joist_size)

    def calculate(self, params: FloorParameters) -> TakeoffResult:
        spacing_ft = params.spacing / 12
        joists = waste(math.floor(params.width / spacing_ft) + 1)
        joist_length = best_length(params.span)
        area = params.span * params.width
        subfloor_sheets = waste(math.ceil(area / SHEET_AREA_SQFT))
        perimeter = params.span * 2 + params.width * 2
        rim_pcs = waste(math.ceil(perimeter / RIM_STOCK_FT))
        blocking_rows = max(1, math.floor(params.span / BLOCKING_ROW_SPACING_FT))
        blocking_pcs = waste(blocking_rows * (joists - 1))

        lines = (
            LineItem("Floor Joists", f"{joists} pcs ({params.joist_size} x {joist_length}')"),
            LineItem("Rim Board", f"{rim_pcs} pcs ({params.joist_size} x {RIM_STOCK_FT}')"),
            LineItem(
                "Blocking",
                f"{blocking_pcs} pcs ({blocking_rows} row{'s' if blocking_rows > 1 else ''})",
            ),
            LineItem("Subfloor", f"{subfloor_sheets} sheets (3/4\" T&G, 4'x8')"),
            LineItem("Floor Area", f"{format_fixed(area)} sq.ft"),
        )

        return TakeoffResult(
            title=(
                f"Floor Joists: {format_number(params.width)}' x {format_number(params.span)}' span, "
                f'{params.spacing}" OC'
            ),
            highlight=f"{joists} joists",
            lines=lines,
            note="Verify span per NBC 9.23. 3/4\" T&G plywood subfloor standard for Alberta residential.",
        )
