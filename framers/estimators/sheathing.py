"""Sheet goods estimator for wall, roof and subfloor sheathing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

from ..classifier import Category
from ..text import format_fixed, format_number
from .base import SHEET_AREA_SQFT, BaseEstimator, LineItem, TakeoffResult, waste

_SQUARE_FEET = re.compile(r"sq(uare)?\s*f(ee|oo)?t")


@dataclass(frozen=True)
class SheathingParameters:
    length: float = 40
    height: float = 8
    material: str = "OSB"
    opening_area: float = 0

    @property
    def gross_area(self) -> float:
        return self.length * self.height

    @property
    def net_area(self) -> float:
        return max(0.0, self.gross_area - self.opening_area)


class SheathingEstimator(BaseEstimator[SheathingParameters]):
    category = Category.SHEATHING

    def extract(self, text: str, numbers: Sequence[float]) -> SheathingParameters:
        lowered = text.lower()
        defaults = SheathingParameters()

        material = defaults.material
        height = defaults.height
        if re.search(r"plywood|ply", lowered):
            material = "Plywood"
        if re.search(r"subfloor|sub\s*floor", lowered):
            # Subfloor requests are an area, entered as length x 1.
            material = "T&G Plywood"
            height = 1
        if re.search(r"roof", lowered):
            material = "OSB (Roof)"

        length = defaults.length
        dimensions = [n for n in numbers if n > 1]
        if len(dimensions) >= 2:
            length = max(dimensions[0], dimensions[1])
            height = min(dimensions[0], dimensions[1])
        elif len(dimensions) == 1:
            length = dimensions[0]
        else:
            self.review.assumed("area", f"{format_number(length)}' x {format_number(height)}'")

        if _SQUARE_FEET.search(lowered) and len(dimensions) == 1:
            length = dimensions[0]
            height = 1
            self.review.add(f"Read {format_number(length)} as a direct area in square feet.")

        return SheathingParameters(
            length=length,
            height=height,
            material=material,
            opening_area=defaults.opening_area,
        )

    def calculate(self, params: SheathingParameters) -> TakeoffResult:
        net_area = params.net_area
        sheets = waste(math.ceil(net_area / SHEET_AREA_SQFT))

        lines = [
            LineItem("Sheets Needed", f"{sheets} sheets (4'x8')"),
            LineItem("Material", params.material),
            LineItem("Gross Area", f"{format_fixed(params.gross_area)} sq.ft"),
        ]
        if params.opening_area > 0:
            lines.append(LineItem("Less Openings", f"-{format_number(params.opening_area)} sq.ft"))
        lines.append(LineItem("Net Area", f"{format_fixed(net_area)} sq.ft"))

        return TakeoffResult(
            title=(
                f"Sheathing: {format_number(params.length)}' x {format_number(params.height)}' "
                f"{params.material}"
            ),
            highlight=f"{sheets} sheets",
            lines=tuple(lines),
            note='Wall sheathing: 7/16" OSB typical. Roof: 1/2" or 5/8". Subfloor: 3/4" T&G.',
        )
