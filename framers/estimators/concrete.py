"""Concrete estimator: slabs, footings, foundation walls and piers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..classifier import Category
from ..text import format_fixed, format_number
from .base import CONCRETE_WASTE, BaseEstimator, LineItem, TakeoffResult

CUBIC_FEET_PER_YARD = 27
CUBIC_METRES_PER_YARD = 0.764555
PREMIX_BAG_M3 = 0.014  # 30 kg bag
REBAR_SPACING_FT = 16 / 12
REBAR_STOCK_FT = 20
MAX_FOOTING_WIDTH_FT = 10

TYPE_LABELS: Dict[str, str] = {
    "slab": "Concrete Slab",
    "garage-slab": "Garage Slab",
    "footing": "Strip Footing",
    "wall": "Foundation Wall",
    "pier": "Pier / Post Pad",
}

_DEPTH = re.compile(r"(\d+\.?\d*)\s*(inch|inches|\"|in\b)")


@dataclass(frozen=True)
class ConcreteParameters:
    length: float = 30
    width: float = 30
    depth: float = 4  # inches
    slab_type: str = "slab"

    @property
    def cubic_feet(self) -> float:
        return self.length * self.width * (self.depth / 12)

    @property
    def cubic_yards(self) -> float:
        return self.cubic_feet / CUBIC_FEET_PER_YARD

    @property
    def cubic_metres(self) -> float:
        return self.cubic_yards * CUBIC_METRES_PER_YARD


def rebar_pieces(length: float, width: float) -> int:
    """#4 bar on a 16" grid both ways, in 20' sticks."""

    bars_along_length = math.floor(width / REBAR_SPACING_FT) + 1
    bars_along_width = math.floor(length / REBAR_SPACING_FT) + 1
    linear_feet = bars_along_length * length + bars_along_width * width
    return math.ceil(linear_feet / REBAR_STOCK_FT)


class ConcreteEstimator(BaseEstimator[ConcreteParameters]):
    category = Category.CONCRETE

    def extract(self, text: str, numbers: Sequence[float]) -> ConcreteParameters:
        lowered = text.lower()
        defaults = ConcreteParameters()
        length, width, depth, slab_type = defaults.length, defaults.width, defaults.depth, defaults.slab_type

        # Later presets override earlier ones.
        if re.search(r"footing|strip", lowered):
            slab_type, width, depth = "footing", 2, 8
        if re.search(r"foundation\s*wall|basement\s*wall", lowered):
            slab_type, width, depth = "wall", 0.67, 96
        if re.search(r"garage", lowered):
            slab_type, depth = "garage-slab", 4
        if re.search(r"pier|pad|post", lowered):
            slab_type, depth = "pier", 12
        if re.search(r"sidewalk|walkway", lowered):
            slab_type, depth = "slab", 4

        depth_match = _DEPTH.search(lowered)
        if depth_match:
            depth = float(depth_match.group(1))
        else:
            self.review.assumed("depth", f'{format_number(depth)}"')

        # The stated depth is not also a length or width.
        depth_used = depth_match is None
        dimensions: List[float] = []
        for number in numbers:
            if not depth_used and number == depth:
                depth_used = True
                continue
            if number > 0:
                dimensions.append(number)

        if len(dimensions) >= 2:
            length, width = dimensions[0], dimensions[1]
        elif len(dimensions) == 1:
            length = dimensions[0]
            if slab_type not in ("footing", "wall"):
                self.review.assumed("width", f"{format_number(width)}'")
        else:
            self.review.assumed("size", f"{format_number(length)}' x {format_number(width)}'")

        if slab_type == "footing" and width > MAX_FOOTING_WIDTH_FT:
            swapped = length
            length = width
            width = 2 if swapped > 5 else swapped
            self.review.add(
                f"Footing width looked too wide; using {format_number(length)}' long x "
                f"{format_number(width)}' wide.",
                severity="warning",
            )

        return ConcreteParameters(length=length, width=width, depth=depth, slab_type=slab_type)

    def calculate(self, params: ConcreteParameters) -> TakeoffResult:
        cubic_yards = params.cubic_yards * (1 + CONCRETE_WASTE)
        cubic_metres = params.cubic_metres * (1 + CONCRETE_WASTE)
        bags = math.ceil(cubic_metres / PREMIX_BAG_M3)
        label = TYPE_LABELS.get(params.slab_type, params.slab_type)
        dimensions = (
            f"{format_number(params.length)}' x {format_number(params.width)}' x "
            f'{format_number(params.depth)}"'
        )

        lines = [
            LineItem(
                "Volume",
                f"{format_fixed(cubic_yards, 2)} cu.yd / {format_fixed(cubic_metres, 2)} cu.m",
            ),
            LineItem("Type", label),
            LineItem("Dimensions", dimensions),
            LineItem("Area", f"{format_fixed(params.length * params.width)} sq.ft"),
            LineItem("Premix Bags", f"{bags} bags (30kg) if not ordering truck"),
        ]
        if params.slab_type in ("slab", "garage-slab"):
            lines.append(
                LineItem(
                    'Rebar (#4 @ 16" OC)',
                    f"{rebar_pieces(params.length, params.width)} pcs ({REBAR_STOCK_FT}' lengths)",
                )
            )

        return TakeoffResult(
            title=f"{TYPE_LABELS.get(params.slab_type, 'Concrete')}: {dimensions}",
            highlight=f"{format_fixed(cubic_yards, 1)} cu.yd ({format_fixed(cubic_metres, 1)} m³)",
            lines=tuple(lines),
            note="Alberta: 32 MPa min with air entrainment for exterior. Frost depth 4-5 ft. Order 5% extra.",
        )
