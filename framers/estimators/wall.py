"""Wall framing estimator: studs, plates, openings and corners."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..classifier import Category
from ..text import format_fixed, format_number
from .base import BaseEstimator, LineItem, TakeoffResult, mentions_on_center, waste

OPENING_WIDTH_FT = 3  # Typical window/door rough opening.
PLATE_STOCK_FT = 16
HEADER_SIZE = "2-2x6"


@dataclass(frozen=True)
class WallParameters:
    length: float = 40
    height: float = 8
    spacing: int = 16
    stud_type: str = "2x6"
    corners: int = 4
    intersections: int = 0
    windows: int = 0
    doors: int = 0


@dataclass(frozen=True)
class StudBreakdown:
    """Intermediate stud counts; ``base - removed`` is allowed to go negative."""

    base: int
    removed: int
    king: int
    jack: int
    cripples: int
    corner: int
    intersection: int

    @property
    def subtotal(self) -> int:
        return (
            self.base
            - self.removed
            + self.king
            + self.jack
            + self.cripples
            + self.corner
            + self.intersection
        )

    @property
    def total(self) -> int:
        return waste(self.subtotal)


def stud_breakdown(params: WallParameters) -> StudBreakdown:
    spacing_ft = params.spacing / 12
    removed_per_opening = math.floor(OPENING_WIDTH_FT / spacing_ft)
    openings = params.windows + params.doors
    return StudBreakdown(
        base=math.floor(params.length / spacing_ft) + 1,
        removed=removed_per_opening * openings,
        king=openings * 2,
        jack=openings * 2,
        # Windows get a cripple above and below, doors only above.
        cripples=params.windows * 2 + params.doors,
        corner=params.corners * 3,
        intersection=params.intersections * 3,
    )


def stud_label(height: float) -> str:
    if height <= 8:
        return "92-5/8\" precut 8'"
    if height <= 9:
        return "104-5/8\" precut 9'"
    if height <= 10:
        return "116-5/8\" precut 10'"
    return f'{format_number(height * 12)}" custom'


class WallEstimator(BaseEstimator[WallParameters]):
    category = Category.WALL

    def extract(self, text: str, numbers: Sequence[float]) -> WallParameters:
        lowered = text.lower()
        defaults = WallParameters()

        stud_type = defaults.stud_type
        if re.search(r"interior|partition|2\s*x\s*4|2x4", lowered):
            stud_type = "2x4"

        spacing = 24 if mentions_on_center(lowered, 24, inch_spacing=True) else defaults.spacing

        windows = _count(lowered, "window")
        doors = _count(lowered, "door")
        if doors is None:
            doors = 1 if re.search(r"a\s+door|one\s+door", lowered) else defaults.doors
        if windows is None:
            windows = 1 if re.search(r"a\s+window|one\s+window", lowered) else defaults.windows
        corners = _count(lowered, "corner")
        if corners is None:
            corners = defaults.corners
            self.review.assumed("corner count", f"{corners} corners")

        # Opening/corner counts and the usual 16"/24" spacings are not dimensions.
        excluded = {windows, doors, corners, 24, 16}
        dimensions: List[float] = [n for n in numbers if n not in excluded]

        length = defaults.length
        height = defaults.height
        if dimensions:
            length = dimensions[0]
        else:
            self.review.assumed("wall length", f"{format_number(length)}'")
        if len(dimensions) >= 2 and 4 <= dimensions[1] <= 20:
            height = dimensions[1]
        else:
            self.review.assumed("wall height between 4' and 20'", f"{format_number(height)}'")

        return WallParameters(
            length=length,
            height=height,
            spacing=spacing,
            stud_type=stud_type,
            corners=corners,
            intersections=defaults.intersections,
            windows=windows,
            doors=doors,
        )

    def calculate(self, params: WallParameters) -> TakeoffResult:
        studs = stud_breakdown(params)
        total_studs = studs.total

        # Double top plate + single bottom plate.
        plate_lin_ft = params.length * 3
        plate_pcs = waste(math.ceil(plate_lin_ft / PLATE_STOCK_FT))

        lines = [
            LineItem("Total Studs", f"{total_studs} pcs ({params.stud_type} x {stud_label(params.height)})"),
            LineItem(
                "Plates",
                f"{plate_pcs} pcs ({params.stud_type} x {PLATE_STOCK_FT}') = {format_fixed(plate_lin_ft)} lin.ft",
            ),
            LineItem("King Studs", f"{studs.king} (included in total)"),
            LineItem("Jack Studs", f"{studs.jack} (included in total)"),
            LineItem("Cripples", f"{studs.cripples} (included in total)"),
            LineItem("Corner Posts", f"{params.corners} corners x 3 studs = {studs.corner}"),
        ]
        if params.intersections > 0:
            lines.append(
                LineItem("T-Intersections", f"{params.intersections} x 3 studs = {studs.intersection}")
            )
        lines.extend(LineItem("Header", f"Window (~3ft) - {HEADER_SIZE}") for _ in range(params.windows))
        lines.extend(LineItem("Header", f"Door (~3ft) - {HEADER_SIZE}") for _ in range(params.doors))

        title = (
            f"Wall Framing: {format_number(params.length)}' x {format_number(params.height)}' "
            f"{params.stud_type}"
        )
        if params.windows or params.doors:
            title += f" ({params.windows}W / {params.doors}D)"

        return TakeoffResult(
            title=title,
            highlight=f"{total_studs} studs",
            lines=tuple(lines),
            note="Exterior walls require 2x6 min in Alberta for R-22+ insulation. 10% waste included.",
        )


def _count(text: str, noun: str) -> Optional[int]:
    match = re.search(rf"(\d+)\s*{noun}", text)
    return int(match.group(1)) if match else None
