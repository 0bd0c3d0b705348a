"""Decide which framing calculation a request is asking for."""

from __future__ import annotations

import enum
import logging
import re
from typing import List, Tuple

logger = logging.getLogger(__name__)


class Category(str, enum.Enum):
    WALL = "wall"
    FLOOR = "floor"
    ROOF = "roof"
    SHEATHING = "sheathing"
    CONCRETE = "concrete"
    UNRECOGNIZED = "unrecognized"


# Tested top to bottom; the first group that matches wins. Wall terms come first
# so "wall studs over the floor joists" is a wall request.
_KEYWORD_GROUPS: List[Tuple[Category, re.Pattern[str]]] = [
    (
        Category.WALL,
        re.compile(r"\b(stud|wall\s*fram|exterior\s*wall|interior\s*wall|partition|framing\s*wall)"),
    ),
    (
        Category.FLOOR,
        re.compile(r"\b(joist|floor\s*fram|subfloor|floor\s*joist|floor\s*system)"),
    ),
    (
        Category.ROOF,
        re.compile(r"\b(rafter|roof\s*fram|ridge|gable|roof\b)"),
    ),
    (
        Category.SHEATHING,
        re.compile(r"\b(sheet|sheath|osb|plywood|ply)"),
    ),
    (
        Category.CONCRETE,
        re.compile(r"\b(concrete|slab|footing|foundation|pour|cement|pier|pad)"),
    ),
]

_LOOSE_GROUPS: List[Tuple[Category, re.Pattern[str]]] = [
    (Category.WALL, re.compile(r"\bwall")),
    (Category.FLOOR, re.compile(r"\bfloor")),
    (Category.ROOF, re.compile(r"\broof")),
]


def classify(text: str) -> Category:
    """Return the single category ``text`` asks about, or ``UNRECOGNIZED``."""

    lowered = text.lower()
    for groups in (_KEYWORD_GROUPS, _LOOSE_GROUPS):
        for category, pattern in groups:
            match = pattern.search(lowered)
            if match:
                logger.debug("Classified %r as %s (matched %r)", text, category.value, match.group(0))
                return category

    logger.debug("No framing keywords found in %r", text)
    return Category.UNRECOGNIZED
