"""Normalize free-form framing requests and pull out the numbers they mention."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

NumberSequence = Tuple[float, ...]


@dataclass(frozen=True)
class TokenizedText:
    """Lower-cased text with unit suffixes collapsed, plus its numbers in order."""

    text: str
    numbers: NumberSequence


# Applied in order. Fractions stay as written so pitch patterns like "5/12" still match.
_UNIT_REWRITES: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r"(\d+)\s*/\s*(\d+)"), r"\1/\2"),
    (re.compile(r"(\d+)\s*foot", re.IGNORECASE), r"\1 "),
    (re.compile(r"(\d+)\s*feet", re.IGNORECASE), r"\1 "),
    (re.compile(r"(\d+)\s*ft", re.IGNORECASE), r"\1 "),
    (re.compile(r"(\d+)\s*inch(es)?", re.IGNORECASE), r"\1in "),
    (re.compile(r'(\d+)\s*"'), r"\1in "),
    (re.compile(r"(\d+)\s*'"), r"\1 "),
]

_NUMBER_PATTERN = re.compile(r"(\d+\.?\d*)")


def normalize(raw: str) -> str:
    """Return ``raw`` lower-cased with foot/inch markers canonicalized."""

    text = raw.lower()
    for pattern, replacement in _UNIT_REWRITES:
        text = pattern.sub(replacement, text)
    return text


def extract_numbers(raw: str) -> NumberSequence:
    """Return every decimal literal in ``raw``, left to right, duplicates kept."""

    return tokenize(raw).numbers


def tokenize(raw: str) -> TokenizedText:
    text = normalize(raw)
    return TokenizedText(text=text, numbers=tuple(float(match) for match in _NUMBER_PATTERN.findall(text)))


def format_number(value: float) -> str:
    """Render a dimension the way a framer would write it: ``40`` not ``40.0``."""

    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_fixed(value: float, places: int = 0) -> str:
    """Fixed-point display with halves rounded up, so 12.5 sq.ft shows as 13."""

    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
