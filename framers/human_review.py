"""Assumptions an estimate was built on, collected for the person ordering material."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ReviewItem:
    """A default or heuristic correction that should be confirmed before ordering."""

    message: str
    severity: str = "info"  # "info" for defaults, "warning" for corrections.


class ReviewChecklist:
    """Container used to accumulate review items while a query is interpreted."""

    def __init__(self) -> None:
        self._items: List[ReviewItem] = []

    def add(self, message: str, severity: str = "info") -> None:
        self._items.append(ReviewItem(message=message, severity=severity))

    def assumed(self, field: str, value: str) -> None:
        self.add(f"No {field} given; assumed {value}.")

    @property
    def items(self) -> List[ReviewItem]:
        return list(self._items)

    def to_dicts(self) -> List[Dict[str, str]]:
        return [{"message": item.message, "severity": item.severity} for item in self._items]

    def summarize(self) -> str:
        if not self._items:
            return "No assumptions to review."

        lines = ["Check these assumptions before ordering:"]
        for idx, item in enumerate(self._items, start=1):
            lines.append(f"  {idx}. [{item.severity.upper()}] {item.message}")
        return "\n".join(lines)
