"""Command-line session: interpret one request, then export and record it."""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from typing import Optional

from .exporters.spreadsheet import SpreadsheetExporter
from .history import HistoryStore
from .human_review import ReviewChecklist
from .service import InterpretationRun, run_interpretation


@dataclass
class FramersConfig:
    query: str
    history_path: Optional[pathlib.Path] = None
    output_path: Optional[pathlib.Path] = None
    as_json: bool = False


class FramersProject:
    """High-level interface for executing a request from the command line."""

    def __init__(self, config: FramersConfig, *, history: Optional[HistoryStore] = None) -> None:
        self.config = config
        self.review = ReviewChecklist()
        if history is None and config.history_path is not None:
            history = HistoryStore(config.history_path)
        self.history = history

    def run(self) -> InterpretationRun:
        run = run_interpretation(self.config.query, review=self.review)
        if run.blank:
            return run

        if self.history is not None:
            self.history.record(run.query, run.result)

        if self.config.output_path is not None:
            SpreadsheetExporter(self.config.output_path).export(run.result, query=run.query)

        if self.config.as_json:
            print(json.dumps(run.to_dict(), indent=2))
        else:
            print(render_text(run))
            if self.config.output_path is not None:
                print(f"Estimate exported to {self.config.output_path}")
        return run


def render_text(run: InterpretationRun) -> str:
    result = run.result
    lines = [result.highlight, result.title]
    width = max((len(item.label) for item in result.lines), default=0)
    for item in result.lines:
        lines.append(f"  {item.label.ljust(width)}  {item.value}")
    if result.note:
        lines.append(result.note)
    if not result.error and run.review.items:
        lines.append("")
        lines.append(run.review.summarize())
    return "\n".join(lines)
