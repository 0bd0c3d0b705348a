"""Spreadsheet export utilities."""

from __future__ import annotations

import csv
import io
import pathlib
from typing import Any, TextIO

from ..estimators.base import TakeoffResult


class SpreadsheetExporter:
    """Export a takeoff result to CSV compatible with spreadsheets."""

    def __init__(self, output_path: pathlib.Path | TextIO) -> None:
        self.output_path = output_path

    def export(self, result: TakeoffResult, *, query: str | None = None) -> None:
        writer, handle = _writer_for_output(self.output_path)
        _write_rows(writer, result, query=query)
        if handle is not None:
            handle.close()


def render_csv(result: TakeoffResult, *, query: str | None = None) -> str:
    """Return the CSV representation of a takeoff result as a string."""

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    _write_rows(writer, result, query=query)
    return buffer.getvalue()


def _writer_for_output(output: pathlib.Path | TextIO) -> tuple[Any, TextIO | None]:
    if isinstance(output, pathlib.Path):
        handle = output.open("w", newline="")
        writer = csv.writer(handle)
        return writer, handle

    writer = csv.writer(output)
    return writer, None


def _write_rows(writer: Any, result: TakeoffResult, *, query: str | None) -> None:
    if query:
        writer.writerow(["Query", query])
    writer.writerow(["Estimate", result.title])
    writer.writerow(["Result", result.highlight])

    writer.writerow([])
    writer.writerow(["Item", "Quantity"])
    for item in result.lines:
        writer.writerow([item.label, item.value])

    if result.note:
        writer.writerow([])
        writer.writerow(["Note", result.note])
