"""Workbook reading into header -> value records per sheet."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from claimboard.core.exceptions import SourceUnavailableError
from claimboard.core.models import ParsedWorkbook, Sheet


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

CSV_SUFFIXES = frozenset({".csv"})


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _header_names(cells: Sequence[Any]) -> list[str | None]:
    """Header text per column; blank headers drop their column."""
    names: list[str | None] = []
    used: dict[str, int] = {}
    for cell in cells:
        if _is_blank(cell):
            names.append(None)
            continue
        name = str(cell).strip()
        if name in used:
            used[name] += 1
            name = f"{name}_{used[name]}"
        else:
            used[name] = 0
        names.append(name)
    return names


def _build_sheet(name: str, rows: Iterable[Sequence[Any]]) -> Sheet:
    iterator = iter(rows)
    header_row = next(iterator, None)
    if header_row is None:
        return Sheet(name=name)
    names = _header_names(header_row)
    records: list[dict[str, Any]] = []
    for values in iterator:
        if all(_is_blank(value) for value in values):
            continue
        record: dict[str, Any] = {}
        for index, header in enumerate(names):
            if header is not None:
                record[header] = values[index] if index < len(values) else None
        records.append(record)
    return Sheet(name=name, headers=[header for header in names if header is not None], rows=records)


def _read_xlsx(stream: Any, source: str) -> ParsedWorkbook:
    workbook = load_workbook(stream, read_only=True, data_only=True)
    try:
        sheets = [
            _build_sheet(worksheet.title, worksheet.iter_rows(values_only=True))
            for worksheet in workbook.worksheets
        ]
    finally:
        workbook.close()
    return ParsedWorkbook(source=source, sheets=sheets)


def _read_csv(path: Path) -> ParsedWorkbook:
    with path.open(newline="", encoding="utf-8-sig") as handle:
        sheet = _build_sheet(path.stem, csv.reader(handle))
    return ParsedWorkbook(source=str(path), sheets=[sheet])


def read_workbook(source: str | Path | bytes) -> ParsedWorkbook:
    """Read every sheet of a tabular source.

    The first row of each sheet supplies the headers; fully blank rows are
    skipped and blank cells are kept as None.

    Args:
        source: Path to an .xlsx or .csv file, or the raw bytes of an .xlsx.

    Returns:
        ParsedWorkbook with one Sheet per worksheet.

    Raises:
        SourceUnavailableError: If the source cannot be read or has no sheets.
    """
    if isinstance(source, (bytes, bytearray)):
        label = "<bytes>"
    else:
        label = str(source)
    try:
        if isinstance(source, (bytes, bytearray)):
            parsed = _read_xlsx(io.BytesIO(source), label)
        else:
            path = Path(source)
            if not path.is_file():
                raise SourceUnavailableError(f"Source file not found: {path}", source=label)
            if path.suffix.lower() in CSV_SUFFIXES:
                parsed = _read_csv(path)
            else:
                parsed = _read_xlsx(path, label)
    except SourceUnavailableError:
        raise
    except (OSError, BadZipFile, InvalidFileException, KeyError, ValueError) as e:
        raise SourceUnavailableError(f"Failed to read {label}: {e}", source=label) from e

    if not parsed.sheets:
        raise SourceUnavailableError(f"No sheets found in {label}", source=label)
    logger.info("Read %d sheet(s), %d rows from %s", len(parsed.sheets), parsed.row_count, label)
    return parsed
