"""Tools module - Source document readers."""

from __future__ import annotations

from claimboard.tools.workbook import read_workbook


__all__ = ["read_workbook"]
