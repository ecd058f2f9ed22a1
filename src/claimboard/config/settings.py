"""Application settings and configuration."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from claimboard.core.types import SortDirection


# Code-to-label tables per claim field. Lookups are case-insensitive on the
# code; values not listed pass through unchanged.
DEFAULT_CODE_LABELS: dict[str, dict[str, str]] = {
    "adjudication_indicator": {
        "N": "Manual",
        "MANUAL": "Manual",
        "Y": "Auto",
        "AUTO": "Auto",
    },
    "form_type": {
        "H": "Professional",
        "PROFESSIONAL": "Professional",
        "U": "Institutional",
        "INSTITUTIONAL": "Institutional",
    },
    "submission_method": {
        "P": "Paper",
        "PAPER": "Paper",
        "E": "Electronic",
        "ELECTRONIC": "Electronic",
    },
    "audit_flag": {
        "Y": "Y",
        "YES": "Y",
        "N": "N",
        "NO": "N",
    },
}


class IngestSettings(BaseModel):
    """Workbook ingestion configuration."""

    model_config = ConfigDict(validate_assignment=True)

    amount_tolerance: float = Field(default=0.01, ge=0)
    serial_date_max: float = Field(default=100000.0, gt=0)


class ViewSettings(BaseModel):
    """Claims table and chart configuration."""

    model_config = ConfigDict(validate_assignment=True)

    page_size: int = Field(default=10, ge=1)
    top_cities: int = Field(default=8, ge=1)
    sort_field: str = "score"
    sort_direction: SortDirection = SortDirection.DESC


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Ingestion
    ingest: IngestSettings = Field(default_factory=IngestSettings)

    # Dashboard view
    view: ViewSettings = Field(default_factory=ViewSettings)

    # Code -> label lookup, JSON-overridable via CODE_LABELS
    code_labels: dict[str, dict[str, str]] = Field(
        default_factory=lambda: {field: dict(table) for field, table in DEFAULT_CODE_LABELS.items()}
    )

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        # Ingest overrides
        if tolerance := os.getenv("CLAIMBOARD_AMOUNT_TOLERANCE"):
            self.ingest.amount_tolerance = float(tolerance)
        if serial_max := os.getenv("CLAIMBOARD_SERIAL_DATE_MAX"):
            self.ingest.serial_date_max = float(serial_max)

        # View overrides
        if page_size := os.getenv("CLAIMBOARD_PAGE_SIZE"):
            self.view.page_size = int(page_size)
        if top_cities := os.getenv("CLAIMBOARD_TOP_CITIES"):
            self.view.top_cities = int(top_cities)
        if sort_field := os.getenv("CLAIMBOARD_SORT_FIELD"):
            self.view.sort_field = sort_field
        if direction := os.getenv("CLAIMBOARD_SORT_DIRECTION"):
            self.view.sort_direction = SortDirection(direction.lower())

        # Logging
        if level := os.getenv("CLAIMBOARD_LOG_LEVEL"):
            self.log_level = level.upper()
