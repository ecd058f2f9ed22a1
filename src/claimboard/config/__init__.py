"""Configuration: settings and column concepts."""

from claimboard.config.settings import IngestSettings, Settings, ViewSettings

__all__ = ["IngestSettings", "Settings", "ViewSettings"]
