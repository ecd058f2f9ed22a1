"""Rich console output."""

from claimboard.console.logger import DashboardConsole

__all__ = ["DashboardConsole"]
