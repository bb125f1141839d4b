"""Dashboard: counts, upcoming reminders and project status tally."""

from .service import DashboardGateway

__all__ = ["DashboardGateway"]
