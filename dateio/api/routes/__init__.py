"""
API route modules.

Contains FastAPI routers for calendar structures and formatting.
"""

from dateio.api.routes import calendar, formats

__all__ = ["calendar", "formats"]
