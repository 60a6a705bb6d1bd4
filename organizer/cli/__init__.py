"""Console front end."""

from .menu import OrganizerMenu

__all__ = ["OrganizerMenu"]
