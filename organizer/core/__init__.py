"""Configuration, logging and response helpers."""

from .config import OrganizerSettings
from .response import ResultKind, ServiceResponse

__all__ = [
    "OrganizerSettings",
    "ResultKind",
    "ServiceResponse",
]
