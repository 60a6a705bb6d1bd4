"""Collection services."""

from .document_service import DocumentService
from .task_service import TaskService
from .event_service import EventService
from .note_service import NoteService

__all__ = [
    "DocumentService",
    "TaskService",
    "EventService",
    "NoteService",
]
