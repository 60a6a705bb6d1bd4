"""Data models for the organizer collections."""

from .base import DocumentBase, PyObjectId, RawDocument
from .task import Task, TaskCreate
from .event import Event, EventCreate
from .note import Note, NoteCreate

__all__ = [
    "DocumentBase",
    "PyObjectId",
    "RawDocument",
    "Task",
    "TaskCreate",
    "Event",
    "EventCreate",
    "Note",
    "NoteCreate",
]
