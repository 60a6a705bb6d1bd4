"""Event service."""

from organizer.models.event import Event, EventCreate

from .document_service import DocumentService


class EventService(DocumentService[EventCreate, Event]):
    settings_field = "events_collection"
    create_model = EventCreate
    model = Event
    label = "event"
