"""Note service."""

from organizer.models.note import Note, NoteCreate

from .document_service import DocumentService


class NoteService(DocumentService[NoteCreate, Note]):
    settings_field = "notes_collection"
    create_model = NoteCreate
    model = Note
    label = "note"
