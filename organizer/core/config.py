"""Organizer configuration."""

from pydantic import BaseModel, Field

MONGODB_URI = "mongodb://localhost:27017"
DATABASE_NAME = "digital_assist"


class OrganizerSettings(BaseModel):
    """Connection settings. Defaults are fixed; only CLI flags override them."""
    mongodb_uri: str = Field(MONGODB_URI, description="MongoDB connection string")
    database_name: str = Field(DATABASE_NAME, description="Database name", min_length=1)
    server_selection_timeout_ms: int = Field(3000, ge=1, description="Ping timeout in milliseconds")
    tasks_collection: str = Field("tasks", description="Task collection name")
    events_collection: str = Field("events", description="Event collection name")
    notes_collection: str = Field("notes", description="Note collection name")
