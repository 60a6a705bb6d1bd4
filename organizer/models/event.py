"""Event data models."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import DocumentBase


class EventCreate(BaseModel):
    """Event creation model."""
    title: str = Field(..., description="Event title")
    description: str = Field("", description="Event description")
    date: Optional[datetime.date] = Field(None, description="Event date, None when absent")


class Event(DocumentBase):
    """Event model as stored in database."""
    title: str = Field(..., description="Event title")
    description: Optional[str] = Field(None, description="Event description")
    date: Optional[str] = Field(None, description="Event date as YYYY-MM-DD")
