"""Note data models."""

from typing import Optional

from pydantic import BaseModel, Field

from .base import DocumentBase


class NoteCreate(BaseModel):
    title: str = Field(..., description="Note title")
    content: str = Field("", description="Note body")


class Note(DocumentBase):
    title: str = Field(..., description="Note title")
    content: Optional[str] = Field(None, description="Note body")
