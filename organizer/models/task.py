"""Task data models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from .base import DocumentBase


class TaskCreate(BaseModel):
    """Task creation model."""
    title: str = Field(..., description="Task title")
    description: str = Field("", description="Task description")
    due_date: Optional[date] = Field(None, description="Due date, None when absent")


class Task(DocumentBase):
    """Task model as stored in database."""
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    due_date: Optional[str] = Field(None, description="Due date as YYYY-MM-DD")
    completed: Optional[bool] = Field(None, description="Completion flag, set False on insert")
