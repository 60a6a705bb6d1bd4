"""Shared pieces of the document models."""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

PyObjectId = Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, ObjectId) else v)]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentBase(BaseModel):
    """Base for models as stored in MongoDB.

    Unknown keys are kept so a listing shows every field a document carries,
    including ones written by other clients. Defaults belong to the insert
    path; a field missing from the store stays unset and is not displayed.
    """
    id: PyObjectId = Field(..., alias="_id", description="Document id (24-char hex)")
    created_at: Optional[datetime] = Field(None, description="Creation time (UTC)")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    def display_fields(self) -> Dict[str, Any]:
        """Every stored field except the id, extras included."""
        return self.model_dump(exclude={"id"}, exclude_unset=True)


class RawDocument(BaseModel):
    """A stored document that does not fit its collection's model."""
    id: str = Field(..., description="str() of the stored _id")
    data: Dict[str, Any] = Field(default_factory=dict, description="The document as read")

    @classmethod
    def from_mongo(cls, document: Dict[str, Any]) -> "RawDocument":
        return cls(id=str(document.get("_id")), data=dict(document))

    def display_fields(self) -> Dict[str, Any]:
        return {key: value for key, value in self.data.items() if key != "_id"}
