"""Generic collection service: add, list, get and delete documents."""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo.collection import Collection

from organizer.core.response import ServiceResponse
from organizer.db.database import MongoDatabaseManager
from organizer.models.base import DocumentBase, RawDocument, utc_now

logger = logging.getLogger(__name__)

CreateT = TypeVar("CreateT", bound=BaseModel)
ModelT = TypeVar("ModelT", bound=DocumentBase)


class DocumentService(Generic[CreateT, ModelT]):
    """Thin CRUD façade over one MongoDB collection.

    Subclasses set ``settings_field`` (the settings attribute naming the
    collection), ``create_model``, ``model`` and ``label``. Every call checks
    the connection first and returns ``STORE_UNAVAILABLE`` without touching
    the store when it is down. Store exceptions never escape; they come back
    as ``STORE_ERROR`` responses.
    """

    settings_field: str = ""
    create_model: Type[CreateT]
    model: Type[ModelT]
    label: str = "document"

    def __init__(self, db_manager: MongoDatabaseManager, collection_name: Optional[str] = None):
        self.db_manager = db_manager
        self.collection_name = collection_name or getattr(db_manager.settings, self.settings_field)

    @property
    def collection(self) -> Optional[Collection]:
        return self.db_manager.collection(self.collection_name)

    def defaults(self) -> Dict[str, Any]:
        """Fields added to every new document besides the creation time."""
        return {}

    def from_store(self, document: Dict[str, Any]) -> Union[ModelT, RawDocument]:
        """Typed model for a stored document, or the raw mapping when it does not fit."""
        try:
            return self.model.model_validate(document)
        except ValidationError as e:
            logger.warning(
                "%s %s does not match the %s model (%d field error(s)); showing it raw",
                self.collection_name, document.get("_id"), self.label, e.error_count()
            )
            return RawDocument.from_mongo(document)

    # ==================== Core CRUD Operations ====================

    def create(self, **fields: Any) -> ServiceResponse[str]:
        """Build the create model from keyword fields, then add it."""
        try:
            document_create = self.create_model(**fields)
        except ValidationError as e:
            return ServiceResponse.validation_error(f"Invalid {self.label}: {e.error_count()} field error(s)")
        return self.add(document_create)

    def add(self, document_create: CreateT) -> ServiceResponse[str]:
        """Insert a new document and return its id as a hex string."""
        if not self.db_manager.ensure_connected():
            return ServiceResponse.unavailable()
        try:
            document_data = {
                **document_create.model_dump(mode="json"),
                **self.defaults(),
                "created_at": utc_now(),
            }
            result = self.collection.insert_one(document_data)
            document_id = str(result.inserted_id)
            logger.debug("Inserted %s %s into %s", self.label, document_id, self.collection_name)
            return ServiceResponse.success_response(document_id, f"{self.label.capitalize()} created")
        except Exception as e:
            logger.error("Failed to add %s: %s", self.label, e)
            return ServiceResponse.error_response(f"Failed to add {self.label}: {e}")

    def list(self) -> ServiceResponse[List[Union[ModelT, RawDocument]]]:
        """Every document in store-native order. No sort, no paging."""
        if not self.db_manager.ensure_connected():
            return ServiceResponse.unavailable()
        try:
            documents = [self.from_store(doc) for doc in self.collection.find({})]
            return ServiceResponse.success_response(documents, f"Found {len(documents)} {self.label}s")
        except Exception as e:
            logger.error("Failed to list %ss: %s", self.label, e)
            return ServiceResponse.error_response(f"Failed to list {self.label}s: {e}")

    def get(self, document_id: str) -> ServiceResponse[Union[ModelT, RawDocument]]:
        """Exact-id lookup."""
        if not self.db_manager.ensure_connected():
            return ServiceResponse.unavailable()
        if not ObjectId.is_valid(document_id):
            return ServiceResponse.invalid_id(f"Invalid {self.label} id: {document_id!r}")
        try:
            document_data = self.collection.find_one({"_id": ObjectId(document_id)})
            if not document_data:
                return ServiceResponse.not_found(f"{self.label.capitalize()} {document_id} not found")
            return ServiceResponse.success_response(self.from_store(document_data))
        except Exception as e:
            logger.error("Failed to get %s %s: %s", self.label, document_id, e)
            return ServiceResponse.error_response(f"Failed to get {self.label}: {e}")

    def delete(self, document_id: str) -> ServiceResponse[bool]:
        """Remove one document by id."""
        if not self.db_manager.ensure_connected():
            return ServiceResponse.unavailable()
        if not ObjectId.is_valid(document_id):
            return ServiceResponse.invalid_id(f"Invalid {self.label} id: {document_id!r}")
        try:
            result = self.collection.delete_one({"_id": ObjectId(document_id)})
            if result.deleted_count == 0:
                return ServiceResponse.not_found(f"{self.label.capitalize()} {document_id} not found")
            logger.debug("Deleted %s %s", self.label, document_id)
            return ServiceResponse.success_response(True, "Deleted")
        except Exception as e:
            logger.error("Failed to delete %s %s: %s", self.label, document_id, e)
            return ServiceResponse.error_response(f"Failed to delete {self.label}: {e}")
