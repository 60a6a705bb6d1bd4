"""Task service: the only collection with an in-place update."""

import logging
from typing import Any, Dict

from bson import ObjectId

from organizer.core.response import ServiceResponse
from organizer.models.task import Task, TaskCreate

from .document_service import DocumentService

logger = logging.getLogger(__name__)


class TaskService(DocumentService[TaskCreate, Task]):
    """Service for tasks: add, list, get, complete and delete."""

    settings_field = "tasks_collection"
    create_model = TaskCreate
    model = Task
    label = "task"

    def defaults(self) -> Dict[str, Any]:
        return {"completed": False}

    def complete(self, task_id: str) -> ServiceResponse[bool]:
        """Mark a task completed.

        Completing an already-completed task is idempotent: it succeeds with
        ``data=False`` (nothing modified) rather than failing. Only an
        unknown id is NOT_FOUND.
        """
        if not self.db_manager.ensure_connected():
            return ServiceResponse.unavailable()
        if not ObjectId.is_valid(task_id):
            return ServiceResponse.invalid_id(f"Invalid task id: {task_id!r}")
        try:
            result = self.collection.update_one(
                {"_id": ObjectId(task_id)},
                {"$set": {"completed": True}}
            )
            if result.matched_count == 0:
                return ServiceResponse.not_found(f"Task {task_id} not found")
            if result.modified_count == 0:
                return ServiceResponse.success_response(False, "Task was already complete")
            logger.debug("Completed task %s", task_id)
            return ServiceResponse.success_response(True, "Marked complete")
        except Exception as e:
            logger.error("Failed to complete task %s: %s", task_id, e)
            return ServiceResponse.error_response(f"Failed to complete task: {e}")
