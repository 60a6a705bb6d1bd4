"""Numbered console menu over the task, event and note services."""

import logging
from datetime import date, datetime
from typing import Callable, Dict, Optional, Sequence, Union

from organizer.core.console import FAILURE, SUCCESS, WARNING, Output, status
from organizer.core.response import ResultKind, ServiceResponse
from organizer.models.base import DocumentBase, RawDocument
from organizer.services import EventService, NoteService, TaskService

logger = logging.getLogger(__name__)

MENU = """
Menu:
 1 - Add Task
 2 - List Tasks
 3 - Complete Task
 4 - Delete Task
 5 - Add Event
 6 - List Events
 7 - Delete Event
 8 - Add Note
 9 - List Notes
10 - Delete Note
 0 - Exit"""

DATE_FORMAT = "%Y-%m-%d"


def parse_optional_date(text: str) -> Optional[date]:
    """Blank means no date. Anything else must be YYYY-MM-DD (ValueError otherwise)."""
    text = text.strip()
    if not text:
        return None
    return datetime.strptime(text, DATE_FORMAT).date()


def format_document(document: Union[DocumentBase, RawDocument]) -> str:
    """`ID: <id>` then one indented `key: value` line per stored field."""
    lines = [f"ID: {document.id}"]
    for key, value in document.display_fields().items():
        lines.append(f"  {key}: {value}")
    return "\n".join(lines) + "\n"


class OrganizerMenu:
    """Stateless dispatch over the numbered actions.

    ``input_fn`` and ``output`` fall back to the builtins so the loop can be
    driven from tests with scripted lines.
    """

    def __init__(
        self,
        tasks: TaskService,
        events: EventService,
        notes: NoteService,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Output] = None,
    ):
        self.tasks = tasks
        self.events = events
        self.notes = notes
        self.input_fn = input_fn or input
        self.output = output or print
        self.actions: Dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.list_tasks,
            "3": self.complete_task,
            "4": self.delete_task,
            "5": self.add_event,
            "6": self.list_events,
            "7": self.delete_event,
            "8": self.add_note,
            "9": self.list_notes,
            "10": self.delete_note,
        }

    def run(self) -> None:
        """Loop until 0, end of input or an unexpected error."""
        self.output("Welcome to Digital Assist Organizer!")
        running = True
        while running:
            self.output(MENU)
            try:
                choice = self.input_fn("Choose option: ").strip()
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, leaving menu")
                break
            running = self.dispatch(choice)

    def dispatch(self, choice: str) -> bool:
        """Run one menu action. Returns False when the loop should stop."""
        if choice == "0":
            return False
        action = self.actions.get(choice)
        if action is None:
            self.output(status(WARNING, "Invalid option"))
            return True
        try:
            action()
        except ValueError as e:
            # malformed date; abandon this action only
            self.output(status(FAILURE, f"Invalid input: {e}"))
        except (EOFError, KeyboardInterrupt):
            return False
        return True

    # ==================== Reporting ====================

    def report_created(self, label: str, response: ServiceResponse) -> None:
        """Print the new id, or why the insert failed."""
        if response.success:
            self.output(status(SUCCESS, f"{label} created with id: {response.data}"))
        elif response.kind != ResultKind.STORE_UNAVAILABLE:
            self.output(status(FAILURE, response.message))

    def report_change(self, response: ServiceResponse, done: str) -> None:
        """Print the outcome of a complete or delete call."""
        if response.success:
            self.output(status(SUCCESS, done if response.data else response.message))
        elif response.kind != ResultKind.STORE_UNAVAILABLE:
            self.output(status(FAILURE, f"Failed, check ID: {response.message}"))

    def report_listing(self, heading: str, response: ServiceResponse) -> None:
        """Print a heading and every listed document."""
        if not response.success:
            if response.kind != ResultKind.STORE_UNAVAILABLE:
                self.output(status(FAILURE, response.message))
            return
        self.output(f"---- {heading} ----")
        documents: Sequence[Union[DocumentBase, RawDocument]] = response.data or []
        for document in documents:
            self.output(format_document(document))

    # ==================== Tasks ====================

    def add_task(self) -> None:
        """Read title, description and optional due date; add the task."""
        title = self.input_fn("Title: ")
        description = self.input_fn("Description: ")
        due_date = parse_optional_date(self.input_fn("Due date (YYYY-MM-DD) or blank: "))
        self.report_created("Task", self.tasks.create(title=title, description=description, due_date=due_date))

    def list_tasks(self) -> None:
        """Print every task."""
        self.report_listing("Tasks", self.tasks.list())

    def complete_task(self) -> None:
        """Mark the task with the entered id complete."""
        task_id = self.input_fn("Task ID to mark complete: ").strip()
        self.report_change(self.tasks.complete(task_id), "Marked complete.")

    def delete_task(self) -> None:
        """Delete the task with the entered id."""
        task_id = self.input_fn("Task ID to delete: ").strip()
        self.report_change(self.tasks.delete(task_id), "Deleted.")

    # ==================== Events ====================

    def add_event(self) -> None:
        """Read title, description and optional date; add the event."""
        title = self.input_fn("Event title: ")
        description = self.input_fn("Description: ")
        event_date = parse_optional_date(self.input_fn("Date (YYYY-MM-DD) or blank: "))
        self.report_created("Event", self.events.create(title=title, description=description, date=event_date))

    def list_events(self) -> None:
        """Print every event."""
        self.report_listing("Events", self.events.list())

    def delete_event(self) -> None:
        """Delete the event with the entered id."""
        event_id = self.input_fn("Event ID to delete: ").strip()
        self.report_change(self.events.delete(event_id), "Deleted.")

    # ==================== Notes ====================

    def add_note(self) -> None:
        """Read title and content; add the note."""
        title = self.input_fn("Note title: ")
        content = self.input_fn("Content: ")
        self.report_created("Note", self.notes.create(title=title, content=content))

    def list_notes(self) -> None:
        """Print every note."""
        self.report_listing("Notes", self.notes.list())

    def delete_note(self) -> None:
        """Delete the note with the entered id."""
        note_id = self.input_fn("Note ID to delete: ").strip()
        self.report_change(self.notes.delete(note_id), "Deleted.")
