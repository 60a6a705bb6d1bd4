"""Digital Assist Organizer: tasks, events and notes in MongoDB."""

__version__ = "1.0.0"
