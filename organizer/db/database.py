"""MongoDB connection management."""

import logging
from typing import Any, Callable, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from organizer.core.config import OrganizerSettings
from organizer.core.console import FAILURE, SUCCESS, WARNING, Output, status

logger = logging.getLogger(__name__)


class MongoDatabaseManager:
    """Holds the single MongoDB client for the process.

    The connection is attempted once, on construction. Failure is never
    raised to the caller: it leaves ``connected`` False and every service
    call afterwards reports the store as unavailable. There is no reconnect.
    """

    def __init__(
        self,
        settings: Optional[OrganizerSettings] = None,
        client_factory: Callable[..., Any] = MongoClient,
        output: Optional[Output] = None,
    ):
        self.settings = settings if settings is not None else OrganizerSettings()
        self.output = output or print
        self.client: Optional[MongoClient] = None
        self.database: Optional[Database] = None
        self.collections: Dict[str, Collection] = {}
        self.connected = False
        self._connect(client_factory)

    def _connect(self, client_factory: Callable[..., Any]) -> None:
        uri = self.settings.mongodb_uri
        try:
            self.client = client_factory(
                uri, serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms
            )
            # MongoClient connects lazily; ping forces server selection now
            self.client.admin.command("ping")
            self.database = self.client[self.settings.database_name]
            self.collections = {
                name: self.database[name]
                for name in (
                    self.settings.tasks_collection,
                    self.settings.events_collection,
                    self.settings.notes_collection,
                )
            }
            self.connected = True
            logger.info("Connected to MongoDB at %s (database %s)", uri, self.settings.database_name)
            self.output(status(SUCCESS, "Connected to MongoDB successfully."))
        except ServerSelectionTimeoutError as e:
            logger.warning("MongoDB server selection timed out for %s: %s", uri, e)
            self.output(status(
                WARNING,
                f"Unable to connect to MongoDB. Please make sure MongoDB server is running on {uri}.",
            ))
        except PyMongoError as e:
            logger.warning("MongoDB connection to %s failed: %s", uri, e)
            self.output(status(WARNING, f"Unexpected error while connecting to MongoDB: {e}"))
        except Exception as e:
            logger.exception("Unexpected error while connecting to MongoDB")
            self.output(status(WARNING, f"Unexpected error while connecting to MongoDB: {e}"))

    def ensure_connected(self) -> bool:
        """Return the connection flag, telling the user when it is down."""
        if not self.connected:
            self.output(status(
                FAILURE,
                "MongoDB is not connected. Please start MongoDB and restart the application.",
            ))
            return False
        return True

    def collection(self, name: str) -> Optional[Collection]:
        """Collection handle by configured name, or None while disconnected."""
        if not self.connected:
            return None
        return self.collections.get(name)

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self.client is not None:
            self.client.close()
            self.client = None
            self.database = None
            self.collections = {}
            logger.info("MongoDB connection closed")
        self.connected = False

    def __enter__(self) -> "MongoDatabaseManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
