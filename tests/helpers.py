from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError


@dataclass(frozen=True)
class InsertOneResult:
    inserted_id: ObjectId


@dataclass(frozen=True)
class UpdateResult:
    matched_count: int
    modified_count: int


@dataclass(frozen=True)
class DeleteResult:
    deleted_count: int


class FakeCollection:
    """In-memory stand-in for the slice of pymongo's Collection the services use.

    Filters only support exact ``_id`` matches. ``calls`` records every
    method invoked so tests can assert the store was never touched.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.docs: List[Dict[str, Any]] = []
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None

    def _check(self, method: str) -> None:
        self.calls.append(method)
        if self.fail_with is not None:
            raise self.fail_with

    def _matches(self, doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(doc.get(key) == value for key, value in query.items())

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._check("insert_one")
        # pymongo mutates the caller's dict to add _id
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"])

    def find(self, query: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
        self._check("find")
        query = query or {}
        return iter([copy.deepcopy(doc) for doc in self.docs if self._matches(doc, query)])

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check("find_one")
        for doc in self.docs:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> UpdateResult:
        self._check("update_one")
        for doc in self.docs:
            if self._matches(doc, query):
                changes = update.get("$set", {})
                modified = any(doc.get(key) != value for key, value in changes.items())
                doc.update(changes)
                return UpdateResult(matched_count=1, modified_count=int(modified))
        return UpdateResult(matched_count=0, modified_count=0)

    def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        self._check("delete_one")
        for index, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[index]
                return DeleteResult(deleted_count=1)
        return DeleteResult(deleted_count=0)


class FakeDatabase:
    def __init__(self, name: str) -> None:
        self.name = name
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeAdmin:
    def __init__(self, error: Optional[Exception]) -> None:
        self.error = error
        self.commands: List[str] = []

    def command(self, name: str) -> Dict[str, Any]:
        self.commands.append(name)
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class FakeMongoClient:
    def __init__(self, uri: str, ping_error: Optional[Exception] = None, **kwargs: Any) -> None:
        self.uri = uri
        self.kwargs = kwargs
        self.admin = FakeAdmin(ping_error)
        self.databases: Dict[str, FakeDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def close(self) -> None:
        self.closed = True


class ClientFactory:
    """Callable passed as ``client_factory``; remembers the client it built."""

    def __init__(self, ping_error: Optional[Exception] = None) -> None:
        self.ping_error = ping_error
        self.client: Optional[FakeMongoClient] = None

    def __call__(self, uri: str, **kwargs: Any) -> FakeMongoClient:
        self.client = FakeMongoClient(uri, ping_error=self.ping_error, **kwargs)
        return self.client


def unreachable_factory() -> ClientFactory:
    return ClientFactory(ping_error=ServerSelectionTimeoutError("localhost:27017: connection refused"))


def failing_auth_factory() -> ClientFactory:
    return ClientFactory(ping_error=OperationFailure("Authentication failed."))


class Recorder:
    """Collects printed lines; usable as an ``output`` callable."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def scripted_input(lines: List[str]) -> Callable[[str], str]:
    """An ``input`` replacement that raises EOFError once the script runs out."""
    remaining = list(lines)

    def _input(prompt: str = "") -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input
