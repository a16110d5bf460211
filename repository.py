"""Storage access for catalog records.

Each record kind gets a small capability set (``get_by_id``, ``add``,
``remove``) expressed as a :class:`typing.Protocol`. The facade only depends
on these protocols, so an in-memory store can be swapped for a persistent one
without touching the domain code.
"""
from __future__ import annotations

import logging
from typing import Generic, List, Optional, Protocol, TypeVar, runtime_checkable

from book import Book
from member import Member

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """Capability set shared by every record repository."""

    def get_by_id(self, id: int) -> Optional[T]:
        ...

    def add(self, record: T) -> int:
        ...

    def remove(self, record: T) -> None:
        ...


@runtime_checkable
class BookRepository(Protocol):
    def get_by_id(self, id: int) -> Optional[Book]:
        ...

    def add(self, record: Book) -> int:
        ...

    def remove(self, record: Book) -> None:
        ...


@runtime_checkable
class MemberRepository(Protocol):
    def get_by_id(self, id: int) -> Optional[Member]:
        ...

    def add(self, record: Member) -> int:
        ...

    def remove(self, record: Member) -> None:
        ...


class InMemoryRepository(Generic[T]):
    """List-backed repository that assigns ``max(id) + 1`` on every add.

    Records must expose a mutable integer ``id`` attribute. Not safe for
    concurrent callers: ``add`` reads the current maximum and then writes.
    """

    kind = "record"

    def __init__(self) -> None:
        self._records: List[T] = []

    def __len__(self) -> int:
        return len(self._records)

    def get_by_id(self, id: int) -> Optional[T]:
        """Return the record with the given id, or None if there is none."""
        for record in self._records:
            if record.id == id:
                return record
        return None

    def add(self, record: T) -> int:
        """Assign the next id to ``record`` and store it. Returns the new id."""
        max_id = max((r.id for r in self._records), default=0)
        record.id = max_id + 1
        self._records.append(record)
        logger.debug(f"Added {self.kind} with id={record.id}")
        return record.id

    def remove(self, record: T) -> None:
        """Delete every stored record sharing ``record.id``; no-op when absent."""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record.id]
        removed = before - len(self._records)
        if removed:
            logger.debug(f"Removed {self.kind} with id={record.id}")
        else:
            logger.debug(f"No {self.kind} with id={record.id} to remove")


class InMemoryBookRepository(InMemoryRepository[Book]):
    kind = "book"


class InMemoryMemberRepository(InMemoryRepository[Member]):
    kind = "member"
