"""Plain domain entities shared between aggregates and repositories."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

NIL_UUID = uuid.UUID(int=0)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class Medal:
    """A medal awarded for a distance, optionally won by an entry."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    description: str = ""
    distance_id: uuid.UUID = NIL_UUID
    entry_id: uuid.UUID = NIL_UUID
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Distance:
    """A course length offered at an event, with its medals."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    length: float = 0.0
    event_id: uuid.UUID = NIL_UUID
    medals: list[Medal] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Entrant:
    """A person taking part in a distance of an event."""

    id: uuid.UUID = NIL_UUID
    person_id: uuid.UUID = NIL_UUID
    event_id: uuid.UUID = NIL_UUID
    distance_id: uuid.UUID = NIL_UUID
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Entry:
    """A registration of an entrant in a distance of an event."""

    id: uuid.UUID = NIL_UUID
    distance_id: uuid.UUID = NIL_UUID
    entrant_id: uuid.UUID = NIL_UUID
    event_id: uuid.UUID = NIL_UUID
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Event:
    """A dated race event with its distances and entries."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    date: datetime | None = None
    distances: list[Distance] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)
    organiser_id: uuid.UUID = NIL_UUID
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Organiser:
    """A person who organises events."""

    person_id: uuid.UUID = NIL_UUID
    event_ids: list[uuid.UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None


@dataclass(kw_only=True)
class Person:
    """A person with contact details and the entries they hold."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    email: str = ""
    phone: str = ""
    entry_ids: list[uuid.UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    archived_at: datetime | None = None