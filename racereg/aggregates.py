"""Aggregate roots that guard the consistency of the registration domain."""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone

from racereg import entities
from racereg.entities import NIL_UUID
from racereg.errors import DomainError


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_id(value: uuid.UUID | None, message: str) -> uuid.UUID:
    if value is None or value == NIL_UUID:
        raise ValueError(message)
    return value


def _require_text(value: str | None, message: str) -> str:
    if not value:
        raise ValueError(message)
    return value


class _Aggregate:
    """Identity and lifecycle timestamps common to every aggregate."""

    def __init__(self) -> None:
        self._id = uuid.uuid4()
        now = _now()
        self._created_at = now
        self._updated_at = now
        self._archived_at: datetime | None = None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def archived_at(self) -> datetime | None:
        return self._archived_at

    def _touch(self) -> None:
        self._updated_at = _now()

    def _mark_archived(self) -> None:
        now = _now()
        self._archived_at = now
        self._updated_at = now

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"


class Entry(_Aggregate):
    """A registration of an entrant in one distance of an event."""

    def __init__(
        self, distance_id: uuid.UUID, entrant_id: uuid.UUID, event_id: uuid.UUID
    ) -> None:
        self._distance_id = _require_id(distance_id, "distance ID is required")
        self._entrant_id = _require_id(entrant_id, "entrant ID is required")
        self._event_id = _require_id(event_id, "event ID is required")
        super().__init__()

    @property
    def distance_id(self) -> uuid.UUID:
        return self._distance_id

    @property
    def entrant_id(self) -> uuid.UUID:
        return self._entrant_id

    @property
    def event_id(self) -> uuid.UUID:
        return self._event_id

    def update_distance_id(self, distance_id: uuid.UUID) -> None:
        self._distance_id = _require_id(distance_id, "distance ID is required")
        self._touch()

    def update_entrant_id(self, entrant_id: uuid.UUID) -> None:
        self._entrant_id = _require_id(entrant_id, "entrant ID is required")
        self._touch()

    def update_event_id(self, event_id: uuid.UUID) -> None:
        self._event_id = _require_id(event_id, "event ID is required")
        self._touch()

    def archive(self) -> None:
        """Mark the entry as archived now."""
        self._mark_archived()


class Entrant(_Aggregate):
    """A person taking part in one distance of an event; owns at most one entry."""

    def __init__(
        self, person_id: uuid.UUID, event_id: uuid.UUID, distance_id: uuid.UUID
    ) -> None:
        self._person_id = _require_id(person_id, "person ID is required")
        self._event_id = _require_id(event_id, "event ID is required")
        self._distance_id = _require_id(distance_id, "distance ID is required")
        self._entry_id: uuid.UUID | None = None
        super().__init__()

    @property
    def person_id(self) -> uuid.UUID:
        return self._person_id

    @property
    def event_id(self) -> uuid.UUID:
        return self._event_id

    @property
    def distance_id(self) -> uuid.UUID:
        return self._distance_id

    @property
    def entry_id(self) -> uuid.UUID | None:
        return self._entry_id

    def create_entry(self) -> Entry:
        """Create the entrant's entry; an entrant may hold only one."""
        if self._entry_id is not None:
            raise DomainError("entrant already has an entry")
        entry = Entry(self._distance_id, self._id, self._event_id)
        self._entry_id = entry.id
        self._touch()
        return entry

    def has_entry(self) -> bool:
        return self._entry_id is not None

    def update_distance_id(self, distance_id: uuid.UUID) -> None:
        _require_id(distance_id, "distance ID is required")
        if self._entry_id is not None:
            raise DomainError("cannot change distance after entry is created")
        self._distance_id = distance_id
        self._touch()

    def remove_entry(self) -> None:
        if self._entry_id is None:
            raise DomainError("no entry to remove")
        self._entry_id = None
        self._touch()

    def archive(self) -> None:
        """Mark the entrant as archived now."""
        self._mark_archived()


class Event(_Aggregate):
    """A dated race event and the distances it offers."""

    def __init__(self, name: str, date: datetime, organiser_id: uuid.UUID) -> None:
        self._name = _require_text(name, "event name is required")
        self._organiser_id = _require_id(organiser_id, "organiser ID is required")
        if date is None:
            raise ValueError("event date is required")
        self._date = date
        self._distances: list[entities.Distance] = []
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def distances(self) -> tuple[entities.Distance, ...]:
        return tuple(self._distances)

    @property
    def organiser_id(self) -> uuid.UUID:
        return self._organiser_id

    def update_name(self, name: str) -> None:
        self._name = _require_text(name, "event name is required")
        self._touch()

    def update_date(self, date: datetime) -> None:
        if date is None:
            raise ValueError("event date is required")
        self._date = date
        self._touch()

    def update_organiser_id(self, organiser_id: uuid.UUID) -> None:
        self._organiser_id = _require_id(organiser_id, "organiser ID is required")
        self._touch()

    def add_distance(self, distance: entities.Distance) -> None:
        if self.has_distance(distance.id):
            raise DomainError("distance already exists in event")
        self._distances.append(distance)
        self._touch()

    def remove_distance(self, distance_id: uuid.UUID) -> None:
        for position, distance in enumerate(self._distances):
            if distance.id == distance_id:
                del self._distances[position]
                self._touch()
                return
        raise DomainError("distance not found in event")

    def get_distance(self, distance_id: uuid.UUID) -> entities.Distance:
        """Return a copy of the distance with the given id."""
        found = next((d for d in self._distances if d.id == distance_id), None)
        if found is None:
            raise DomainError("distance not found in event")
        return dataclasses.replace(found)

    def has_distance(self, distance_id: uuid.UUID) -> bool:
        return any(d.id == distance_id for d in self._distances)

    def set_distances(self, distances: Iterable[entities.Distance]) -> None:
        self._distances = list(distances)
        self._touch()

    def archive(self) -> None:
        """Mark the event as archived now."""
        self._mark_archived()


class EventSeries(_Aggregate):
    """A named series of events run by one organiser."""

    def __init__(self, name: str, description: str, organiser_id: uuid.UUID) -> None:
        self._name = _require_text(name, "name is required")
        self._organiser_id = _require_id(organiser_id, "organiser ID is required")
        self._description = _require_text(description, "description is required")
        self._events: list[entities.Event] = []
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def events(self) -> tuple[entities.Event, ...]:
        return tuple(self._events)

    @property
    def organiser_id(self) -> uuid.UUID:
        return self._organiser_id

    def update_name(self, name: str) -> None:
        self._name = _require_text(name, "name is required")
        self._touch()

    def update_description(self, description: str) -> None:
        self._description = _require_text(description, "description is required")
        self._touch()

    def add_event(self, event: entities.Event) -> None:
        self._events.append(event)
        self._touch()

    def update_organiser_id(self, organiser_id: uuid.UUID) -> None:
        self._organiser_id = _require_id(organiser_id, "organiser ID is required")
        self._touch()

    def remove_event(self, event_id: uuid.UUID) -> None:
        for position, event in enumerate(self._events):
            if event.id == event_id:
                del self._events[position]
                self._touch()
                return
        raise DomainError("event not found")

    def set_events(self, events: Iterable[entities.Event]) -> None:
        self._events = list(events)
        self._touch()

    def archive(self) -> None:
        """Mark the series as archived now."""
        self._mark_archived()


class Person(_Aggregate):
    """A person with a name, an e-mail address and an optional phone number."""

    def __init__(self, name: str, email: str, phone: str = "") -> None:
        self._name = _require_text(name, "name is required")
        self._email = _require_text(email, "email is required")
        self._phone = phone
        super().__init__()

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    def update_name(self, name: str) -> None:
        self._name = _require_text(name, "name is required")
        self._touch()

    def update_email(self, email: str) -> None:
        self._email = _require_text(email, "email is required")
        self._touch()

    def update_phone(self, phone: str) -> None:
        self._phone = phone
        self._touch()

    def archive(self) -> None:
        """Mark the person as archived now."""
        self._mark_archived()