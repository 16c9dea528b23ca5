"""Thread-safe in-memory repositories for the registration aggregates."""

from __future__ import annotations

import copy
import threading
import uuid

from racereg.aggregates import Entrant, Entry, Event, EventSeries, Person
from racereg.errors import (
    EntrantAlreadyExists,
    EntrantNotFound,
    EntryAlreadyExists,
    EntryNotFound,
    EventAlreadyExists,
    EventNotFound,
    EventSeriesAlreadyExists,
    EventSeriesNotFound,
    PersonAlreadyExists,
    PersonNotFound,
)


class EntrantMemoryRepository:
    """Stores entrants in memory, keyed by their id."""

    def __init__(self) -> None:
        self._entrants: dict[uuid.UUID, Entrant] = {}
        self._lock = threading.RLock()

    def get(self, entrant_id: uuid.UUID) -> Entrant:
        with self._lock:
            try:
                return self._entrants[entrant_id]
            except KeyError:
                raise EntrantNotFound() from None

    def add(self, entrant: Entrant) -> None:
        with self._lock:
            if entrant.id in self._entrants:
                raise EntrantAlreadyExists()
            self._entrants[entrant.id] = entrant

    def update(self, entrant: Entrant) -> None:
        with self._lock:
            if entrant.id not in self._entrants:
                raise EntrantNotFound()
            self._entrants[entrant.id] = entrant

    def find_by_person_event_and_distance(
        self, person_id: uuid.UUID, event_id: uuid.UUID, distance_id: uuid.UUID
    ) -> Entrant:
        with self._lock:
            for entrant in self._entrants.values():
                if (
                    entrant.person_id == person_id
                    and entrant.event_id == event_id
                    and entrant.distance_id == distance_id
                ):
                    return entrant
        raise EntrantNotFound()

    def find_by_person_and_event(
        self, person_id: uuid.UUID, event_id: uuid.UUID
    ) -> list[Entrant]:
        with self._lock:
            return [
                e
                for e in self._entrants.values()
                if e.person_id == person_id and e.event_id == event_id
            ]

    def find_by_event(self, event_id: uuid.UUID) -> list[Entrant]:
        with self._lock:
            return [e for e in self._entrants.values() if e.event_id == event_id]

    def delete(self, entrant_id: uuid.UUID) -> None:
        with self._lock:
            if self._entrants.pop(entrant_id, None) is None:
                raise EntrantNotFound()


class EntryMemoryRepository:
    """Stores entries in memory, keyed by their id."""

    def __init__(self) -> None:
        self._entries: dict[uuid.UUID, Entry] = {}
        self._lock = threading.RLock()

    def get(self, entry_id: uuid.UUID) -> Entry:
        with self._lock:
            try:
                return self._entries[entry_id]
            except KeyError:
                raise EntryNotFound() from None

    def add(self, entry: Entry) -> None:
        with self._lock:
            if entry.id in self._entries:
                raise EntryAlreadyExists()
            self._entries[entry.id] = entry

    def update(self, entry: Entry) -> None:
        with self._lock:
            if entry.id not in self._entries:
                raise EntryNotFound()
            self._entries[entry.id] = entry

    def find_by_entrant(self, entrant_id: uuid.UUID) -> Entry:
        with self._lock:
            for entry in self._entries.values():
                if entry.entrant_id == entrant_id:
                    return entry
        raise EntryNotFound()

    def find_by_event(self, event_id: uuid.UUID) -> list[Entry]:
        with self._lock:
            return [e for e in self._entries.values() if e.event_id == event_id]

    def find_by_distance(self, distance_id: uuid.UUID) -> list[Entry]:
        with self._lock:
            return [e for e in self._entries.values() if e.distance_id == distance_id]

    def find_by_event_and_distance(
        self, event_id: uuid.UUID, distance_id: uuid.UUID
    ) -> list[Entry]:
        with self._lock:
            return [
                e
                for e in self._entries.values()
                if e.event_id == event_id and e.distance_id == distance_id
            ]

    def delete(self, entry_id: uuid.UUID) -> None:
        with self._lock:
            if self._entries.pop(entry_id, None) is None:
                raise EntryNotFound()


class EventMemoryRepository:
    """Stores events in memory, keyed by their id."""

    def __init__(self) -> None:
        self._events: dict[uuid.UUID, Event] = {}
        self._lock = threading.RLock()

    def get(self, event_id: uuid.UUID) -> Event:
        with self._lock:
            try:
                return self._events[event_id]
            except KeyError:
                raise EventNotFound() from None

    def add(self, event: Event) -> None:
        with self._lock:
            if event.id in self._events:
                raise EventAlreadyExists()
            self._events[event.id] = event

    def update(self, event: Event) -> None:
        with self._lock:
            if event.id not in self._events:
                raise EventNotFound()
            self._events[event.id] = event

    def find_by_organiser(self, organiser_id: uuid.UUID) -> list[Event]:
        with self._lock:
            return [e for e in self._events.values() if e.organiser_id == organiser_id]

    def find_by_date_range(self, start_date: str, end_date: str) -> list[Event]:
        """Return the stored events; the bounds do not narrow the result."""
        with self._lock:
            return list(self._events.values())

    def delete(self, event_id: uuid.UUID) -> None:
        with self._lock:
            if self._events.pop(event_id, None) is None:
                raise EventNotFound()


class EventSeriesMemoryRepository:
    """Stores snapshots of event series in memory, keyed by their id.

    Series are copied on the way in and out, so changes to an object only
    reach the repository through ``update``.
    """

    def __init__(self) -> None:
        self._series: dict[uuid.UUID, EventSeries] = {}
        self._lock = threading.RLock()

    def get(self, series_id: uuid.UUID) -> EventSeries:
        with self._lock:
            try:
                return copy.copy(self._series[series_id])
            except KeyError:
                raise EventSeriesNotFound() from None

    def add(self, series: EventSeries) -> None:
        with self._lock:
            if series.id in self._series:
                raise EventSeriesAlreadyExists()
            self._series[series.id] = copy.copy(series)

    def update(self, series: EventSeries) -> None:
        with self._lock:
            if series.id not in self._series:
                raise EventSeriesNotFound()
            self._series[series.id] = copy.copy(series)


class PersonMemoryRepository:
    """Stores people in memory; look-ups by name and e-mail ignore case."""

    def __init__(self) -> None:
        self._persons: dict[uuid.UUID, Person] = {}
        self._lock = threading.RLock()

    def get(self, person_id: uuid.UUID) -> Person:
        with self._lock:
            try:
                return self._persons[person_id]
            except KeyError:
                raise PersonNotFound() from None

    def add(self, person: Person) -> None:
        with self._lock:
            if person.id in self._persons:
                raise PersonAlreadyExists()
            self._persons[person.id] = person

    def update(self, person: Person) -> None:
        with self._lock:
            if person.id not in self._persons:
                raise PersonNotFound()
            self._persons[person.id] = person

    def find_by_email(self, email: str) -> Person:
        wanted = email.casefold()
        with self._lock:
            for person in self._persons.values():
                if person.email.casefold() == wanted:
                    return person
        raise PersonNotFound()

    def find_by_name_and_email(self, name: str, email: str) -> Person:
        wanted_name = name.casefold()
        wanted_email = email.casefold()
        with self._lock:
            for person in self._persons.values():
                if (
                    person.name.casefold() == wanted_name
                    and person.email.casefold() == wanted_email
                ):
                    return person
        raise PersonNotFound()

    def delete(self, person_id: uuid.UUID) -> None:
        with self._lock:
            if self._persons.pop(person_id, None) is None:
                raise PersonNotFound()