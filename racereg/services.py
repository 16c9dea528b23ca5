"""Application services that coordinate aggregates and their repositories."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from racereg.aggregates import Entrant, Entry, Event, EventSeries, Person
from racereg.errors import (
    FailedToAddEntrant,
    FailedToAddEntry,
    FailedToAddEvent,
    FailedToAddEventSeries,
    FailedToAddPerson,
    NotFoundError,
    PersonAlreadyExists,
    PersonNotFound,
)
from racereg.memory import (
    EventMemoryRepository,
    EventSeriesMemoryRepository,
    PersonMemoryRepository,
)


class EventService:
    """Creates events and stores them in an event repository."""

    def __init__(self, repository: Any) -> None:
        if repository is None:
            raise FailedToAddEvent()
        self._repository = repository

    @classmethod
    def in_memory(cls) -> EventService:
        """Return a service backed by a fresh in-memory repository."""
        return cls(EventMemoryRepository())

    @property
    def repository(self) -> Any:
        return self._repository

    def create(
        self, name: str, event_date: datetime, organiser_id: uuid.UUID
    ) -> Event:
        """Create a new event and save it."""
        event = Event(name, event_date, organiser_id)
        self._repository.add(event)
        return event


class EventSeriesService:
    """Creates event series and stores them in an event series repository."""

    def __init__(self, repository: Any) -> None:
        if repository is None:
            raise FailedToAddEventSeries()
        self._repository = repository

    @classmethod
    def in_memory(cls) -> EventSeriesService:
        """Return a service backed by a fresh in-memory repository."""
        return cls(EventSeriesMemoryRepository())

    @property
    def repository(self) -> Any:
        return self._repository

    def create(
        self, name: str, description: str, organiser_id: uuid.UUID
    ) -> EventSeries:
        """Create a new event series and save it."""
        series = EventSeries(name, description, organiser_id)
        self._repository.add(series)
        return series


class PersonService:
    """Creates and looks up people, keeping e-mail addresses unique."""

    def __init__(self, repository: Any) -> None:
        if repository is None:
            raise FailedToAddPerson()
        self._repository = repository

    @classmethod
    def in_memory(cls) -> PersonService:
        """Return a service backed by a fresh in-memory repository."""
        return cls(PersonMemoryRepository())

    @property
    def repository(self) -> Any:
        return self._repository

    def create(self, name: str, email: str, phone: str) -> Person:
        """Create and save a person unless one with the e-mail already exists."""
        try:
            self._repository.find_by_email(email)
        except PersonNotFound:
            pass
        else:
            raise PersonAlreadyExists()

        person = Person(name, email, phone)
        self._repository.add(person)
        return person

    def get_by_email(self, email: str) -> Person:
        return self._repository.find_by_email(email)


class RegistrationService:
    """Registers people for distances of events and cancels registrations."""

    def __init__(self, entrant_repository: Any, entry_repository: Any) -> None:
        if entrant_repository is None:
            raise FailedToAddEntrant()
        if entry_repository is None:
            raise FailedToAddEntry()
        self._entrants = entrant_repository
        self._entries = entry_repository

    def register_person_for_distance(
        self, person_id: uuid.UUID, event_id: uuid.UUID, distance_id: uuid.UUID
    ) -> Entry:
        """Return the person's entry for the distance, creating it when needed."""
        try:
            entrant = self._entrants.find_by_person_event_and_distance(
                person_id, event_id, distance_id
            )
        except NotFoundError:
            entrant = Entrant(person_id, event_id, distance_id)
            self._entrants.add(entrant)

        if not entrant.has_entry():
            entry = entrant.create_entry()
            self._entries.add(entry)
            self._entrants.update(entrant)
            return entry

        return self._entries.find_by_entrant(entrant.id)

    def get_person_registrations(
        self, person_id: uuid.UUID, event_id: uuid.UUID
    ) -> list[Entrant]:
        return self._entrants.find_by_person_and_event(person_id, event_id)

    def get_event_registrations(self, event_id: uuid.UUID) -> list[Entrant]:
        return self._entrants.find_by_event(event_id)

    def cancel_registration(self, entrant_id: uuid.UUID) -> None:
        """Drop the entrant's entry, if any, and archive the entrant."""
        entrant = self._entrants.get(entrant_id)
        if entrant.has_entry():
            entrant.remove_entry()
            self._entrants.update(entrant)
        entrant.archive()
        self._entrants.update(entrant)