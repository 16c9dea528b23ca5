"""Errors raised by repositories and services."""

from __future__ import annotations


class DomainError(Exception):
    """Base class of all errors raised by the package."""

    default_message = "domain error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotFoundError(DomainError):
    """A requested object does not exist."""

    default_message = "not found"


class AddError(DomainError):
    """An object could not be added."""

    default_message = "could not add"


class UpdateError(DomainError):
    """An object could not be updated."""

    default_message = "could not update"


class AlreadyExistsError(AddError):
    """An object could not be added because it already exists."""

    default_message = "could not add, it already exists"


class EntrantNotFound(NotFoundError):
    default_message = "entrant not found"


class FailedToAddEntrant(AddError):
    default_message = "could not add entrant"


class FailedToUpdateEntrant(UpdateError):
    default_message = "could not update entrant"


class EntrantAlreadyExists(AlreadyExistsError):
    default_message = "could not add entrant, it already exists"


class EntryNotFound(NotFoundError):
    default_message = "entry not found"


class FailedToAddEntry(AddError):
    default_message = "could not add entry"


class FailedToUpdateEntry(UpdateError):
    default_message = "could not update entry"


class EntryAlreadyExists(AlreadyExistsError):
    default_message = "could not add entry, it already exists"


class EventNotFound(NotFoundError):
    default_message = "event not found"


class FailedToAddEvent(AddError):
    default_message = "could not add event"


class FailedToUpdateEvent(UpdateError):
    default_message = "could not update event"


class EventAlreadyExists(AlreadyExistsError):
    default_message = "could not add event, it already exists"


class EventSeriesNotFound(NotFoundError):
    default_message = "event series not found"


class FailedToAddEventSeries(AddError):
    default_message = "could not add event series"


class FailedToUpdateEventSeries(UpdateError):
    default_message = "could not update event series"


class EventSeriesAlreadyExists(AlreadyExistsError):
    default_message = "could not add event series, it already exists"


class PersonNotFound(NotFoundError):
    default_message = "person not found"


class FailedToAddPerson(AddError):
    default_message = "could not add person"


class FailedToUpdatePerson(UpdateError):
    default_message = "could not update person"


class PersonAlreadyExists(AlreadyExistsError):
    default_message = "could not add person, it already exists"