import uuid
from datetime import datetime, timezone

import pytest

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
    NotFoundError,
    PersonAlreadyExists,
    PersonNotFound,
)
from racereg.memory import (
    EntrantMemoryRepository,
    EntryMemoryRepository,
    EventMemoryRepository,
    EventSeriesMemoryRepository,
    PersonMemoryRepository,
)

NIL = uuid.UUID("00000000-0000-0000-0000-000000000000")
DATE = datetime(2024, 5, 1, tzinfo=timezone.utc)


# Event series -------------------------------------------------------------


@pytest.fixture
def series_repo():
    repo = EventSeriesMemoryRepository()
    series = EventSeries("Test Series", "A test event series", uuid.uuid4())
    repo.add(series)
    return repo, series


def test_event_series_get_valid_id(series_repo):
    repo, series = series_repo
    assert repo.get(series.id).id == series.id


def test_event_series_get_invalid_id(series_repo):
    repo, _ = series_repo
    with pytest.raises(EventSeriesNotFound) as info:
        repo.get(NIL)
    assert str(info.value) == "event series not found"


def test_event_series_add_twice_fails(series_repo):
    repo, series = series_repo
    with pytest.raises(EventSeriesAlreadyExists):
        repo.add(series)


def test_event_series_update_unknown_fails():
    repo = EventSeriesMemoryRepository()
    with pytest.raises(EventSeriesNotFound):
        repo.update(EventSeries("Name", "Description", uuid.uuid4()))


def test_event_series_stored_as_snapshot(series_repo):
    repo, series = series_repo
    series.update_name("Renamed")
    assert repo.get(series.id).name == "Test Series"
    repo.update(series)
    assert repo.get(series.id).name == "Renamed"


# Entrants -----------------------------------------------------------------


def test_entrant_add_get_and_duplicate():
    repo = EntrantMemoryRepository()
    entrant = Entrant(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    repo.add(entrant)
    assert repo.get(entrant.id) is entrant
    with pytest.raises(EntrantAlreadyExists):
        repo.add(entrant)


def test_entrant_get_missing():
    with pytest.raises(EntrantNotFound):
        EntrantMemoryRepository().get(uuid.uuid4())


def test_entrant_update_requires_existing():
    repo = EntrantMemoryRepository()
    entrant = Entrant(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    with pytest.raises(EntrantNotFound):
        repo.update(entrant)
    repo.add(entrant)
    entrant.create_entry()
    repo.update(entrant)
    assert repo.get(entrant.id).has_entry() is True


def test_entrant_finders():
    repo = EntrantMemoryRepository()
    person, event, other_event = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    d1, d2 = uuid.uuid4(), uuid.uuid4()
    a = Entrant(person, event, d1)
    b = Entrant(person, event, d2)
    c = Entrant(uuid.uuid4(), event, d1)
    d = Entrant(person, other_event, d1)
    for item in (a, b, c, d):
        repo.add(item)

    assert repo.find_by_person_event_and_distance(person, event, d2) is b
    with pytest.raises(EntrantNotFound):
        repo.find_by_person_event_and_distance(person, other_event, d2)
    assert {e.id for e in repo.find_by_person_and_event(person, event)} == {a.id, b.id}
    assert {e.id for e in repo.find_by_event(event)} == {a.id, b.id, c.id}
    assert repo.find_by_event(uuid.uuid4()) == []


def test_entrant_delete():
    repo = EntrantMemoryRepository()
    entrant = Entrant(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    repo.add(entrant)
    repo.delete(entrant.id)
    with pytest.raises(EntrantNotFound):
        repo.get(entrant.id)
    with pytest.raises(EntrantNotFound):
        repo.delete(entrant.id)


# Entries ------------------------------------------------------------------


def test_entry_add_get_and_duplicate():
    repo = EntryMemoryRepository()
    entry = Entry(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    repo.add(entry)
    assert repo.get(entry.id) is entry
    with pytest.raises(EntryAlreadyExists):
        repo.add(entry)


def test_entry_update_and_delete_missing():
    repo = EntryMemoryRepository()
    entry = Entry(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    with pytest.raises(EntryNotFound):
        repo.update(entry)
    with pytest.raises(EntryNotFound):
        repo.delete(entry.id)


def test_entry_finders():
    repo = EntryMemoryRepository()
    event, d1, d2 = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    entrant = uuid.uuid4()
    a = Entry(d1, entrant, event)
    b = Entry(d2, uuid.uuid4(), event)
    c = Entry(d1, uuid.uuid4(), uuid.uuid4())
    for item in (a, b, c):
        repo.add(item)

    assert repo.find_by_entrant(entrant) is a
    with pytest.raises(EntryNotFound):
        repo.find_by_entrant(uuid.uuid4())
    assert {e.id for e in repo.find_by_event(event)} == {a.id, b.id}
    assert {e.id for e in repo.find_by_distance(d1)} == {a.id, c.id}
    assert [e.id for e in repo.find_by_event_and_distance(event, d1)] == [a.id]
    assert repo.find_by_event_and_distance(uuid.uuid4(), d1) == []


def test_entry_delete():
    repo = EntryMemoryRepository()
    entry = Entry(uuid.uuid4(), uuid.uuid4(), uuid.uuid4())
    repo.add(entry)
    repo.delete(entry.id)
    with pytest.raises(EntryNotFound):
        repo.get(entry.id)


# Events -------------------------------------------------------------------


def test_event_add_get_update_delete():
    repo = EventMemoryRepository()
    event = Event("Spring Run", DATE, uuid.uuid4())
    with pytest.raises(EventNotFound):
        repo.update(event)
    repo.add(event)
    with pytest.raises(EventAlreadyExists):
        repo.add(event)
    event.update_name("Autumn Run")
    repo.update(event)
    assert repo.get(event.id).name == "Autumn Run"
    repo.delete(event.id)
    with pytest.raises(EventNotFound):
        repo.get(event.id)
    with pytest.raises(EventNotFound):
        repo.delete(event.id)


def test_event_find_by_organiser():
    repo = EventMemoryRepository()
    organiser = uuid.uuid4()
    a = Event("A", DATE, organiser)
    b = Event("B", DATE, organiser)
    c = Event("C", DATE, uuid.uuid4())
    for item in (a, b, c):
        repo.add(item)
    assert {e.id for e in repo.find_by_organiser(organiser)} == {a.id, b.id}
    assert repo.find_by_organiser(uuid.uuid4()) == []


def test_event_find_by_date_range_returns_all():
    repo = EventMemoryRepository()
    a = Event("A", DATE, uuid.uuid4())
    b = Event("B", datetime(2030, 1, 1, tzinfo=timezone.utc), uuid.uuid4())
    repo.add(a)
    repo.add(b)
    found = repo.find_by_date_range("2024-01-01", "2024-12-31")
    assert {e.id for e in found} == {a.id, b.id}


# People -------------------------------------------------------------------


def test_person_add_get_and_duplicate():
    repo = PersonMemoryRepository()
    person = Person("Ada", "ada@example.com", "")
    repo.add(person)
    assert repo.get(person.id) is person
    with pytest.raises(PersonAlreadyExists):
        repo.add(person)


def test_person_find_by_email_ignores_case():
    repo = PersonMemoryRepository()
    person = Person("Ada", "Ada@Example.com", "")
    repo.add(person)
    assert repo.find_by_email("ada@example.com") is person
    with pytest.raises(PersonNotFound):
        repo.find_by_email("bob@example.com")


def test_person_find_by_name_and_email():
    repo = PersonMemoryRepository()
    person = Person("Ada Lovelace", "ada@example.com", "")
    repo.add(person)
    assert repo.find_by_name_and_email("ADA LOVELACE", "ADA@example.com") is person
    with pytest.raises(PersonNotFound):
        repo.find_by_name_and_email("Someone Else", "ada@example.com")


def test_person_update_and_delete():
    repo = PersonMemoryRepository()
    person = Person("Ada", "ada@example.com", "")
    with pytest.raises(PersonNotFound):
        repo.update(person)
    repo.add(person)
    person.update_email("lovelace@example.com")
    repo.update(person)
    assert repo.find_by_email("lovelace@example.com") is person
    repo.delete(person.id)
    with pytest.raises(NotFoundError):
        repo.get(person.id)
    with pytest.raises(PersonNotFound):
        repo.delete(person.id)