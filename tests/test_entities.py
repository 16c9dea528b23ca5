import uuid
from datetime import datetime, timezone

import pytest

from racereg.entities import (
    NIL_UUID,
    Distance,
    Entrant,
    Entry,
    Event,
    Medal,
    Organiser,
    Person,
)


@pytest.mark.parametrize("cls", [Medal, Distance, Entrant, Entry, Event, Organiser, Person])
def test_archived_at_defaults_to_none(cls):
    assert cls().archived_at is None


@pytest.mark.parametrize("cls", [Medal, Distance, Entrant, Entry, Event, Organiser, Person])
def test_timestamps_are_aware_and_ordered(cls):
    before = datetime.now(timezone.utc)
    obj = cls()
    after = datetime.now(timezone.utc)
    assert before <= obj.created_at <= obj.updated_at <= after


@pytest.mark.parametrize("cls", [Medal, Distance, Entrant, Entry, Event, Person])
def test_id_defaults_to_nil(cls):
    assert cls().id == NIL_UUID


def test_default_id_is_all_zero():
    assert Entry().id.int == 0


def test_event_lists_are_not_shared():
    first = Event()
    second = Event()
    first.distances.append(Distance(name="10k"))
    assert second.distances == []
    assert len(first.distances) == 1


def test_distance_holds_medals():
    distance_id = uuid.uuid4()
    medal = Medal(id=uuid.uuid4(), name="Gold", distance_id=distance_id)
    distance = Distance(id=distance_id, name="Marathon", length=42.195, medals=[medal])
    assert distance.medals[0].distance_id == distance.id
    assert distance.length == 42.195


def test_entry_links_entrant_and_event():
    entrant = Entrant(id=uuid.uuid4(), person_id=uuid.uuid4(), event_id=uuid.uuid4(), distance_id=uuid.uuid4())
    entry = Entry(
        id=uuid.uuid4(),
        distance_id=entrant.distance_id,
        entrant_id=entrant.id,
        event_id=entrant.event_id,
    )
    assert entry.entrant_id == entrant.id
    assert entry.event_id == entrant.event_id


def test_person_fields_round_trip():
    entry_id = uuid.uuid4()
    person = Person(name="Alex", email="alex@example.com", phone="", entry_ids=[entry_id])
    assert person.email == "alex@example.com"
    assert person.entry_ids == [entry_id]


def test_organiser_event_ids():
    person_id = uuid.uuid4()
    event_ids = [uuid.uuid4(), uuid.uuid4()]
    organiser = Organiser(person_id=person_id, event_ids=list(event_ids))
    assert organiser.event_ids == event_ids
    assert organiser.person_id == person_id


def test_fields_are_keyword_only():
    with pytest.raises(TypeError):
        Medal(uuid.uuid4())


def test_equality_by_value():
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ident = uuid.uuid4()
    a = Entrant(id=ident, created_at=stamp, updated_at=stamp)
    b = Entrant(id=ident, created_at=stamp, updated_at=stamp)
    assert a == b