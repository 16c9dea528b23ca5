# racereg

A small domain model for organising race events and registering people for them.
It provides aggregates that enforce their own invariants, thread-safe in-memory
repositories, and application services that connect the two.

## Installation

```
pip install racereg
```

It needs Python 3.10 or later and no third-party libraries.

## Modules

- `racereg.aggregates`: `Person`, `Event`, `EventSeries`, `Entrant` and `Entry`.
  Each one gets a fresh UUID on construction, checks its inputs, and keeps
  `created_at`, `updated_at` and `archived_at` current. An `Entrant` holds at
  most one `Entry`, which it creates with `create_entry()` and drops with
  `remove_entry()`. Its distance cannot change once an entry exists. An `Event`
  keeps a list of `Distance` records with unique ids.
- `racereg.entities`: plain dataclass records: `Distance`, `Medal`, `Entrant`,
  `Entry`, `Event`, `Organiser` and `Person`.
- `racereg.values`: frozen value objects `DistanceValue`, `Duration` and
  `Transaction`, and the `EntrantStatus` enum (`registered`, `confirmed`,
  `started`, `finished`, `dnf`, `dq`).
- `racereg.memory`: one in-memory repository for each aggregate:
  `PersonMemoryRepository`, `EventMemoryRepository`,
  `EventSeriesMemoryRepository`, `EntrantMemoryRepository` and
  `EntryMemoryRepository`.
- `racereg.services`: `PersonService`, `EventService`, `EventSeriesService` and
  `RegistrationService`.
- `racereg.errors`: the exceptions the package raises. They all derive from
  `DomainError`.

## Example

```python
from datetime import datetime
from uuid import uuid4

from racereg.errors import PersonAlreadyExists
from racereg.memory import EntrantMemoryRepository, EntryMemoryRepository
from racereg.services import EventService, PersonService, RegistrationService

people = PersonService.in_memory()
runner = people.create("Alex Runner", "alex@example.com", "")

try:
    people.create("Alex Again", "ALEX@example.com", "")
except PersonAlreadyExists:
    pass  # e-mail addresses are compared without regard to case

events = EventService.in_memory()
race = events.create("City Marathon", datetime(2030, 4, 14), uuid4())

registrations = RegistrationService(EntrantMemoryRepository(), EntryMemoryRepository())
distance_id = uuid4()
entry = registrations.register_person_for_distance(runner.id, race.id, distance_id)

# Registering the same person for the same distance a second time
# returns the entry that already exists.
assert registrations.register_person_for_distance(runner.id, race.id, distance_id).id == entry.id

for entrant in registrations.get_event_registrations(race.id):
    registrations.cancel_registration(entrant.id)
```

## Errors

- An invalid argument raises `ValueError`. Examples are an empty name or
  description, a missing date, or a nil UUID passed to a constructor or an
  `update_*` method.
- A rule broken inside an aggregate raises `DomainError`. Examples are creating
  a second entry for an entrant, adding a distance twice, or removing a distance
  or event that is not there.
- A repository lookup that finds nothing raises the matching `*NotFound` error,
  such as `PersonNotFound`. Adding an object whose id is already stored raises
  the matching `*AlreadyExists` error.
- Passing `None` as a repository to a service raises the matching
  `FailedToAdd*` error.

## Limitations

- Storage is in memory only. Nothing is persisted between runs.
- `EventMemoryRepository.find_by_date_range` returns every stored event. Its
  bounds do not filter the result.
- `EventSeriesMemoryRepository` stores shallow copies. A change to a series
  object reaches the repository only through `update`.
- The package has no command-line interface and no server.

## Running the tests

```
pip install "racereg[test]"
pytest
```