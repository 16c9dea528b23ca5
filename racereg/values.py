"""Immutable value objects without identity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


@dataclass(frozen=True)
class DistanceValue:
    """A length together with its unit, such as meters or kilometers."""

    value: float
    unit: str


@dataclass(frozen=True)
class Duration:
    """A span of time in hours, minutes and seconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0


class EntrantStatus(str, Enum):
    """Where an entrant stands in an event."""

    REGISTERED = "registered"
    CONFIRMED = "confirmed"
    STARTED = "started"
    FINISHED = "finished"
    DNF = "dnf"  # did not finish
    DQ = "dq"  # disqualified


@dataclass(frozen=True)
class Transaction:
    """A transfer from one party to another."""

    source: uuid.UUID
    target: uuid.UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))