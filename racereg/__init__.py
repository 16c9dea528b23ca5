"""Domain model, in-memory repositories and services for race event registration."""

__version__ = "0.1.0"