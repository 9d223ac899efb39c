"""Infrastructure layer: concrete implementations of application ports."""

from contactdesk.infrastructure.memory_store import InMemoryContactStore, default_store

__all__ = ["InMemoryContactStore", "default_store"]
