"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactdesk.domain.entities import Contact

__all__ = ["Contact"]
