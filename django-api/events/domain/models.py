"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).

Associations may be None when they were never loaded; readers treat
None as an empty collection. Band and Member compare by identity.
"""

from dataclasses import dataclass, fields, replace

from events.domain.value_objects import EventId


@dataclass(frozen=True, eq=False)
class Member:
    """Domain representation of a band Member."""

    id: int | None
    name: str | None


@dataclass(frozen=True, eq=False)
class Band:
    """Domain representation of a Band."""

    id: int | None
    name: str | None
    members: tuple[Member | None, ...] | None = ()


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId | None
    title: str | None
    img_url: str | None = None
    nb_stars: int | None = None
    comment: str | None = None
    bands: tuple[Band | None, ...] | None = ()


@dataclass(frozen=True)
class EventPatch:
    """Partial update for an Event. None means "leave unchanged"."""

    title: str | None = None
    img_url: str | None = None
    nb_stars: int | None = None
    comment: str | None = None

    def changes(self) -> dict[str, str | int]:
        """Return the present fields keyed by Event attribute name."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }

    def apply_to(self, event: Event) -> Event:
        """Return a copy of event with every present patch field overwritten."""
        return replace(event, **self.changes())
