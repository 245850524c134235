"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, EventPatch


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return all events with their bands and members, ordered by id."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Insert or update an event by ID and return the stored version.

        When event.bands is not None the band association is replaced by
        the given bands.
        """
        ...

    @abstractmethod
    def update(self, event_id: EventId, patch: EventPatch) -> Event | None:
        """Apply a partial update atomically and return the stored event.

        Only the fields present in patch are written; the band association
        is left as it is in storage. Returns None if the event does not exist.
        """
        ...

    @abstractmethod
    def delete_by_id(self, event_id: EventId) -> None:
        """Delete an event. Deleting a missing event is a no-op."""
        ...
