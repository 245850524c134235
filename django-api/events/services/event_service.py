"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import EventId, filter_and_decorate
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.domain.models import Event, EventPatch
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all stored events, undecorated."""
        return self._store.find_all()

    def get_filtered_events(self, query: str | None = None) -> list[Event]:
        """Return decorated events whose members match query.

        A None or blank query returns every event, decorated.
        """
        events = filter_and_decorate(self._store.find_all(), query)
        logger.debug("Event search %r matched %d event(s)", query, len(events))
        return events

    def update_event(self, event_id: str, patch: EventPatch) -> Event:
        """Apply a partial update to an event and return the stored result.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = _parse_event_id(event_id)
        updated = self._store.update(parsed_id, patch)
        if updated is None:
            raise EventNotFoundError(event_id)

        logger.info("Updated event %s", parsed_id.value)
        return updated

    def delete_event(self, event_id: str) -> None:
        """Delete an event. Missing events are ignored.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
        """
        parsed_id = _parse_event_id(event_id)
        self._store.delete_by_id(parsed_id)
        logger.info("Deleted event %s", parsed_id.value)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(str(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc
