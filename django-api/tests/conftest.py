"""Pytest configuration and shared fixtures."""

from dataclasses import replace

import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from events.domain import Band, Event, EventId, EventPatch, Member
from events.services.event_service import EventService
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """EventStore fake keeping events in insertion order."""

    def __init__(self, events: list[Event] = ()) -> None:
        self.events = {event.id: event for event in events}
        self.saved: list[Event] = []
        self.deleted: list[EventId] = []

    def find_all(self) -> list[Event]:
        return list(self.events.values())

    def find_by_id(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def save(self, event: Event) -> Event:
        if event.id is None:
            next_id = max((key.value for key in self.events), default=0) + 1
            event = replace(event, id=EventId(next_id))
        self.events[event.id] = event
        self.saved.append(event)
        return event

    def update(self, event_id: EventId, patch: EventPatch) -> Event | None:
        current = self.events.get(event_id)
        if current is None:
            return None
        return self.save(patch.apply_to(current))

    def delete_by_id(self, event_id: EventId) -> None:
        self.deleted.append(event_id)
        self.events.pop(event_id, None)


@pytest.fixture
def lineup() -> list[Event]:
    """GrasPop and Rock Werchter sharing the band Muse."""
    walsh = Member(id=1, name="Queen Anika Walsh")
    doe = Member(id=2, name="John Doe")
    wayne = Member(id=3, name="Alice Wayne")
    metallica = Band(id=1, name="Metallica", members=(walsh, doe))
    muse = Band(id=2, name="Muse", members=(wayne,))
    return [
        Event(
            id=EventId(1),
            title="GrasPop Metal Meeting",
            img_url="img/1000.jpeg",
            nb_stars=4,
            comment="Top",
            bands=(metallica, muse),
        ),
        Event(
            id=EventId(2),
            title="Rock Werchter",
            img_url="img/2000.jpeg",
            nb_stars=5,
            comment="Legendary",
            bands=(muse,),
        ),
    ]


@pytest.fixture
def store(lineup: list[Event]) -> InMemoryEventStore:
    return InMemoryEventStore(lineup)


@pytest.fixture
def service(store: InMemoryEventStore) -> EventService:
    return EventService(store)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def demo_events(db) -> None:
    call_command("loaddata", "demo_events", verbosity=0)
