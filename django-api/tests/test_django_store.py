"""Integration tests for DjangoEventStore against the test database.

Run with: pytest tests/test_django_store.py -v
"""

from dataclasses import replace

import pytest

from events import models
from events.domain import Event, EventId, EventPatch
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


class BandRemovingStore(DjangoEventStore):
    """Drops band 2 from event 1 right after the first read, like a concurrent request."""

    def __init__(self) -> None:
        self.reads = 0

    def find_by_id(self, event_id: EventId) -> Event | None:
        event = super().find_by_id(event_id)
        self.reads += 1
        if self.reads == 1:
            models.Event.objects.get(pk=1).bands.remove(2)
        return event


@pytest.fixture
def event_store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for the ORM-backed store."""

    def test_find_all_returns_domain_events_with_lineup(self, event_store, demo_events):
        """Given demo data, returns events with bands and members."""
        events = event_store.find_all()

        assert [event.id for event in events] == [EventId(1), EventId(2)]
        graspop = events[0]
        assert graspop.title == "GrasPop Metal Meeting"
        assert graspop.img_url == "img/1000.jpeg"
        assert graspop.nb_stars == 4
        assert graspop.comment == "Top"
        assert [band.name for band in graspop.bands] == ["Metallica", "Muse"]
        assert [member.name for member in graspop.bands[0].members] == [
            "Queen Anika Walsh",
            "John Doe",
        ]

    def test_find_all_on_empty_database(self, event_store, db):
        """Given no events, returns an empty list."""
        assert event_store.find_all() == []

    def test_find_by_id(self, event_store, demo_events):
        """Given an existing id, returns that event."""
        event = event_store.find_by_id(EventId(2))

        assert event.title == "Rock Werchter"
        assert [band.name for band in event.bands] == ["Muse"]

    def test_find_by_id_missing_returns_none(self, event_store, demo_events):
        """Given a missing id, returns None."""
        assert event_store.find_by_id(EventId(99)) is None

    def test_save_updates_fields_and_keeps_bands(self, event_store, demo_events):
        """Saving a stored event rewrites fields and keeps its bands."""
        current = event_store.find_by_id(EventId(1))

        saved = event_store.save(replace(current, title="Updated Title", nb_stars=3))

        assert saved.title == "Updated Title"
        assert saved.nb_stars == 3
        assert saved.img_url == "img/1000.jpeg"
        assert list(models.Event.objects.get(pk=1).bands.values_list("id", flat=True)) == [1, 2]

    def test_save_creates_event_without_id(self, event_store, db):
        """Saving an event without id inserts a new row."""
        saved = event_store.save(Event(id=None, title="Dour", nb_stars=2))

        assert saved.id is not None
        assert saved.title == "Dour"
        assert saved.bands == ()
        assert models.Event.objects.count() == 1

    def test_save_with_null_bands_leaves_association_alone(self, event_store, demo_events):
        """bands=None leaves the stored association unchanged."""
        event_store.save(Event(id=EventId(2), title="Rock Werchter", bands=None))

        assert list(models.Event.objects.get(pk=2).bands.values_list("name", flat=True)) == ["Muse"]

    def test_delete_by_id(self, event_store, demo_events):
        """delete_by_id removes the event but not its bands."""
        event_store.delete_by_id(EventId(1))

        assert [event.id for event in event_store.find_all()] == [EventId(2)]
        assert models.Band.objects.count() == 2

    def test_delete_missing_id_is_a_no_op(self, event_store, demo_events):
        """Deleting a missing id changes nothing."""
        event_store.delete_by_id(EventId(99))

        assert models.Event.objects.count() == 2

    def test_update_writes_present_fields_only(self, event_store, demo_events):
        """update changes the patched columns and nothing else."""
        updated = event_store.update(
            EventId(1), EventPatch(title="Updated Title", nb_stars=3, comment="Updated comment")
        )

        assert updated.title == "Updated Title"
        stored = models.Event.objects.get(pk=1)
        assert (stored.title, stored.img_url, stored.nb_stars, stored.comment) == (
            "Updated Title",
            "img/1000.jpeg",
            3,
            "Updated comment",
        )
        assert list(stored.bands.values_list("id", flat=True)) == [1, 2]

    def test_update_keeps_bands_changed_after_an_earlier_read(self, event_store, demo_events):
        """A band removed after a read stays removed after update."""
        stale = event_store.find_by_id(EventId(1))
        models.Event.objects.get(pk=1).bands.remove(2)

        updated = event_store.update(EventId(1), EventPatch(comment="x"))

        assert len(stale.bands) == 2
        assert [band.name for band in updated.bands] == ["Metallica"]
        assert list(models.Event.objects.get(pk=1).bands.values_list("id", flat=True)) == [1]

    def test_update_missing_id_returns_none(self, event_store, demo_events):
        """Given a missing id, update returns None and inserts nothing."""
        assert event_store.update(EventId(99), EventPatch(title="Ghost")) is None
        assert not models.Event.objects.filter(pk=99).exists()

    def test_update_with_empty_patch_returns_stored_event(self, event_store, demo_events):
        """An empty patch writes nothing and returns the event."""
        updated = event_store.update(EventId(2), EventPatch())

        assert updated.title == "Rock Werchter"
        assert updated.comment == "Legendary"


@pytest.mark.django_db
def test_service_update_does_not_restore_concurrently_removed_band(demo_events):
    """Band changes made while an update is in flight are not overwritten."""
    service = EventService(BandRemovingStore())

    service.update_event("1", EventPatch(comment="x"))

    stored = models.Event.objects.get(pk=1)
    assert stored.comment == "x"
    assert list(stored.bands.values_list("id", flat=True)) == [1]
