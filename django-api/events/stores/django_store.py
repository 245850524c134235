"""Django ORM implementation of the EventStore."""

from django.db import transaction

from events import models
from events.domain import Band, Event, EventId, EventPatch, Member
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def find_all(self) -> list[Event]:
        return [_to_domain(record) for record in _events_with_lineup()]

    def find_by_id(self, event_id: EventId) -> Event | None:
        record = _events_with_lineup().filter(pk=event_id.value).first()
        return _to_domain(record) if record is not None else None

    def save(self, event: Event) -> Event:
        with transaction.atomic():
            record = None
            if event.id is not None:
                record = (
                    models.Event.objects.select_for_update()
                    .filter(pk=event.id.value)
                    .first()
                )
                if record is None:
                    record = models.Event(pk=event.id.value)
            if record is None:
                record = models.Event()

            record.title = event.title
            record.img_url = event.img_url
            record.nb_stars = event.nb_stars
            record.comment = event.comment
            record.save()

            if event.bands is not None:
                record.bands.set(
                    [band.id for band in event.bands if band is not None and band.id is not None]
                )

        return self.find_by_id(EventId(record.pk))

    def update(self, event_id: EventId, patch: EventPatch) -> Event | None:
        changes = patch.changes()
        with transaction.atomic():
            record = (
                models.Event.objects.select_for_update()
                .filter(pk=event_id.value)
                .first()
            )
            if record is None:
                return None
            if changes:
                for name, value in changes.items():
                    setattr(record, name, value)
                record.save(update_fields=list(changes))
            return self.find_by_id(event_id)

    def delete_by_id(self, event_id: EventId) -> None:
        with transaction.atomic():
            models.Event.objects.filter(pk=event_id.value).delete()


def _events_with_lineup():
    return models.Event.objects.prefetch_related("bands__members").order_by("id")


def _to_domain(record: models.Event) -> Event:
    return Event(
        id=EventId(record.pk),
        title=record.title,
        img_url=record.img_url,
        nb_stars=record.nb_stars,
        comment=record.comment,
        bands=tuple(
            Band(
                id=band.pk,
                name=band.name,
                members=tuple(Member(id=member.pk, name=member.name) for member in band.members.all()),
            )
            for band in record.bands.all()
        ),
    )
