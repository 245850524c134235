from events.domain.decoration import decorate, filter_and_decorate
from events.domain.models import Band, Event, EventPatch, Member
from events.domain.value_objects import EventId

__all__ = [
    "Event",
    "Band",
    "Member",
    "EventPatch",
    "EventId",
    "decorate",
    "filter_and_decorate",
]
