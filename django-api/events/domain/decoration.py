"""Display decoration for events.

Decorated events are throwaway copies built for a single response: the
title carries the number of bands and every band name carries the number
of its members, e.g. "Rock Werchter [1]" with band "Muse [1]".

Source objects are never modified. Missing associations and missing
elements inside them are skipped rather than reported, since the input
may come from partially loaded relations.

Decoration is not idempotent: decorating an already decorated event
appends a second suffix.
"""

from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar

from events.domain.models import Band, Event, Member

T = TypeVar("T")

# Non-breaking spaces and NEL are query text, not blanks.
NON_BLANK_SPACES = frozenset("\x85\xa0\u2007\u202f")


def filter_and_decorate(
    events: Iterable[Event | None], query: str | None = None
) -> list[Event]:
    """Return decorated copies of the events matching query.

    Args:
        events: Source events. None entries are dropped.
        query: Case-insensitive substring looked up in member names.
            None or blank disables filtering.

    Returns:
        Decorated events, in input order.
    """
    present = _present(events)
    if query is None or _is_blank(query):
        return [decorate(event) for event in present]

    needle = query.lower()
    return [decorate(event) for event in present if _has_member_matching(event, needle)]


def decorate(event: Event) -> Event:
    """Return a copy of event with band and member counts in its names."""
    # dict keys keep insertion order; Band hashes by identity
    bands = tuple(dict.fromkeys(_decorate_band(band) for band in _present(event.bands)))
    return replace(event, title=_with_count(event.title, len(bands)), bands=bands)


def _decorate_band(band: Band) -> Band:
    members = _members_of(band)
    # display copies carry no identity of their own
    return Band(
        id=None,
        name=_with_count(band.name, len(members)),
        members=members,
    )


def _has_member_matching(event: Event, needle: str) -> bool:
    return any(
        needle in member.name.lower()
        for band in _present(event.bands)
        for member in _present(_members_of(band))
        if member.name is not None
    )


def _members_of(band: Band) -> tuple[Member | None, ...]:
    return band.members if band.members is not None else ()


def _present(items: Iterable[T | None] | None) -> list[T]:
    return [item for item in items or () if item is not None]


def _is_blank(query: str) -> bool:
    return all(char.isspace() and char not in NON_BLANK_SPACES for char in query)


def _with_count(label: str | None, count: int) -> str:
    return f"{label or ''} [{count}]"
