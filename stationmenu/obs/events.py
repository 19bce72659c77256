"""Menu lifecycle events."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Mapping, Optional

from stationmenu.invocation import utc_timestamp


class EventKind(str, Enum):
    """What happened to a menu session."""

    MENU_OPENED = "menu_opened"
    ACTION_DISPATCHED = "action_dispatched"
    MENU_DISMISSED = "menu_dismissed"


@dataclass(frozen=True)
class Event:
    """A single lifecycle record for one invocation."""

    kind: EventKind
    invocation_id: str
    ts: str
    level: str = "info"
    msg: str = ""
    action: str | None = None
    extras: Mapping[str, object] = field(default_factory=dict)


@dataclass
class EventBus:
    """Append-only in-memory event bus."""

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        kind: EventKind,
        *,
        invocation_id: str,
        level: str = "info",
        msg: str = "",
        action: str | None = None,
        extras: Mapping[str, object] | None = None,
    ) -> Event:
        """Record a ``kind`` event for ``invocation_id`` and return it."""

        event = Event(
            kind=EventKind(kind),
            invocation_id=invocation_id,
            ts=utc_timestamp(),
            level=level,
            msg=msg,
            action=action,
            extras=dict(extras or {}),
        )
        self.events.append(event)
        return event

    def history(self) -> Iterable[Event]:
        """Return the chronological event history."""

        return tuple(self.events)

    def for_invocation(self, invocation_id: str, kind: Optional[EventKind] = None) -> tuple[Event, ...]:
        """Return the events of one invocation, optionally only those of ``kind``."""

        return tuple(
            event
            for event in self.events
            if event.invocation_id == invocation_id and (kind is None or event.kind is EventKind(kind))
        )

    def of_kind(self, kind: EventKind) -> tuple[Event, ...]:
        kind = EventKind(kind)
        return tuple(event for event in self.events if event.kind is kind)
