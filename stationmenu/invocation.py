"""Single-use menu invocations."""
from __future__ import annotations

import datetime as _dt
import threading
import uuid
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .model import ActionId, ActionSpec, CapabilityFlags, InvocationState


def new_invocation_id() -> str:
    """Return a unique identifier for one menu opening."""

    return f"inv_{uuid.uuid4().hex}"


def utc_timestamp() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return _dt.datetime.now(_dt.timezone.utc).isoformat()


class ReuseError(RuntimeError):
    """Raised when a terminal invocation is dispatched or dismissed again."""

    def __init__(self, invocation_id: str, state: InvocationState) -> None:
        super().__init__(f"Invocation '{invocation_id}' is already {state.value}")
        self.invocation_id = invocation_id
        self.state = state


@dataclass
class Invocation:
    """One capability snapshot plus the actions it made visible.

    An invocation starts ``OPEN`` and moves exactly once to ``CONSUMED`` (a
    selection was dispatched) or ``DISCARDED`` (the menu was dismissed).
    Every spec must be visible under ``flags``; build invocations through
    :meth:`stationmenu.router.ActionRouter.open` to get the filtering for free.
    """

    flags: CapabilityFlags
    specs: Sequence[ActionSpec]
    invocation_id: str = field(default_factory=new_invocation_id)
    opened_at: str = field(default_factory=utc_timestamp)
    _state: InvocationState = field(default=InvocationState.OPEN, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.specs = tuple(self.specs)
        hidden = [spec.action.value for spec in self.specs if not spec.is_visible(self.flags)]
        if hidden:
            raise ValueError(f"Actions not visible under {self.flags}: {', '.join(hidden)}")

    @property
    def state(self) -> InvocationState:
        return self._state

    @property
    def visible_actions(self) -> tuple[ActionId, ...]:
        return tuple(spec.action for spec in self.specs)

    def lookup(self, action: Optional[ActionId]) -> Optional[ActionSpec]:
        """Return the visible spec bound to ``action`` if there is one."""

        for spec in self.specs:
            if spec.action is action:
                return spec
        return None

    def consume(self) -> None:
        """Mark the invocation as consumed by a selection."""

        self._transition(InvocationState.CONSUMED)

    def discard(self) -> None:
        """Mark the invocation as dismissed without a selection."""

        self._transition(InvocationState.DISCARDED)

    def _transition(self, target: InvocationState) -> None:
        with self._lock:
            if self._state.terminal:
                raise ReuseError(self.invocation_id, self._state)
            self._state = target


__all__ = ["Invocation", "ReuseError"]
