"""Core value types shared by the resolver and the dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .catalog import ActionHandler


class ActionId(str, Enum):
    """Closed set of actions a station menu can offer, in presentation order."""

    PLAY_INTERNAL = "play_internal"
    PLAY_EXTERNAL = "play_external"
    VISIT_HOMEPAGE = "visit_homepage"
    SHARE = "share"
    SET_ALARM = "set_alarm"
    CREATE_SHORTCUT = "create_shortcut"
    REMOVE_FAVORITE = "remove_favorite"

    @classmethod
    def parse(cls, value: "ActionId | str") -> Optional["ActionId"]:
        """Return the matching :class:`ActionId` or ``None`` for unknown values."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class CapabilityFlags:
    """Snapshot of preference and platform flags taken when a menu opens."""

    prefer_external_player: bool = False
    platform_supports_shortcuts: bool = False


@dataclass(frozen=True)
class ActionSpec:
    """Bind an :class:`ActionId` to its visibility rule and handler."""

    action: ActionId
    is_visible: Callable[[CapabilityFlags], bool]
    handler: "ActionHandler"


class DispatchResult(Enum):
    HANDLED = "handled"
    UNHANDLED = "unhandled"

    def __bool__(self) -> bool:
        return self is DispatchResult.HANDLED


class InvocationState(Enum):
    OPEN = "open"
    CONSUMED = "consumed"
    DISCARDED = "discarded"

    @property
    def terminal(self) -> bool:
        return self is not InvocationState.OPEN


__all__ = [
    "ActionId",
    "ActionSpec",
    "CapabilityFlags",
    "DispatchResult",
    "InvocationState",
]
