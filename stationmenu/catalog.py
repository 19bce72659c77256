"""The fixed, ordered catalog of station actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .context import HandlerContext
from .model import ActionId, ActionSpec, CapabilityFlags


class ActionHandler(Protocol):
    """Protocol representing a station action handler."""

    def __call__(self, station: Any, context: HandlerContext) -> object:  # pragma: no cover - interface
        ...


CATALOG_ORDER: tuple[ActionId, ...] = (
    ActionId.PLAY_INTERNAL,
    ActionId.PLAY_EXTERNAL,
    ActionId.VISIT_HOMEPAGE,
    ActionId.SHARE,
    ActionId.SET_ALARM,
    ActionId.CREATE_SHORTCUT,
    ActionId.REMOVE_FAVORITE,
)


def _prefers_external(flags: CapabilityFlags) -> bool:
    # The in-app player is offered only to users who normally play externally.
    return flags.prefer_external_player


def _prefers_internal(flags: CapabilityFlags) -> bool:
    return not flags.prefer_external_player


def _supports_shortcuts(flags: CapabilityFlags) -> bool:
    return flags.platform_supports_shortcuts


def _always(_: CapabilityFlags) -> bool:
    return True


@dataclass(frozen=True)
class ActionHandlers:
    """The host-supplied handler for every catalog entry."""

    play_internal: ActionHandler
    play_external: ActionHandler
    visit_homepage: ActionHandler
    share: ActionHandler
    set_alarm: ActionHandler
    create_shortcut: ActionHandler
    remove_favorite: ActionHandler

    def for_action(self, action: ActionId) -> ActionHandler:
        return getattr(self, action.value)


_VISIBILITY = {
    ActionId.PLAY_INTERNAL: _prefers_external,
    ActionId.PLAY_EXTERNAL: _prefers_internal,
    ActionId.VISIT_HOMEPAGE: _always,
    ActionId.SHARE: _always,
    ActionId.SET_ALARM: _always,
    ActionId.CREATE_SHORTCUT: _supports_shortcuts,
    ActionId.REMOVE_FAVORITE: _always,
}


def build_catalog(handlers: ActionHandlers) -> tuple[ActionSpec, ...]:
    """Bind ``handlers`` to the visibility rules in presentation order."""

    return tuple(
        ActionSpec(action=action, is_visible=_VISIBILITY[action], handler=handlers.for_action(action))
        for action in CATALOG_ORDER
    )


__all__ = ["ActionHandler", "ActionHandlers", "CATALOG_ORDER", "build_catalog"]
