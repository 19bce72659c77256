"""Public API surface for station menus."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from stationmenu.catalog import ActionHandlers, build_catalog
from stationmenu.config import PlatformProbe, PreferenceSource, capability_flags
from stationmenu.context import HandlerContext
from stationmenu.invocation import Invocation
from stationmenu.model import ActionId, CapabilityFlags, DispatchResult, InvocationState
from stationmenu.obs.events import EventBus, EventKind
from stationmenu.router import ActionRouter

LOGGER = logging.getLogger(__name__)


@dataclass
class MenuSession:
    """A single presentation of the station menu.

    The host renders :attr:`visible_actions` and later reports either one
    selection through :meth:`select` or a dismissal through :meth:`dismiss`.
    """

    menu: "StationMenu"
    invocation: Invocation
    station: Any
    context: HandlerContext

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(id={self.invocation.invocation_id!r}, state={self.state.value})"

    @property
    def visible_actions(self) -> tuple[ActionId, ...]:
        return self.invocation.visible_actions

    @property
    def state(self) -> InvocationState:
        return self.invocation.state

    def select(self, item: ActionId | str) -> DispatchResult:
        """Dispatch the host-reported selection ``item``."""

        result = self.menu.router.dispatch(item, self.invocation, self.station, self.context)
        action = item.value if isinstance(item, ActionId) else str(item)
        self.menu.event_bus.emit(
            EventKind.ACTION_DISPATCHED,
            msg=f"Selection '{action}' {result.value}",
            action=action,
            invocation_id=self.invocation.invocation_id,
            extras={"result": result.value},
        )
        return result

    def dismiss(self) -> None:
        """Close the menu without a selection."""

        self.invocation.discard()
        LOGGER.info("Station menu %s dismissed", self.invocation.invocation_id)
        self.menu.event_bus.emit(
            EventKind.MENU_DISMISSED,
            msg="Menu dismissed",
            invocation_id=self.invocation.invocation_id,
        )


@dataclass
class StationMenu:
    """Container wiring handlers, capability sources and the event bus."""

    handlers: ActionHandlers
    preferences: PreferenceSource = field(default_factory=PreferenceSource)
    probe: PlatformProbe = field(default_factory=PlatformProbe)
    event_bus: EventBus = field(default_factory=EventBus)
    router: ActionRouter = field(init=False)

    def __post_init__(self) -> None:
        self.router = ActionRouter(catalog=build_catalog(self.handlers))

    def open(
        self,
        station: Any,
        context: HandlerContext | None = None,
        flags: CapabilityFlags | None = None,
    ) -> MenuSession:
        """Open a menu for ``station``.

        ``flags`` defaults to a fresh snapshot from :attr:`preferences` and
        :attr:`probe`, taken once for this session.
        """

        snapshot = flags if flags is not None else capability_flags(self.preferences, self.probe)
        invocation = self.router.open(snapshot)
        LOGGER.info(
            "Opened station menu %s with %d actions",
            invocation.invocation_id,
            len(invocation.specs),
        )
        self.event_bus.emit(
            EventKind.MENU_OPENED,
            msg="Menu opened",
            invocation_id=invocation.invocation_id,
            extras={"visible_actions": [action.value for action in invocation.visible_actions]},
        )
        return MenuSession(
            menu=self,
            invocation=invocation,
            station=station,
            context=context if context is not None else HandlerContext(),
        )


__all__ = ["MenuSession", "StationMenu"]
