"""Action routing for station menus."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from .context import HandlerContext
from .invocation import Invocation
from .model import ActionId, ActionSpec, CapabilityFlags, DispatchResult
from .resolver import resolve, visible_specs

LOGGER = logging.getLogger(__name__)


def dispatch(
    selection: ActionId | str,
    invocation: Invocation,
    station: Any,
    context: HandlerContext | None = None,
) -> DispatchResult:
    """Run the handler bound to ``selection`` within ``invocation``.

    The invocation is consumed before the lookup, so any second call raises
    :class:`~stationmenu.invocation.ReuseError` whatever the first outcome was.
    Only actions visible in the invocation are dispatchable. Exceptions raised
    by the handler propagate unchanged.
    """

    invocation.consume()
    action = ActionId.parse(selection)
    spec = invocation.lookup(action)
    if spec is None:
        LOGGER.debug("Selection %r is not offered by %s", selection, invocation.invocation_id)
        return DispatchResult.UNHANDLED

    LOGGER.debug("Dispatching %s for %s", spec.action.value, invocation.invocation_id)
    spec.handler(station, context if context is not None else HandlerContext())
    return DispatchResult.HANDLED


@dataclass
class ActionRouter:
    """Open invocations over a fixed catalog and dispatch selections."""

    catalog: Sequence[ActionSpec]

    def __post_init__(self) -> None:
        self.catalog = tuple(self.catalog)

    def resolve(self, flags: CapabilityFlags | None) -> tuple[ActionId, ...]:
        """Return the actions visible under ``flags``."""

        return resolve(self.catalog, flags)

    def open(self, flags: CapabilityFlags | None) -> Invocation:
        """Start a new invocation for ``flags``."""

        snapshot = flags if flags is not None else CapabilityFlags()
        return Invocation(flags=snapshot, specs=visible_specs(self.catalog, snapshot))

    def dispatch(
        self,
        selection: ActionId | str,
        invocation: Invocation,
        station: Any,
        context: HandlerContext | None = None,
    ) -> DispatchResult:
        """Execute the handler associated with ``selection``."""

        return dispatch(selection, invocation, station, context)


__all__ = ["ActionRouter", "dispatch"]
