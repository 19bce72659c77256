"""Station menu package initialization.

This module exposes the resolver, the dispatcher and the :class:`StationMenu`
facade used by hosts to present station actions.
"""

from .api import MenuSession, StationMenu
from .catalog import ActionHandlers, build_catalog
from .context import HandlerContext
from .invocation import Invocation, ReuseError
from .model import ActionId, ActionSpec, CapabilityFlags, DispatchResult, InvocationState
from .obs.events import Event, EventBus, EventKind
from .resolver import resolve
from .router import ActionRouter, dispatch

__all__ = [
    "ActionHandlers",
    "ActionId",
    "ActionRouter",
    "ActionSpec",
    "CapabilityFlags",
    "DispatchResult",
    "Event",
    "EventBus",
    "EventKind",
    "HandlerContext",
    "Invocation",
    "InvocationState",
    "MenuSession",
    "ReuseError",
    "StationMenu",
    "build_catalog",
    "dispatch",
    "resolve",
]
