"""Observability helpers for station menus."""

from .events import Event, EventBus, EventKind

__all__ = ["Event", "EventBus", "EventKind"]
