"""Ambient context forwarded to action handlers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class HandlerContext:
    """Opaque host collaborators a handler may need.

    ``root_view`` anchors visual feedback such as the undo prompt shown after
    removing a favourite. ``pin_shortcut_listener`` is the token the host hands
    out for pinned shortcut creation. Neither is inspected by the dispatcher.
    """

    root_view: Any = None
    pin_shortcut_listener: Any = None
    extras: Mapping[str, Any] = field(default_factory=dict)
