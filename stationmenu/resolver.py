"""Visibility resolution for the station action catalog."""
from __future__ import annotations

import logging
from typing import Sequence

from .model import ActionId, ActionSpec, CapabilityFlags

LOGGER = logging.getLogger(__name__)


def visible_specs(
    catalog: Sequence[ActionSpec], flags: CapabilityFlags | None
) -> tuple[ActionSpec, ...]:
    """Return the specs of ``catalog`` whose predicate accepts ``flags``.

    ``None`` stands for an empty snapshot and is evaluated as the default
    :class:`CapabilityFlags`. Catalog order is preserved.
    """

    snapshot = flags if flags is not None else CapabilityFlags()
    return tuple(spec for spec in catalog if spec.is_visible(snapshot))


def resolve(catalog: Sequence[ActionSpec], flags: CapabilityFlags | None) -> tuple[ActionId, ...]:
    """Return the offerable action identifiers for ``flags`` in catalog order."""

    actions = tuple(spec.action for spec in visible_specs(catalog, flags))
    LOGGER.debug("Resolved %d of %d actions for %s", len(actions), len(catalog), flags)
    return actions


__all__ = ["resolve", "visible_specs"]
