"""Tests for :mod:`stationmenu.invocation`."""

from __future__ import annotations

import pytest

from stationmenu.catalog import CATALOG_ORDER, ActionHandlers, build_catalog
from stationmenu.invocation import Invocation, ReuseError
from stationmenu.model import ActionId, ActionSpec, CapabilityFlags, InvocationState


def _spec(action):
    return ActionSpec(action, lambda flags: True, lambda station, context: None)


def test_invocation_starts_open_with_identifier():
    invocation = Invocation(flags=CapabilityFlags(), specs=[_spec(ActionId.SHARE)])

    assert invocation.state is InvocationState.OPEN
    assert invocation.invocation_id.startswith("inv_")
    assert invocation.visible_actions == (ActionId.SHARE,)


def test_lookup_only_finds_visible_specs():
    invocation = Invocation(flags=CapabilityFlags(), specs=[_spec(ActionId.SHARE)])

    assert invocation.lookup(ActionId.SHARE).action is ActionId.SHARE
    assert invocation.lookup(ActionId.SET_ALARM) is None
    assert invocation.lookup(None) is None


def test_consume_then_consume_raises_reuse_error():
    invocation = Invocation(flags=CapabilityFlags(), specs=())
    invocation.consume()

    with pytest.raises(ReuseError) as excinfo:
        invocation.consume()

    assert excinfo.value.state is InvocationState.CONSUMED
    assert excinfo.value.invocation_id == invocation.invocation_id


def test_discard_is_terminal():
    invocation = Invocation(flags=CapabilityFlags(), specs=())
    invocation.discard()

    assert invocation.state is InvocationState.DISCARDED
    with pytest.raises(ReuseError):
        invocation.consume()
    with pytest.raises(ReuseError):
        invocation.discard()


def test_consumed_invocation_cannot_be_discarded():
    invocation = Invocation(flags=CapabilityFlags(), specs=())
    invocation.consume()

    with pytest.raises(ReuseError):
        invocation.discard()
    assert invocation.state is InvocationState.CONSUMED


def test_invocation_rejects_specs_hidden_by_flags():
    shortcut = ActionSpec(
        ActionId.CREATE_SHORTCUT,
        lambda flags: flags.platform_supports_shortcuts,
        lambda station, context: None,
    )

    with pytest.raises(ValueError, match="create_shortcut"):
        Invocation(flags=CapabilityFlags(platform_supports_shortcuts=False), specs=[_spec(ActionId.SHARE), shortcut])


def test_invocation_accepts_specs_visible_under_flags():
    shortcut = ActionSpec(
        ActionId.CREATE_SHORTCUT,
        lambda flags: flags.platform_supports_shortcuts,
        lambda station, context: None,
    )

    invocation = Invocation(flags=CapabilityFlags(platform_supports_shortcuts=True), specs=[shortcut])

    assert invocation.visible_actions == (ActionId.CREATE_SHORTCUT,)


def test_full_catalog_cannot_back_an_invocation():
    handlers = ActionHandlers(*([lambda station, context: None] * len(CATALOG_ORDER)))

    with pytest.raises(ValueError):
        Invocation(flags=CapabilityFlags(), specs=build_catalog(handlers))


def test_invocation_ids_are_unique():
    first = Invocation(flags=CapabilityFlags(), specs=())
    second = Invocation(flags=CapabilityFlags(), specs=())

    assert first.invocation_id != second.invocation_id
    assert first.opened_at.endswith("+00:00")
