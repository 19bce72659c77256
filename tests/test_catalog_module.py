"""Tests for :mod:`stationmenu.catalog`."""

from __future__ import annotations

from stationmenu.catalog import CATALOG_ORDER, ActionHandlers, build_catalog
from stationmenu.model import ActionId, CapabilityFlags


def test_catalog_order_covers_every_action_once():
    assert sorted(CATALOG_ORDER, key=lambda a: a.value) == sorted(ActionId, key=lambda a: a.value)
    assert len(set(CATALOG_ORDER)) == len(CATALOG_ORDER)


def test_build_catalog_binds_each_handler_to_its_action():
    handlers = {action: (lambda station, context, _a=action: _a) for action in CATALOG_ORDER}
    catalog = build_catalog(ActionHandlers(**{a.value: h for a, h in handlers.items()}))

    assert tuple(spec.action for spec in catalog) == CATALOG_ORDER
    for spec in catalog:
        assert spec.handler is handlers[spec.action]


def test_play_predicates_never_overlap():
    catalog = {spec.action: spec for spec in build_catalog(ActionHandlers(*([lambda station, context: None] * 7)))}

    for external in (False, True):
        flags = CapabilityFlags(prefer_external_player=external)
        internal_visible = catalog[ActionId.PLAY_INTERNAL].is_visible(flags)
        external_visible = catalog[ActionId.PLAY_EXTERNAL].is_visible(flags)
        assert internal_visible != external_visible
