import pytest

from td5maptool.table_info import (
    UNUSED_INDEX,
    TableInfoCatalog,
    TableInfoItem,
    TableKind,
)
from td5maptool.variants import VariantCatalog

EU3 = "svdxe003svtnp003"
EU2_DISCO = "sthde021sttdp009"
EU2_DEFENDER = "sthle022sttlp009"


def test_eu3_torque_limiter_high_range():
    item = TableInfoCatalog(EU3).lookup(17)
    assert item.kind == TableKind.TORQUE_LIM_HIGH_RANGE
    assert item.name == "TORQUE LIMITER HIGH RANGE"
    assert item.x_unit == "RPM"
    assert item.y_unit == "Inject Quantity mg/stroke"


def test_eu3_fuel_map_and_coolant():
    catalog = TableInfoCatalog(EU3)
    assert catalog.lookup(98).name == "FUEL MAP (0 deg. advance)"
    assert catalog.lookup(112).kind == TableKind.COOLANT_TEMPERATURE


def test_eu2_discovery_layout():
    catalog = TableInfoCatalog(EU2_DISCO)
    assert catalog.lookup(8).kind == TableKind.TORQUE_LIM_LOW_RANGE
    assert catalog.lookup(78).kind == TableKind.TWG_PRESSURE_MAP
    assert catalog.lookup(17) is None


def test_eu2_defender_shared_index_last_wins():
    item = TableInfoCatalog(EU2_DEFENDER).lookup(63)
    assert item.kind == TableKind.FUEL_DENSITY_COMP_UPPER


def test_unused_index_resolves_to_last_listed():
    item = TableInfoCatalog(EU2_DISCO).lookup(UNUSED_INDEX)
    assert item.kind == TableKind.SCALAR_TURBO_RECOVERY


def test_unknown_variant_only_coolant_at_zero():
    catalog = TableInfoCatalog("nosuchmap")
    assert catalog.lookup(0).kind == TableKind.COOLANT_TEMPERATURE
    assert catalog.lookup(17) is None
    assert all(
        item.index == UNUSED_INDEX
        for item in catalog
        if item.kind != TableKind.COOLANT_TEMPERATURE
    )


def test_none_map_name_gives_default_layout():
    assert TableInfoCatalog(None).lookup(98) is None


def test_map_name_case_insensitive():
    upper = list(TableInfoCatalog(EU3.upper()))
    lower = list(TableInfoCatalog(EU3))
    assert upper == lower


@pytest.mark.parametrize("map_name", [EU3, EU2_DISCO, EU2_DEFENDER, "unknown"])
def test_every_kind_listed_once(map_name):
    kinds = [item.kind for item in TableInfoCatalog(map_name)]
    assert len(kinds) == len(TableKind)
    assert set(kinds) == set(TableKind)


def test_iteration_order_starts_with_torque_and_ends_with_scalars():
    kinds = [item.kind for item in TableInfoCatalog(EU3)]
    assert kinds[0] == TableKind.TORQUE_LIM_HIGH_RANGE
    assert kinds[-1] == TableKind.SCALAR_TURBO_RECOVERY


def test_eu3_indices_unique_and_lookup_consistent():
    catalog = TableInfoCatalog(EU3)
    items = list(catalog)
    assert len({item.index for item in items}) == len(items)
    for item in items:
        assert catalog.lookup(item.index) == item


def test_every_known_variant_has_a_torque_limiter():
    for variant in VariantCatalog():
        catalog = TableInfoCatalog(variant.resource)
        indices = {
            item.index for item in catalog if item.kind == TableKind.TORQUE_LIM_LOW_RANGE
        }
        assert UNUSED_INDEX not in indices


def test_scalar_comment_text():
    item = TableInfoCatalog(EU3).lookup(129)
    assert item.comment == "Frequency scaler (16=ENABLE/0=DISABLE)"


def test_default_item_is_empty():
    item = TableInfoItem()
    assert (item.kind, item.index, item.name, item.x_unit) == (0, 0, "", "")