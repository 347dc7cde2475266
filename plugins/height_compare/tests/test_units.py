import pytest

from plugins.height_compare.core import (
    InvalidMagnitudeError,
    UnitSystem,
    UnsupportedUnitError,
    coerce_display_unit,
    coerce_unit_system,
    list_unit_systems,
    to_meters,
    to_unit,
    Unit,
)
from plugins.height_compare.core.units import conversion_table


@pytest.mark.parametrize("unit", list(UnitSystem))
@pytest.mark.parametrize("value", [1e-10, 1e-6, 1.0, 1e6, 1e10])
def test_round_trip_through_meters(unit, value):
    assert to_unit(to_meters(value, unit), unit) == pytest.approx(value, rel=1e-9)


def test_known_factors():
    assert to_meters(1, UnitSystem.FOOT) == pytest.approx(0.3048)
    assert to_meters(1, "mi") == pytest.approx(1609.344)
    assert to_meters(180, "cm") == pytest.approx(1.8)
    assert to_meters(250, "nm") == pytest.approx(2.5e-7)
    assert to_unit(1, "in") == pytest.approx(39.37007874015748)
    assert to_unit(8848, UnitSystem.KILOMETER) == pytest.approx(8.848)


def test_conversion_table_is_positive_for_every_unit():
    table = conversion_table()
    assert set(table) == set(UnitSystem)
    assert all(factor > 0 for factor in table.values())
    assert float(table[UnitSystem.CENTIMETER]) == pytest.approx(100)


def test_coerce_unit_system_accepts_symbols_names_and_aliases():
    assert coerce_unit_system("μm") is UnitSystem.MICROMETER
    assert coerce_unit_system("um") is UnitSystem.MICROMETER
    assert coerce_unit_system("MICROMETER") is UnitSystem.MICROMETER
    assert coerce_unit_system("feet") is UnitSystem.FOOT
    assert coerce_unit_system(" km ") is UnitSystem.KILOMETER
    assert coerce_unit_system(UnitSystem.MILE) is UnitSystem.MILE


@pytest.mark.parametrize("tag", ["parsec", "Mm", "", None, 3])
def test_unknown_unit_is_rejected(tag):
    with pytest.raises(UnsupportedUnitError):
        coerce_unit_system(tag)


def test_unknown_unit_never_defaults_during_conversion():
    with pytest.raises(UnsupportedUnitError):
        to_meters(1, "yard")


@pytest.mark.parametrize("value", [-1.0, float("nan"), float("inf"), "12", True])
def test_invalid_lengths_are_rejected(value):
    with pytest.raises(InvalidMagnitudeError):
        to_meters(value, "m")


def test_display_units():
    assert coerce_display_unit("ft-in") is Unit.FT_IN
    assert coerce_display_unit("FT_IN") is Unit.FT_IN
    assert coerce_display_unit("cm") is Unit.CM
    with pytest.raises(UnsupportedUnitError):
        coerce_display_unit("yards")


def test_list_unit_systems_describes_every_unit():
    units = list_unit_systems()
    assert [item["symbol"] for item in units] == [unit.value for unit in UnitSystem]
    families = {item["symbol"]: item["family"] for item in units}
    assert families["mi"] == "imperial"
    assert families["nm"] == "metric"


def test_conversion_outside_float_range_raises():
    with pytest.raises(InvalidMagnitudeError):
        to_unit(1e308, "nm")
    with pytest.raises(InvalidMagnitudeError):
        to_meters(5e-324, "nm")
