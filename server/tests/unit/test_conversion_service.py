import pytest

from calcsuite.core.exceptions import InvalidInputError, InvalidUnitError
from calcsuite.services.conversions import (
    ConversionService,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    format_feet_inches,
    kelvin_to_celsius,
)


@pytest.fixture()
def service() -> ConversionService:
    return ConversionService()


def test_length_from_kilometres(service: ConversionService) -> None:
    result = service.length(1, "km")

    assert result.unit == "km"
    assert result.conversions["m"] == 1000
    assert result.conversions["cm"] == 100000
    assert result.conversions["mi"] == 0.621371
    assert result.conversions["ft"] == pytest.approx(3280.839895)


def test_length_accepts_aliases_and_astronomical_units(service: ConversionService) -> None:
    result = service.length(1, "Astronomical_Unit")

    assert result.unit == "au"
    assert result.conversions["km"] == 149_597_870.7
    assert result.conversions["ly"] == pytest.approx(0.000016, abs=1e-6)


def test_weight_from_kilograms(service: ConversionService) -> None:
    result = service.weight(1, "kg")

    assert result.conversions["g"] == 1000
    assert result.conversions["lb"] == 2.2046
    assert result.conversions["oz"] == 35.274


def test_weight_accepts_plural_alias(service: ConversionService) -> None:
    assert service.weight(2, "lbs").unit == "lb"


def test_height_formats_feet_and_inches(service: ConversionService) -> None:
    result = service.height(5.75, "ft")

    assert result.feet_inches == "5' 9\""
    assert result.conversions["in"] == 69
    assert result.conversions["cm"] == 175.26


def test_height_carries_rounded_inches_into_feet(service: ConversionService) -> None:
    assert service.height(6, "ft").feet_inches == "6' 0\""


@pytest.mark.parametrize(
    ("inches", "label"),
    [(0, "0' 0\""), (11.96, "1' 0\""), (68.8976, "5' 8.9\""), (12, "1' 0\"")],
)
def test_format_feet_inches(inches: float, label: str) -> None:
    assert format_feet_inches(inches) == label


@pytest.mark.parametrize(
    ("value", "unit", "expected"),
    [
        (100, "c", {"c": 100, "f": 212, "k": 373.15}),
        (32, "F", {"c": 0, "f": 32, "k": 273.15}),
        (0, "kelvin", {"c": -273.15, "f": -459.67, "k": 0}),
        (-40, "celsius", {"c": -40, "f": -40, "k": 233.15}),
    ],
)
def test_temperature_conversions(service: ConversionService, value: float, unit: str, expected: dict) -> None:
    result = service.temperature(value, unit)

    assert result.conversions == pytest.approx(expected)


@pytest.mark.parametrize("value", [-273.15, -40.0, 0.0, 36.6, 1234.5678, 1e6])
def test_temperature_round_trips(value: float) -> None:
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(value)) == pytest.approx(value, abs=1e-4)
    assert kelvin_to_celsius(celsius_to_kelvin(value)) == pytest.approx(value, abs=1e-4)


def test_temperature_below_absolute_zero_is_rejected(service: ConversionService) -> None:
    with pytest.raises(InvalidInputError):
        service.temperature(-1, "k")


@pytest.mark.parametrize(
    ("method", "unit"),
    [("length", "furlong"), ("weight", "grain"), ("height", "km"), ("temperature", "rankine")],
)
def test_unknown_unit_is_rejected(service: ConversionService, method: str, unit: str) -> None:
    with pytest.raises(InvalidUnitError) as excinfo:
        getattr(service, method)(1, unit)

    assert excinfo.value.received == {"value": 1, "unit": unit}


@pytest.mark.parametrize("method", ["weight", "height"])
def test_negative_physical_quantities_are_rejected(service: ConversionService, method: str) -> None:
    with pytest.raises(InvalidInputError):
        getattr(service, method)(-1, "m" if method == "height" else "kg")


def test_catalog_lists_units(service: ConversionService) -> None:
    catalog = service.catalog()

    assert "au" in catalog.length
    assert catalog.temperature == ["c", "f", "k"]
    assert catalog.height == ["cm", "m", "mm", "in", "ft"]


@pytest.mark.parametrize("unit", ["f", "c", "k"])
def test_temperature_overflow_is_rejected(service: ConversionService, unit: str) -> None:
    with pytest.raises(InvalidInputError):
        service.temperature(1e308, unit)
