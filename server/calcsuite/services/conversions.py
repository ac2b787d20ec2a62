"""Unit conversion through a single canonical unit per quantity.

A source value is first scaled into the canonical unit (metre, kilogram,
centimetre or degree Celsius) and every supported target is derived from that
canonical value.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from calcsuite.core.exceptions import AppError, InvalidInputError, InvalidUnitError
from calcsuite.models.conversions import ConversionResult, HeightResult, UnitCatalog
from calcsuite.services.utils import ensure_finite, normalize_code

logger = logging.getLogger("calcsuite.services.conversions")

ABSOLUTE_ZERO_C = -273.15

LENGTH_PRECISION = 6
WEIGHT_PRECISION = 4
HEIGHT_PRECISION = 4
TEMPERATURE_PRECISION = 4


@dataclass(frozen=True)
class UnitTable:
    name: str
    factors: Mapping[str, float]  # unit code -> canonical units per source unit
    aliases: Mapping[str, str]
    precision: int

    def resolve(self, unit: str) -> str:
        code = normalize_code(unit)
        code = self.aliases.get(code, code)
        if code not in self.factors:
            raise InvalidUnitError(
                f"Invalid {self.name} unit '{unit}'. Expected one of: {', '.join(self.factors)}.",
                received={"unit": unit},
            )
        return code

    def convert(self, value: float, unit: str) -> tuple[str, dict[str, float]]:
        code = self.resolve(unit)
        canonical = value * self.factors[code]
        conversions = {
            target: round(ensure_finite(canonical / factor, "Value is out of range."), self.precision)
            for target, factor in self.factors.items()
        }
        return code, conversions


def _aliases(**names: tuple[str, ...]) -> Mapping[str, str]:
    return MappingProxyType({alias: code for code, aliases in names.items() for alias in aliases})


LENGTH = UnitTable(
    name="length",
    factors=MappingProxyType(
        {
            "mm": 0.001,
            "cm": 0.01,
            "m": 1.0,
            "km": 1000.0,
            "in": 0.0254,
            "ft": 0.3048,
            "yd": 0.9144,
            "mi": 1609.344,
            "nmi": 1852.0,
            "au": 149_597_870_700.0,
            "ly": 9_460_730_472_580_800.0,
        }
    ),
    aliases=_aliases(
        mm=("millimeter", "millimeters", "millimetre", "millimetres"),
        cm=("centimeter", "centimeters", "centimetre", "centimetres"),
        m=("meter", "meters", "metre", "metres"),
        km=("kilometer", "kilometers", "kilometre", "kilometres"),
        **{"in": ("inch", "inches")},
        ft=("foot", "feet"),
        yd=("yard", "yards"),
        mi=("mile", "miles"),
        nmi=("nautical_mile", "nautical_miles"),
        au=("astronomical_unit", "astronomical_units"),
        ly=("light_year", "light_years", "lightyear", "lightyears"),
    ),
    precision=LENGTH_PRECISION,
)

WEIGHT = UnitTable(
    name="weight",
    factors=MappingProxyType(
        {
            "mg": 0.000001,
            "g": 0.001,
            "kg": 1.0,
            "t": 1000.0,
            "quintal": 100.0,
            "oz": 0.028349523125,
            "lb": 0.45359237,
            "st": 6.35029318,
        }
    ),
    aliases=_aliases(
        mg=("milligram", "milligrams"),
        g=("gram", "grams"),
        kg=("kilogram", "kilograms", "kgs"),
        t=("tonne", "tonnes", "ton", "tons"),
        quintal=("quintals", "q"),
        oz=("ounce", "ounces"),
        lb=("lbs", "pound", "pounds"),
        st=("stone", "stones"),
    ),
    precision=WEIGHT_PRECISION,
)

HEIGHT = UnitTable(
    name="height",
    factors=MappingProxyType(
        {
            "cm": 1.0,
            "m": 100.0,
            "mm": 0.1,
            "in": 2.54,
            "ft": 30.48,
        }
    ),
    aliases=_aliases(
        cm=("centimeter", "centimeters", "centimetre", "centimetres"),
        m=("meter", "meters", "metre", "metres"),
        mm=("millimeter", "millimeters", "millimetre", "millimetres"),
        **{"in": ("inch", "inches")},
        ft=("foot", "feet"),
    ),
    precision=HEIGHT_PRECISION,
)

TEMPERATURE_UNITS = ("c", "f", "k")
_TEMPERATURE_ALIASES = _aliases(
    c=("celsius", "°c", "centigrade"),
    f=("fahrenheit", "°f"),
    k=("kelvin",),
)


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


def celsius_to_kelvin(value: float) -> float:
    return value + 273.15


def kelvin_to_celsius(value: float) -> float:
    return value - 273.15


_TO_CELSIUS = MappingProxyType(
    {
        "c": lambda value: value,
        "f": fahrenheit_to_celsius,
        "k": kelvin_to_celsius,
    }
)


def format_feet_inches(total_inches: float) -> str:
    """Render a length in inches as a ``5' 9"`` label."""

    feet = math.floor(total_inches / 12)
    inches = round(total_inches - feet * 12, 1)
    if inches >= 12:
        feet += 1
        inches = 0.0
    label = f"{int(inches)}" if inches.is_integer() else f"{inches}"
    return f"{feet}' {label}\""


class ConversionService:
    def length(self, value: float, unit: str) -> ConversionResult:
        code, conversions = self._convert(LENGTH, value, unit)
        return ConversionResult(value=value, unit=code, conversions=conversions)

    def weight(self, value: float, unit: str) -> ConversionResult:
        if value < 0:
            raise InvalidInputError("Weight cannot be negative.", received={"value": value, "unit": unit})
        code, conversions = self._convert(WEIGHT, value, unit)
        return ConversionResult(value=value, unit=code, conversions=conversions)

    def height(self, value: float, unit: str) -> HeightResult:
        if value < 0:
            raise InvalidInputError("Height cannot be negative.", received={"value": value, "unit": unit})
        code, conversions = self._convert(HEIGHT, value, unit)
        total_inches = value * HEIGHT.factors[code] / HEIGHT.factors["in"]
        return HeightResult(
            value=value,
            unit=code,
            conversions=conversions,
            feet_inches=format_feet_inches(total_inches),
        )

    def temperature(self, value: float, unit: str) -> ConversionResult:
        received = {"value": value, "unit": unit}
        code = normalize_code(unit)
        code = _TEMPERATURE_ALIASES.get(code, code)
        if code not in _TO_CELSIUS:
            raise InvalidUnitError(
                f"Invalid temperature unit '{unit}'. Expected one of: {', '.join(TEMPERATURE_UNITS)}.",
                received=received,
            )

        celsius = ensure_finite(_TO_CELSIUS[code](value), "Temperature is out of range.", received=received)
        if celsius < ABSOLUTE_ZERO_C - 1e-9:
            raise InvalidInputError("Temperature is below absolute zero.", received=received)

        conversions = {
            target: round(ensure_finite(converted, "Temperature is out of range.", received=received), TEMPERATURE_PRECISION)
            for target, converted in (
                ("c", celsius),
                ("f", celsius_to_fahrenheit(celsius)),
                ("k", celsius_to_kelvin(celsius)),
            )
        }
        return ConversionResult(value=value, unit=code, conversions=conversions)

    def catalog(self) -> UnitCatalog:
        return UnitCatalog(
            length=list(LENGTH.factors),
            weight=list(WEIGHT.factors),
            height=list(HEIGHT.factors),
            temperature=list(TEMPERATURE_UNITS),
        )

    @staticmethod
    def _convert(table: UnitTable, value: float, unit: str) -> tuple[str, dict[str, float]]:
        try:
            code, conversions = table.convert(value, unit)
        except AppError as exc:
            exc.received = {"value": value, "unit": unit}
            raise
        logger.debug("conversion.completed", extra={"quantity": table.name, "unit": code})
        return code, conversions
