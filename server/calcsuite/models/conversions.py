from __future__ import annotations

from typing import Dict, List

from pydantic import FiniteFloat

from calcsuite.models.base import CamelModel


class ConversionRequest(CamelModel):
    value: FiniteFloat
    unit: str


class ConversionResult(CamelModel):
    value: float
    unit: str
    conversions: Dict[str, float]


class HeightResult(ConversionResult):
    feet_inches: str


class UnitCatalog(CamelModel):
    length: List[str]
    weight: List[str]
    height: List[str]
    temperature: List[str]
