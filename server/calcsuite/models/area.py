from __future__ import annotations

from pydantic import FiniteFloat

from calcsuite.models.base import CamelModel


class AreaRequest(CamelModel):
    shape: str
    length: FiniteFloat | None = None
    width: FiniteFloat | None = None
    radius: FiniteFloat | None = None
    base: FiniteFloat | None = None
    height: FiniteFloat | None = None
    side: FiniteFloat | None = None
    a: FiniteFloat | None = None
    b: FiniteFloat | None = None
    c: FiniteFloat | None = None
    d: FiniteFloat | None = None

    def dimensions(self) -> dict[str, float]:
        return self.model_dump(exclude={"shape"}, exclude_none=True)


class AreaResult(CamelModel):
    shape: str
    area: float
    perimeter: float | None
    area_sq_ft: float
    area_sq_m: float
    formula: str
