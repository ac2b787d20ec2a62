from __future__ import annotations

import logging
import math
from typing import Callable, Mapping

from calcsuite.core.exceptions import InvalidInputError, InvalidShapeError
from calcsuite.models.area import AreaResult
from calcsuite.services.utils import ensure_finite, format_number, normalize_code

logger = logging.getLogger("calcsuite.services.area")

SQ_FT_PER_SQ_M = 10.7639
AREA_PRECISION = 6

# shape -> (area, perimeter or None, formula)
_Measure = tuple[float, float | None, str]


def _require(dimensions: Mapping[str, float], *names: str) -> list[float]:
    values = []
    for name in names:
        value = dimensions.get(name)
        if value is None:
            raise InvalidInputError(f"Missing required dimension '{name}'.")
        if value <= 0:
            raise InvalidInputError(f"Dimension '{name}' must be greater than zero.")
        values.append(value)
    return values


def _optional(dimensions: Mapping[str, float], name: str) -> float | None:
    value = dimensions.get(name)
    if value is not None and value <= 0:
        raise InvalidInputError(f"Dimension '{name}' must be greater than zero.")
    return value


def _rectangle(dims: Mapping[str, float]) -> _Measure:
    length, width = _require(dims, "length", "width")
    formula = f"{format_number(length)} × {format_number(width)}"
    return length * width, 2 * (length + width), formula


def _circle(dims: Mapping[str, float]) -> _Measure:
    (radius,) = _require(dims, "radius")
    return math.pi * radius**2, 2 * math.pi * radius, f"π × {format_number(radius)}²"


def _square(dims: Mapping[str, float]) -> _Measure:
    (side,) = _require(dims, "side")
    return side**2, 4 * side, f"{format_number(side)}²"


def _triangle(dims: Mapping[str, float]) -> _Measure:
    base, height = _require(dims, "base", "height")
    side_a, side_b = _optional(dims, "a"), _optional(dims, "b")
    side_c = _optional(dims, "c") or base
    perimeter = side_a + side_b + side_c if side_a and side_b else None
    formula = f"½ × {format_number(base)} × {format_number(height)}"
    return 0.5 * base * height, perimeter, formula


def _trapezoid(dims: Mapping[str, float]) -> _Measure:
    side_a, side_b, height = _require(dims, "a", "b", "height")
    side_c, side_d = _optional(dims, "c"), _optional(dims, "d")
    perimeter = side_a + side_b + side_c + side_d if side_c and side_d else None
    formula = f"½ × ({format_number(side_a)} + {format_number(side_b)}) × {format_number(height)}"
    return 0.5 * (side_a + side_b) * height, perimeter, formula


SHAPES: Mapping[str, Callable[[Mapping[str, float]], _Measure]] = {
    "rectangle": _rectangle,
    "circle": _circle,
    "triangle": _triangle,
    "square": _square,
    "trapezoid": _trapezoid,
}


class AreaService:
    def calculate(self, shape: str, dimensions: Mapping[str, float]) -> AreaResult:
        received = {"shape": shape, **dimensions}
        code = normalize_code(shape)
        measure = SHAPES.get(code)
        if measure is None:
            raise InvalidShapeError(
                f"Invalid shape '{shape}'. Expected one of: {', '.join(SHAPES)}.", received=received
            )

        try:
            area, perimeter, formula = measure(dimensions)
            ensure_finite(area * SQ_FT_PER_SQ_M, "Dimensions are too large.")
            if perimeter is not None:
                ensure_finite(perimeter, "Dimensions are too large.")
        except InvalidInputError as exc:
            exc.received = received
            raise

        logger.debug("area.calculated", extra={"shape": code})
        return AreaResult(
            shape=code,
            area=round(area, AREA_PRECISION),
            perimeter=round(perimeter, AREA_PRECISION) if perimeter is not None else None,
            area_sq_ft=round(area * SQ_FT_PER_SQ_M, 4),
            area_sq_m=round(area, AREA_PRECISION),
            formula=formula,
        )
