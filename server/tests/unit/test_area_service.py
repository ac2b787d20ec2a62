import math

import pytest

from calcsuite.core.exceptions import InvalidInputError, InvalidShapeError
from calcsuite.services.area import AreaService


@pytest.fixture()
def service() -> AreaService:
    return AreaService()


def test_square(service: AreaService) -> None:
    result = service.calculate("square", {"side": 4})

    assert result.area == 16.0
    assert result.perimeter == 16.0
    assert result.formula == "4²"


def test_circle(service: AreaService) -> None:
    result = service.calculate("Circle", {"radius": 1})

    assert result.shape == "circle"
    assert result.area == pytest.approx(math.pi, abs=1e-6)
    assert result.area == 3.141593
    assert result.perimeter == 6.283185
    assert result.formula == "π × 1²"


def test_rectangle_reports_both_area_units(service: AreaService) -> None:
    result = service.calculate("rectangle", {"length": 3, "width": 4})

    assert result.area == 12
    assert result.perimeter == 14
    assert result.area_sq_m == 12
    assert result.area_sq_ft == 129.1668
    assert result.formula == "3 × 4"


def test_triangle_without_sides_has_no_perimeter(service: AreaService) -> None:
    result = service.calculate("triangle", {"base": 6, "height": 4})

    assert result.area == 12
    assert result.perimeter is None


def test_triangle_uses_base_as_third_side(service: AreaService) -> None:
    result = service.calculate("triangle", {"base": 6, "height": 4, "a": 5, "b": 5})

    assert result.perimeter == 16


def test_triangle_with_explicit_third_side(service: AreaService) -> None:
    result = service.calculate("triangle", {"base": 6, "height": 4, "a": 5, "b": 5, "c": 7})

    assert result.perimeter == 17


def test_trapezoid(service: AreaService) -> None:
    partial = service.calculate("trapezoid", {"a": 3, "b": 5, "height": 4})
    full = service.calculate("trapezoid", {"a": 3, "b": 5, "height": 4, "c": 4.5, "d": 4.5})

    assert partial.area == 16
    assert partial.perimeter is None
    assert full.perimeter == 17
    assert full.formula == "½ × (3 + 5) × 4"


def test_unknown_shape_is_rejected(service: AreaService) -> None:
    with pytest.raises(InvalidShapeError) as excinfo:
        service.calculate("hexagon", {"side": 2})

    assert excinfo.value.received == {"shape": "hexagon", "side": 2}


@pytest.mark.parametrize(
    ("shape", "dimensions"),
    [
        ("circle", {}),
        ("rectangle", {"length": 3}),
        ("square", {"side": 0}),
        ("triangle", {"base": -1, "height": 2}),
        ("trapezoid", {"a": 1, "b": 2, "height": 3, "c": -1, "d": 1}),
    ],
)
def test_missing_or_non_positive_dimensions_are_rejected(
    service: AreaService, shape: str, dimensions: dict
) -> None:
    with pytest.raises(InvalidInputError):
        service.calculate(shape, dimensions)


def test_overflowing_perimeter_is_rejected(service: AreaService) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        service.calculate("rectangle", {"length": 1e308, "width": 1e-10})

    assert excinfo.value.received == {"shape": "rectangle", "length": 1e308, "width": 1e-10}
