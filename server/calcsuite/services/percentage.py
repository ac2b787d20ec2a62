from __future__ import annotations

from calcsuite.core.exceptions import InvalidInputError, InvalidTypeError
from calcsuite.models.finance import PercentageResult
from calcsuite.services.utils import ensure_finite, format_number, normalize_code

PERCENTAGE_TYPES = ("of", "what", "change", "add", "subtract")


class PercentageService:
    def calculate(self, mode: str, a: float, b: float) -> PercentageResult:
        received = {"type": mode, "a": a, "b": b}
        normalized = normalize_code(mode)
        is_increase: bool | None = None
        x, y = format_number(a), format_number(b)

        if normalized == "of":
            value = a / 100 * b
            sentence = f"{x}% of {y}"
        elif normalized == "what":
            if b == 0:
                raise InvalidInputError("Cannot compute a percentage of zero.", received=received)
            value = a / b * 100
            sentence = f"{x} is what % of {y}"
        elif normalized == "change":
            if a == 0:
                raise InvalidInputError("Percentage change from zero is undefined.", received=received)
            value = (b - a) / a * 100
            is_increase = b > a if b != a else None
            sentence = f"change from {x} to {y}"
        elif normalized == "add":
            value = b * (1 + a / 100)
            sentence = f"{y} + {x}%"
        elif normalized == "subtract":
            value = b * (1 - a / 100)
            sentence = f"{y} - {x}%"
        else:
            raise InvalidTypeError(
                f"Invalid percentage type '{mode}'. Expected one of: {', '.join(PERCENTAGE_TYPES)}.",
                received=received,
            )

        result = round(ensure_finite(value, "Result is not a finite number.", received=received), 4)
        return PercentageResult(
            type=normalized,
            a=a,
            b=b,
            result=result,
            expression=f"{sentence} = {format_number(result)}",
            is_increase=is_increase,
        )
