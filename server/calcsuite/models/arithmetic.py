from __future__ import annotations

from pydantic import Field, FiniteFloat

from calcsuite.models.base import CamelModel


class BasicCalculationRequest(CamelModel):
    a: FiniteFloat | None = Field(None, description="Left operand.")
    b: FiniteFloat | None = Field(None, description="Right operand.")
    operator: str | None = Field(None, description="One of + - * / or add, sub, mul, div.")
    expression: str | None = Field(None, description="Free-form arithmetic expression.")


class ArithmeticResult(CamelModel):
    expression: str = Field(..., description="The expression that was evaluated.")
    result: float | int = Field(..., description="The evaluated numerical result.")
    a: float | None = None
    b: float | None = None
    operator: str | None = None
