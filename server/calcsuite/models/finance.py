from __future__ import annotations

from typing import List

from pydantic import AliasChoices, Field, FiniteFloat, StrictBool

from calcsuite.models.base import CamelModel


class GstRequest(CamelModel):
    amount: FiniteFloat
    rate: FiniteFloat
    type: str = Field("exclusive", validation_alias=AliasChoices("type", "mode"))


class GstResult(CamelModel):
    type: str
    original_amount: float
    gst_rate: float
    gst_amount: float
    cgst_rate: float
    sgst_rate: float
    cgst: float
    sgst: float
    total_amount: float


class TdsRequest(CamelModel):
    amount: FiniteFloat
    category: str | None = None


class TdsCategory(CamelModel):
    code: str
    label: str
    section: str
    rate: float


class TdsResult(CamelModel):
    category: str
    category_label: str
    category_fallback: bool
    section: str
    rate: float
    gross_amount: float
    basic_tds: float
    surcharge: float
    cess: float
    total_tds: float
    net_amount: float


class EmiRequest(CamelModel):
    principal: FiniteFloat
    rate: FiniteFloat
    tenure: int = Field(..., description="Loan tenure in months.")
    full_schedule: StrictBool | None = None


class AmortizationRow(CamelModel):
    month: int
    emi: float
    principal: float
    interest: float
    balance: float


class EmiResult(CamelModel):
    principal: float
    rate: float
    tenure: int
    emi: float
    total_payment: float
    total_interest: float
    schedule: List[AmortizationRow] = Field(default_factory=list)
    schedule_truncated: bool = False


class PercentageRequest(CamelModel):
    type: str = Field(..., validation_alias=AliasChoices("type", "mode"))
    a: FiniteFloat
    b: FiniteFloat


class PercentageResult(CamelModel):
    type: str
    a: float
    b: float
    result: float
    expression: str
    is_increase: bool | None = None
