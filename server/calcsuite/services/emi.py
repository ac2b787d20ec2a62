from __future__ import annotations

import logging

from calcsuite.core.config import get_settings
from calcsuite.core.exceptions import InvalidInputError
from calcsuite.models.finance import AmortizationRow, EmiResult
from calcsuite.services.utils import ensure_finite

logger = logging.getLogger("calcsuite.services.emi")

MAX_TENURE_MONTHS = 1200


def monthly_installment(principal: float, annual_rate: float, tenure: int) -> float:
    """Return the unrounded equated monthly installment."""

    monthly_rate = annual_rate / 1200
    growth = (1 + monthly_rate) ** tenure
    if monthly_rate == 0 or growth == 1:
        return principal / tenure
    return principal * monthly_rate * growth / (growth - 1)


class EmiService:
    def __init__(self, preview_rows: int | None = None, full_schedule: bool | None = None) -> None:
        settings = get_settings()
        self.preview_rows = settings.emi_schedule_preview_rows if preview_rows is None else preview_rows
        self.full_schedule = settings.emi_full_schedule if full_schedule is None else full_schedule

    def calculate(
        self,
        principal: float,
        rate: float,
        tenure: int,
        *,
        full_schedule: bool | None = None,
    ) -> EmiResult:
        received = {"principal": principal, "rate": rate, "tenure": tenure}
        if principal <= 0:
            raise InvalidInputError("Principal must be greater than zero.", received=received)
        if rate < 0:
            raise InvalidInputError("Interest rate cannot be negative.", received=received)
        if tenure < 1 or tenure > MAX_TENURE_MONTHS:
            raise InvalidInputError(
                f"Tenure must be between 1 and {MAX_TENURE_MONTHS} months.", received=received
            )

        try:
            emi = monthly_installment(principal, rate, tenure)
        except OverflowError as exc:
            raise InvalidInputError("Interest rate is too large to amortize.", received=received) from exc
        ensure_finite(emi, "Loan amount is too large.", received=received)
        # Zero-interest loans repay exactly the principal.
        total_payment = principal if rate == 0 else round(emi, 2) * tenure
        schedule = self._schedule(principal, rate / 1200, tenure, emi)

        show_all = self.full_schedule if full_schedule is None else full_schedule
        truncated = not show_all and len(schedule) > self.preview_rows + 1
        if truncated:
            schedule = schedule[: self.preview_rows] + schedule[-1:]

        logger.debug("emi.calculated", extra={"tenure": tenure, "truncated": truncated})
        return EmiResult(
            principal=principal,
            rate=rate,
            tenure=tenure,
            emi=round(emi, 2),
            total_payment=round(total_payment, 2),
            total_interest=round(total_payment - principal, 2),
            schedule=schedule,
            schedule_truncated=truncated,
        )

    @staticmethod
    def _schedule(principal: float, monthly_rate: float, tenure: int, emi: float) -> list[AmortizationRow]:
        rows: list[AmortizationRow] = []
        balance = principal
        for month in range(1, tenure + 1):
            interest = balance * monthly_rate
            principal_part = emi - interest
            balance -= principal_part
            rows.append(
                AmortizationRow(
                    month=month,
                    emi=round(emi, 2),
                    principal=round(principal_part, 2),
                    interest=round(interest, 2),
                    balance=round(max(balance, 0.0), 2),
                )
            )
        return rows
