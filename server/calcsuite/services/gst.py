from __future__ import annotations

import logging

from calcsuite.core.exceptions import InvalidInputError, InvalidTypeError
from calcsuite.models.finance import GstResult
from calcsuite.services.utils import ensure_finite, normalize_code

logger = logging.getLogger("calcsuite.services.gst")

GST_MODES = ("exclusive", "inclusive")


class GstService:
    """Goods & Services Tax on top of (exclusive) or out of (inclusive) an amount."""

    def calculate(self, amount: float, rate: float, mode: str = "exclusive") -> GstResult:
        received = {"amount": amount, "rate": rate, "type": mode}
        normalized = normalize_code(mode) or "exclusive"
        if normalized not in GST_MODES:
            raise InvalidTypeError(
                f"Invalid GST type '{mode}'. Expected one of: {', '.join(GST_MODES)}.",
                received=received,
            )
        if amount < 0:
            raise InvalidInputError("Amount cannot be negative.", received=received)
        if rate < 0:
            raise InvalidInputError("GST rate cannot be negative.", received=received)

        if normalized == "inclusive":
            base = amount * 100 / (100 + rate)
            tax = amount - base
            total = amount
        else:
            base = amount
            tax = amount * rate / 100
            total = amount + tax

        for figure in (base, tax, total):
            ensure_finite(figure, "Amount is too large.", received=received)
        half_tax = tax / 2
        logger.debug("gst.calculated", extra={"mode": normalized})
        return GstResult(
            type=normalized,
            original_amount=round(base, 2),
            gst_rate=rate,
            gst_amount=round(tax, 2),
            cgst_rate=rate / 2,
            sgst_rate=rate / 2,
            cgst=round(half_tax, 2),
            sgst=round(half_tax, 2),
            total_amount=round(total, 2),
        )
