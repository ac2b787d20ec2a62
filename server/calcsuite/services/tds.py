from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from calcsuite.core.exceptions import InvalidInputError
from calcsuite.models.finance import TdsCategory, TdsResult
from calcsuite.services.utils import ensure_finite, normalize_code

logger = logging.getLogger("calcsuite.services.tds")

SURCHARGE_THRESHOLD = 1_000_000
SURCHARGE_RATE = 0.10
CESS_RATE = 0.04
DEFAULT_CATEGORY = "salary"


@dataclass(frozen=True)
class _Category:
    label: str
    section: str
    rate: float


TDS_CATEGORIES: Mapping[str, _Category] = MappingProxyType(
    {
        "salary": _Category("Salary", "192", 10.0),
        "interest": _Category("Interest other than securities", "194A", 10.0),
        "dividend": _Category("Dividend", "194", 10.0),
        "contractor": _Category("Payment to contractors", "194C", 2.0),
        "professional": _Category("Professional or technical fees", "194J", 10.0),
        "rent": _Category("Rent", "194I", 10.0),
        "commission": _Category("Commission or brokerage", "194H", 5.0),
        "nri": _Category("Payments to non-residents", "195", 30.0),
    }
)


class TdsService:
    def categories(self) -> list[TdsCategory]:
        return [
            TdsCategory(code=code, label=entry.label, section=entry.section, rate=entry.rate)
            for code, entry in TDS_CATEGORIES.items()
        ]

    def calculate(self, amount: float, category: str | None = None) -> TdsResult:
        if amount < 0:
            raise InvalidInputError(
                "Amount cannot be negative.", received={"amount": amount, "category": category}
            )

        code = normalize_code(category)
        fallback = code not in TDS_CATEGORIES
        if fallback:
            logger.info("tds.category_fallback", extra={"requested": category, "applied": DEFAULT_CATEGORY})
            code = DEFAULT_CATEGORY
        entry = TDS_CATEGORIES[code]

        basic = amount * entry.rate / 100
        surcharge = basic * SURCHARGE_RATE if basic > SURCHARGE_THRESHOLD else 0.0
        cess = (basic + surcharge) * CESS_RATE
        total = basic + surcharge + cess
        for figure in (basic, total, amount - total):
            ensure_finite(figure, "Amount is too large.", received={"amount": amount, "category": category})

        return TdsResult(
            category=code,
            category_label=entry.label,
            category_fallback=fallback,
            section=entry.section,
            rate=entry.rate,
            gross_amount=round(amount, 2),
            basic_tds=round(basic, 2),
            surcharge=round(surcharge, 2),
            cess=round(cess, 2),
            total_tds=round(total, 2),
            net_amount=round(amount - total, 2),
        )
