from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Callable

from calcsuite.core.exceptions import InvalidDateError
from calcsuite.models.age import AgeResult

logger = logging.getLogger("calcsuite.services.age")

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Last (month, day) of each sign, in calendar order.
ZODIAC_BOUNDARIES: tuple[tuple[int, int, str], ...] = (
    (1, 19, "Capricorn"),
    (2, 18, "Aquarius"),
    (3, 20, "Pisces"),
    (4, 19, "Aries"),
    (5, 20, "Taurus"),
    (6, 20, "Gemini"),
    (7, 22, "Cancer"),
    (8, 22, "Leo"),
    (9, 22, "Virgo"),
    (10, 22, "Libra"),
    (11, 21, "Scorpio"),
    (12, 21, "Sagittarius"),
    (12, 31, "Capricorn"),
)


def parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidDateError(
            f"Invalid {field} '{value}'. Expected YYYY-MM-DD.", received={field: value}
        ) from exc


def zodiac_sign(month: int, day: int) -> str:
    for last_month, last_day, sign in ZODIAC_BOUNDARIES:
        if (month, day) <= (last_month, last_day):
            return sign
    return ZODIAC_BOUNDARIES[-1][2]


def _days_in_previous_month(reference: date) -> int:
    year, month = (reference.year - 1, 12) if reference.month == 1 else (reference.year, reference.month - 1)
    return calendar.monthrange(year, month)[1]


def _anniversary(birth: date, year: int) -> date:
    # 29 February falls back to 28 February in common years.
    day = min(birth.day, calendar.monthrange(year, birth.month)[1])
    return date(year, birth.month, day)


class AgeService:
    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def calculate(self, birth_date: str, as_of: str | None = None) -> AgeResult:
        birth = parse_date(birth_date, "birthDate")
        reference = parse_date(as_of, "asOf") if as_of else self._today()
        if birth > reference:
            raise InvalidDateError(
                "Birth date cannot be in the future.",
                received={"birthDate": birth_date, "asOf": reference.isoformat()},
            )

        years = reference.year - birth.year
        months = reference.month - birth.month
        days = reference.day - birth.day
        if days < 0:
            months -= 1
            days = reference.day + max(_days_in_previous_month(reference) - birth.day, 0)
        if months < 0:
            years -= 1
            months += 12

        total_days = (reference - birth).days

        next_birthday = _anniversary(birth, reference.year)
        if next_birthday < reference:
            next_birthday = _anniversary(birth, reference.year + 1)

        logger.debug("age.calculated", extra={"years": years})
        return AgeResult(
            birth_date=birth.isoformat(),
            as_of=reference.isoformat(),
            years=years,
            months=months,
            days=days,
            total_months=years * 12 + months,
            total_days=total_days,
            total_weeks=total_days // 7,
            total_hours=total_days * 24,
            next_birthday=next_birthday.isoformat(),
            days_until_next_birthday=(next_birthday - reference).days,
            born_on=WEEKDAYS[birth.weekday()],
            zodiac_sign=zodiac_sign(birth.month, birth.day),
        )
