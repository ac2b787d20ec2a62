from __future__ import annotations

from pydantic import AliasChoices, Field

from calcsuite.models.base import CamelModel


class AgeRequest(CamelModel):
    birth_date: str = Field(..., validation_alias=AliasChoices("birthDate", "birth_date", "dob"))
    as_of: str | None = Field(None, validation_alias=AliasChoices("asOf", "as_of"))


class AgeResult(CamelModel):
    birth_date: str
    as_of: str
    years: int
    months: int
    days: int
    total_months: int
    total_days: int
    total_weeks: int
    total_hours: int
    next_birthday: str
    days_until_next_birthday: int
    born_on: str
    zodiac_sign: str
