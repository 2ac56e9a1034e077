# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

# February is always 28 days; leap years are not taken into account.
DEFAULT_DAYS_IN_MONTH: dict[int, int] = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


class DayTable(BaseModel, frozen=True):
    """
    Fixed number of days per calendar month used for proration.

    Attributes:
        days: Mapping of month number (1-12) to its day count.
    """

    days: dict[int, int] = Field(default_factory=lambda: dict(DEFAULT_DAYS_IN_MONTH))

    @field_validator("days")
    @classmethod
    def must_cover_every_month(cls, value: dict[int, int]) -> dict[int, int]:
        if sorted(value) != list(range(1, 13)):
            raise ValueError("day table must define exactly months 1 through 12")
        for month, count in value.items():
            if count < 28 or count > 31:
                raise ValueError(f"month {month} has {count} days; expected 28..31")
        return value

    def days_in(self, month: int) -> int:
        """Return the day count of ``month``."""
        return self.days[month]

    def days_in_previous(self, month: int) -> int:
        """Return the day count of the month before ``month`` (December for January)."""
        return self.days[12 if month == 1 else month - 1]


class WalletConfig(BaseModel, frozen=True):
    """
    Configuration shared by wallets and storage backends.

    Attributes:
        day_table: Day counts used by the billing window and proration maths.
        default_month_start: Billing-cycle start day given to newly
            provisioned wallets.

    Example::

        config = WalletConfig(default_month_start=25)
        storage = MemoryStorage(config=config)
    """

    day_table: DayTable = Field(default_factory=DayTable)
    default_month_start: Annotated[int, Field(ge=1, le=28)] = 1
