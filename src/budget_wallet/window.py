# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Billing-cycle boundaries for wallets whose month does not start on the 1st.

A wallet with ``month_start=25`` runs its cycle from the 25th of one calendar
month up to (but excluding) the 25th of the next. Boundaries are placed at
midnight in the reference instant's own timezone (naive stays naive). Naive
and aware instants are compared by reading naive values as UTC.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from budget_wallet.config import DayTable
from budget_wallet.errors import RangeViolationError
from budget_wallet.types import MAX_DAY, MIN_DAY, BillingWindow

logger = logging.getLogger("budget_wallet.window")


def check_day(field: str, value: int) -> None:
    """Raise RangeViolationError unless ``value`` is a valid cycle day."""
    if value < MIN_DAY or value > MAX_DAY:
        raise RangeViolationError(field, value, MIN_DAY, MAX_DAY)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``(year, month)`` by ``delta`` calendar months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def resolve_billing_window(month_start: int, now: datetime) -> BillingWindow:
    """
    Return the billing cycle that contains ``now``.

    If ``now`` falls before ``month_start`` in its calendar month, the cycle
    began in the previous calendar month.

    Raises:
        RangeViolationError: If ``month_start`` is outside 1..28.
    """
    check_day("month_start", month_start)

    year, month = now.year, now.month
    if now.day < month_start:
        year, month = shift_month(year, month, -1)
    start = datetime(year, month, month_start, tzinfo=now.tzinfo)

    end_year, end_month = shift_month(year, month, 1)
    end = datetime(end_year, end_month, month_start, tzinfo=now.tzinfo)

    logger.debug("Month borders are from %s to %s", start, end)
    return BillingWindow(start=start, end=end)


def month_lengths(now: datetime, day_table: DayTable) -> tuple[int, int]:
    """Return the table day counts of ``now``'s month and of the month before it."""
    return day_table.days_in(now.month), day_table.days_in_previous(now.month)


def as_aware(moment: datetime) -> datetime:
    """Return ``moment`` with naive values read as UTC, so any two instants compare."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
