# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Expected income for the elapsed part of a billing cycle.

Two steps:

1. ``monthly_total`` folds planned transactions and their matched realized
   sums into one expected monthly figure.
2. ``prorate`` scales that figure by how much of the cycle has elapsed at the
   reference instant, using the fixed day counts of a :class:`DayTable`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime

from budget_wallet.config import DayTable
from budget_wallet.errors import SignMismatchError
from budget_wallet.types import RegularTransaction
from budget_wallet.window import check_day, month_lengths

logger = logging.getLogger("budget_wallet.proration")


def contribution(planned: RegularTransaction, matched: Mapping[str, int]) -> int:
    """
    Return what one planned transaction adds to the monthly total.

    - Unmatched: the planned value, still pending in full.
    - Matched income: the realized sum replaces the plan.
    - Matched expense: whichever of planned and realized is larger in
      magnitude, so split payments count as the plan until they exceed it.

    Raises:
        SignMismatchError: If the realized sum has the opposite sign of the plan.
    """
    if planned.label not in matched:
        logger.debug("Label %r adds %d: no matched actual", planned.label, planned.value)
        return planned.value

    amount = matched[planned.label]
    if (planned.value > 0 and amount < 0) or (planned.value < 0 and amount > 0):
        raise SignMismatchError(planned.label, planned.value, amount)

    if planned.value > 0:
        logger.debug("Label %r adds %d: matched income", planned.label, amount)
        return amount

    if abs(planned.value) > abs(amount):
        logger.debug("Label %r adds %d: planned expense exceeds actual", planned.label, planned.value)
        return planned.value
    logger.debug("Label %r adds %d: actual expense reached planned", planned.label, amount)
    return amount


def monthly_total(
    regular: Iterable[RegularTransaction],
    matched: Mapping[str, int],
) -> int:
    """Sum the contributions of all planned transactions."""
    total = sum(contribution(planned, matched) for planned in regular)
    logger.debug("Expected monthly total equals %d", total)
    return total


def prorate(total: int, now: datetime, month_start: int, day_table: DayTable) -> int:
    """
    Scale ``total`` by the elapsed share of the billing cycle at ``now``.

    On or after ``month_start`` the day of ``month_start`` itself counts as
    earned: ``total * (day - month_start + 1) / days_in_month``. Before it the
    cycle has wrapped into a new calendar month and the result is
    ``total / (31 - (month_start - day) - (31 - days_in_previous_month))``.
    The fractional result is truncated toward zero. The product is taken in
    double precision before dividing, so on a full cycle day the result is
    exactly ``total``; single precision dividing first can land one unit off.
    """
    check_day("month_start", month_start)
    days_in_month, days_in_previous = month_lengths(now, day_table)
    day = now.day

    if day >= month_start:
        elapsed = day - month_start + 1
        result = float(total) * elapsed / days_in_month
    else:
        result = float(total) / (31 - (month_start - day) - (31 - days_in_previous))

    logger.debug("Prorated income till %s equals %f", now, result)
    return int(result)


def income_till_date(
    regular: Iterable[RegularTransaction],
    matched: Mapping[str, int],
    now: datetime,
    month_start: int,
    day_table: DayTable,
) -> int:
    """Expected income earned so far in the current cycle."""
    return prorate(monthly_total(regular, matched), now, month_start, day_table)
