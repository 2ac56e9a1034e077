# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for billing window resolution and the day table."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from budget_wallet.config import DEFAULT_DAYS_IN_MONTH, DayTable, WalletConfig
from budget_wallet.errors import RangeViolationError
from budget_wallet.window import month_lengths, resolve_billing_window, shift_month


# ---------------------------------------------------------------------------
# TestResolveBillingWindow
# ---------------------------------------------------------------------------


class TestResolveBillingWindow:
    def test_calendar_aligned_cycle(self) -> None:
        window = resolve_billing_window(1, datetime(2026, 10, 15, 14, 30))
        assert window.start == datetime(2026, 10, 1)
        assert window.end == datetime(2026, 11, 1)

    def test_cycle_starts_in_current_month_when_day_reached(self) -> None:
        window = resolve_billing_window(25, datetime(2026, 12, 30, 9))
        assert window.start == datetime(2026, 12, 25)
        assert window.end == datetime(2027, 1, 25)

    def test_cycle_starts_in_previous_month_before_month_start(self) -> None:
        window = resolve_billing_window(5, datetime(2026, 10, 3, 12))
        assert window.start == datetime(2026, 9, 5)
        assert window.end == datetime(2026, 10, 5)

    def test_january_wraps_to_previous_year(self) -> None:
        window = resolve_billing_window(25, datetime(2026, 1, 10))
        assert window.start == datetime(2025, 12, 25)
        assert window.end == datetime(2026, 1, 25)

    def test_start_day_itself_opens_new_cycle(self) -> None:
        window = resolve_billing_window(10, datetime(2026, 10, 10, 0, 0, 1))
        assert window.start == datetime(2026, 10, 10)

    def test_boundaries_keep_reference_timezone(self) -> None:
        window = resolve_billing_window(1, datetime(2026, 10, 15, tzinfo=timezone.utc))
        assert window.start == datetime(2026, 10, 1, tzinfo=timezone.utc)
        assert window.start.tzinfo is timezone.utc

    @pytest.mark.parametrize("month_start", [0, 29])
    def test_out_of_range_month_start_raises(self, month_start: int) -> None:
        with pytest.raises(RangeViolationError):
            resolve_billing_window(month_start, datetime(2026, 10, 15))


class TestShiftMonth:
    def test_shift_back_across_year(self) -> None:
        assert shift_month(2026, 1, -1) == (2025, 12)

    def test_shift_forward_across_year(self) -> None:
        assert shift_month(2026, 12, 1) == (2027, 1)


# ---------------------------------------------------------------------------
# TestDayTable
# ---------------------------------------------------------------------------


class TestDayTable:
    def test_february_is_always_28_days(self) -> None:
        table = DayTable()
        assert table.days_in(2) == 28
        assert month_lengths(datetime(2028, 2, 14), table) == (28, 31)

    def test_previous_month_of_january_is_december(self) -> None:
        assert DayTable().days_in_previous(1) == 31

    def test_missing_month_is_rejected(self) -> None:
        days = dict(DEFAULT_DAYS_IN_MONTH)
        del days[7]
        with pytest.raises(ValidationError):
            DayTable(days=days)

    def test_day_count_out_of_range_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DayTable(days={**DEFAULT_DAYS_IN_MONTH, 4: 27})

    def test_config_is_immutable(self) -> None:
        config = WalletConfig()
        with pytest.raises(ValidationError):
            config.default_month_start = 5  # type: ignore[misc]

    def test_default_month_start_out_of_range_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WalletConfig(default_month_start=29)
