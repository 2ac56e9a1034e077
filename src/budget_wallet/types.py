# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

# ─── Day range ────────────────────────────────────────────────────────────────

MIN_DAY = 1
MAX_DAY = 28

# ─── Transactions ─────────────────────────────────────────────────────────────


class RegularTransaction(BaseModel, frozen=True):
    """
    A planned recurring income (positive value) or expense (negative value).

    Range and label uniqueness are enforced by the registry, not by the model,
    so that records loaded back from storage are never rejected on read.
    """

    label: str
    value: int
    date: int = Field(..., description="Day of month on which the entry recurs.")


class ActualTransaction(BaseModel, frozen=True):
    """A realized cash-flow event. Empty labels never match a planned entry."""

    value: int
    time: datetime
    label: str = ""
    raw_text: str = Field(default="", description="Free-form origin note.")


# ─── Wallet ───────────────────────────────────────────────────────────────────


class WalletInfo(BaseModel, frozen=True):
    """Persisted wallet attributes as returned by a storage backend."""

    id: str = Field(..., min_length=1)
    month_start: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))


# ─── Derived values ───────────────────────────────────────────────────────────


class BillingWindow(BaseModel, frozen=True):
    """Current billing cycle: ``start`` inclusive, ``end`` exactly one month later."""

    start: datetime
    end: datetime


class BalanceBreakdown(BaseModel, frozen=True):
    """Point-in-time balance estimate for one wallet and its components."""

    wallet_id: str
    as_of: datetime
    window: BillingWindow
    prorated: int
    unmatched: int
    total: int
