# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
from datetime import datetime

from budget_wallet.config import WalletConfig
from budget_wallet.errors import InvariantViolationError, StorageError
from budget_wallet.matcher import accumulate_matched, unmatched_sum
from budget_wallet.proration import income_till_date
from budget_wallet.registry import RegularTransactionRegistry
from budget_wallet.storage.interface import WalletStorage
from budget_wallet.types import (
    ActualTransaction,
    BalanceBreakdown,
    RegularTransaction,
)
from budget_wallet.window import as_aware, check_day, resolve_billing_window

logger = logging.getLogger("budget_wallet.wallet")


class Wallet:
    """
    One owner's budget: planned transactions, realized transactions and the
    estimate of money available before the next billing cycle.

    Design contract
    ---------------
    - Every call recomputes from storage. Nothing is cached between calls, so
      two balance requests against unchanged storage return the same figure.
    - Storage errors propagate unchanged. There are no retries.
    - Invariant violations (a planned entry with an empty label, or realized
      spending matched against planned income and vice versa) raise
      InvariantViolationError subclasses and are logged at CRITICAL.
    - Access to one wallet from several callers must be serialised by the
      caller; the plan and realized reads are not atomic.

    Usage
    -----
    ::

        storage = MemoryStorage()
        wallet = get_wallet_for_owner("owner-1", create_if_absent=True, storage=storage)
        wallet.add_regular_transaction(RegularTransaction(label="salary", value=3000, date=1))
        wallet.add_transaction(ActualTransaction(value=-40, time=datetime.now()))
        print(wallet.get_balance(datetime.now()))
    """

    def __init__(
        self,
        wallet_id: str,
        month_start: int,
        storage: WalletStorage,
        config: WalletConfig | None = None,
    ) -> None:
        self.id = wallet_id
        self.month_start = month_start
        self._storage = storage
        self._config = config or WalletConfig()
        self._registry = RegularTransactionRegistry(storage)

    # ─── Transactions ─────────────────────────────────────────────────────────

    def add_transaction(self, transaction: ActualTransaction) -> None:
        """Append a realized transaction."""
        self._storage.add_actual_transaction(self.id, transaction)

    def add_regular_transaction(self, transaction: RegularTransaction) -> None:
        """
        Register a planned transaction.

        Raises RangeViolationError for a day outside 1..28 and
        DuplicateLabelError when the label is already taken.
        """
        self._registry.add(self.id, transaction)

    def remove_regular_transaction(self, transaction: RegularTransaction) -> None:
        """
        Remove a planned transaction that matches field for field.

        Raises RegularTransactionNotFoundError otherwise.
        """
        self._registry.remove(self.id, transaction)

    def list_regular_transactions(self) -> list[RegularTransaction]:
        return self._registry.list_transactions(self.id)

    # ─── Queries ──────────────────────────────────────────────────────────────

    def get_planned_monthly_income(self) -> int:
        """Sum of raw planned values, not prorated and not matched."""
        return self._registry.planned_monthly_income(self.id)

    def get_balance(self, now: datetime) -> int:
        """Estimated money available at ``now``. See ``balance_breakdown``."""
        return self.balance_breakdown(now).total

    def balance_breakdown(self, now: datetime) -> BalanceBreakdown:
        """
        Compute the available balance at ``now`` together with its parts.

        ``prorated`` is the expected income of planned transactions for the
        elapsed share of the cycle. ``unmatched`` is the full sum of realized
        transactions in the cycle that match no planned label.
        """
        logger.info("Calculating available amount for wallet '%s' at %s", self.id, now)

        try:
            regular = self._storage.get_regular_transactions(self.id)
        except StorageError:
            logger.warning("Unable to get regular transactions for wallet '%s'", self.id)
            raise

        window = resolve_billing_window(self.month_start, now)
        try:
            fetched = self._storage.get_actual_transactions(self.id, window.start, now)
        except StorageError:
            logger.warning(
                "Unable to get actual transactions for wallet '%s' from %s till %s",
                self.id,
                window.start,
                now,
            )
            raise
        # The lower bound is exclusive.
        lower = as_aware(window.start)
        actual = [tx for tx in fetched if as_aware(tx.time) > lower]
        logger.debug(
            "Wallet '%s' has %d regular and %d actual transactions in the current cycle",
            self.id,
            len(regular),
            len(actual),
        )

        try:
            matched = accumulate_matched(regular, actual)
            prorated = income_till_date(
                regular, matched, now, self.month_start, self._config.day_table
            )
        except InvariantViolationError as exc:
            logger.critical(
                "Balance for wallet '%s' aborted on corrupted data: %s", self.id, exc.message
            )
            raise

        unmatched = unmatched_sum(actual, matched)
        total = prorated + unmatched
        logger.info(
            "Currently available money for wallet '%s': %d (matched with regular: %d; unmatched: %d)",
            self.id,
            total,
            prorated,
            unmatched,
        )
        return BalanceBreakdown(
            wallet_id=self.id,
            as_of=now,
            window=window,
            prorated=prorated,
            unmatched=unmatched,
            total=total,
        )

    # ─── Settings ─────────────────────────────────────────────────────────────

    def set_month_start(self, day: int) -> None:
        """
        Change the billing-cycle start day.

        The new value is persisted first; the in-memory value only changes
        once storage accepted it.
        """
        check_day("month_start", day)
        try:
            self._storage.set_wallet_info(self.id, day)
        except StorageError:
            logger.warning(
                "Could not update wallet '%s' month start from %d to %d, keeping the original value",
                self.id,
                self.month_start,
                day,
            )
            raise
        logger.info("Wallet '%s' month start changed from %d to %d", self.id, self.month_start, day)
        self.month_start = day

    def __repr__(self) -> str:
        return f"Wallet(id={self.id!r}, month_start={self.month_start!r})"


def get_wallet_for_owner(
    owner_id: str,
    create_if_absent: bool,
    storage: WalletStorage,
    config: WalletConfig | None = None,
) -> Wallet:
    """
    Resolve the wallet of ``owner_id`` from storage.

    Raises:
        WalletNotFoundError: If the owner has no wallet and
            ``create_if_absent`` is False.
    """
    logger.info("Acquiring wallet for owner '%s'", owner_id)
    info = storage.get_wallet_for_owner(owner_id, create_if_absent)
    return Wallet(info.id, info.month_start, storage, config)
