# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from budget_wallet.types import ActualTransaction, RegularTransaction, WalletInfo


class WalletStorage(ABC):
    """
    Persistence contract for wallets and their transactions.

    Implementors may back this with Redis, SQLite, Postgres, or any key-value
    store. Failures are reported by raising StorageError (or a subclass); the
    wallet layer propagates them unchanged and never retries. The default
    MemoryStorage is suitable for single-process use and testing only.
    """

    # ─── Wallets ──────────────────────────────────────────────────────────────

    @abstractmethod
    def get_wallet_for_owner(self, owner_id: str, create_if_absent: bool) -> WalletInfo:
        """
        Return the wallet attached to ``owner_id``.

        When the owner has no wallet and ``create_if_absent`` is True, a new
        wallet is provisioned and attached. Otherwise WalletNotFoundError is
        raised.
        """
        ...

    @abstractmethod
    def set_wallet_info(self, wallet_id: str, month_start: int) -> None:
        ...

    # ─── Regular transactions ─────────────────────────────────────────────────

    @abstractmethod
    def get_regular_transactions(self, wallet_id: str) -> list[RegularTransaction]:
        ...

    @abstractmethod
    def add_regular_transaction(self, wallet_id: str, transaction: RegularTransaction) -> None:
        ...

    @abstractmethod
    def remove_regular_transaction(self, wallet_id: str, transaction: RegularTransaction) -> None:
        ...

    # ─── Actual transactions ──────────────────────────────────────────────────

    @abstractmethod
    def add_actual_transaction(self, wallet_id: str, transaction: ActualTransaction) -> None:
        ...

    @abstractmethod
    def get_actual_transactions(
        self,
        wallet_id: str,
        since: datetime,
        until: datetime,
    ) -> list[ActualTransaction]:
        """
        Return realized transactions with ``since <= time < until``, oldest first.
        Naive instants compare as UTC against aware ones.

        Raises StorageError if ``until`` precedes ``since``.
        """
        ...
