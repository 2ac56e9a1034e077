# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging

from budget_wallet.errors import (
    DuplicateLabelError,
    InvalidLabelError,
    RegularTransactionNotFoundError,
    StorageError,
)
from budget_wallet.storage.interface import WalletStorage
from budget_wallet.types import RegularTransaction
from budget_wallet.window import check_day

logger = logging.getLogger("budget_wallet.registry")


class RegularTransactionRegistry:
    """
    Guards the planned transactions of wallets held in a storage backend.

    Every mutation loads the wallet's full set of planned transactions first,
    so uniqueness checks are linear in the number of entries. There is no
    update operation: change an entry by removing it and adding it again.

    Example::

        registry = RegularTransactionRegistry(MemoryStorage())
        registry.add(wallet_id, RegularTransaction(label="rent", value=-800, date=3))
    """

    def __init__(self, storage: WalletStorage) -> None:
        self._storage = storage

    def list_transactions(self, wallet_id: str) -> list[RegularTransaction]:
        """Return the wallet's planned transactions."""
        return self._storage.get_regular_transactions(wallet_id)

    def add(self, wallet_id: str, transaction: RegularTransaction) -> None:
        """
        Register a planned transaction.

        Raises:
            InvalidLabelError: If ``transaction.label`` is empty.
            RangeViolationError: If ``transaction.date`` is outside 1..28.
            DuplicateLabelError: If the label is already used in the wallet.
            StorageError: If the backend fails to load or store.
        """
        if transaction.label == "":
            raise InvalidLabelError(wallet_id)
        check_day("date", transaction.date)

        existing = self._load(wallet_id, "add")
        if any(planned.label == transaction.label for planned in existing):
            logger.warning(
                "Label '%s' already exists for wallet '%s', cannot add regular transaction",
                transaction.label,
                wallet_id,
            )
            raise DuplicateLabelError(wallet_id, transaction.label)

        self._storage.add_regular_transaction(wallet_id, transaction)

    def remove(self, wallet_id: str, transaction: RegularTransaction) -> None:
        """
        Remove a planned transaction matching every field of ``transaction``.

        Raises:
            RegularTransactionNotFoundError: If no stored entry matches exactly.
            StorageError: If the backend fails to load or delete.
        """
        existing = self._load(wallet_id, "remove")
        if transaction not in existing:
            logger.warning(
                "No exactly matching regular transaction for wallet '%s', cannot remove '%s'",
                wallet_id,
                transaction.label,
            )
            raise RegularTransactionNotFoundError(wallet_id, transaction.label)

        self._storage.remove_regular_transaction(wallet_id, transaction)

    def planned_monthly_income(self, wallet_id: str) -> int:
        """Sum of all planned values, without matching or proration."""
        total = sum(planned.value for planned in self.list_transactions(wallet_id))
        logger.info("Planned monthly income for wallet '%s' is %d", wallet_id, total)
        return total

    def _load(self, wallet_id: str, operation: str) -> list[RegularTransaction]:
        try:
            return self._storage.get_regular_transactions(wallet_id)
        except StorageError as exc:
            logger.warning(
                "Could not %s regular transaction - unable to list current regulars "
                "for wallet '%s': %s",
                operation,
                wallet_id,
                exc,
            )
            raise
