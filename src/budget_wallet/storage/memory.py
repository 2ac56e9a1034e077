# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
from datetime import datetime
from uuid import uuid4

from budget_wallet.config import WalletConfig
from budget_wallet.errors import StorageError, WalletNotFoundError
from budget_wallet.storage.interface import WalletStorage
from budget_wallet.types import MAX_DAY, MIN_DAY, ActualTransaction, RegularTransaction, WalletInfo
from budget_wallet.window import as_aware

logger = logging.getLogger("budget_wallet.storage.memory")


class MemoryStorage(WalletStorage):
    """
    Keeps owners, wallets and their transactions in plain dicts and lists.

    Owners map to one wallet each; wallet ids are random UUID4 strings.
    Realized transactions are kept in insertion order and sorted by time on
    read. Useful for tests and for embedding the engine in a single process.
    """

    def __init__(self, config: WalletConfig | None = None) -> None:
        self._config = config or WalletConfig()
        self._wallets: dict[str, WalletInfo] = {}
        self._owners: dict[str, str] = {}                          # owner_id -> wallet_id
        self._regular: dict[str, list[RegularTransaction]] = {}
        self._actual: dict[str, list[ActualTransaction]] = {}

    # ─── Wallets ──────────────────────────────────────────────────────────────

    def get_wallet_for_owner(self, owner_id: str, create_if_absent: bool) -> WalletInfo:
        wallet_id = self._owners.get(owner_id)
        if wallet_id is None:
            if not create_if_absent:
                raise WalletNotFoundError(f"No wallet attached to owner '{owner_id}'.")
            wallet_id = self._create_wallet().id
            self._owners[owner_id] = wallet_id
            logger.info("Attached owner '%s' to wallet '%s'", owner_id, wallet_id)
        info = self._require_wallet(wallet_id)
        if info.month_start < MIN_DAY or info.month_start > MAX_DAY:
            raise StorageError(
                f"Stored month start {info.month_start} for wallet '{wallet_id}' is out of range."
            )
        return info

    def set_wallet_info(self, wallet_id: str, month_start: int) -> None:
        info = self._require_wallet(wallet_id)
        self._wallets[wallet_id] = info.model_copy(update={"month_start": month_start})

    # ─── Regular transactions ─────────────────────────────────────────────────

    def get_regular_transactions(self, wallet_id: str) -> list[RegularTransaction]:
        self._require_wallet(wallet_id)
        return list(self._regular[wallet_id])

    def add_regular_transaction(self, wallet_id: str, transaction: RegularTransaction) -> None:
        self._require_wallet(wallet_id)
        self._regular[wallet_id].append(transaction)

    def remove_regular_transaction(self, wallet_id: str, transaction: RegularTransaction) -> None:
        self._require_wallet(wallet_id)
        try:
            self._regular[wallet_id].remove(transaction)
        except ValueError:
            raise StorageError(
                f"Regular transaction '{transaction.label}' is not stored for wallet '{wallet_id}'."
            ) from None

    # ─── Actual transactions ──────────────────────────────────────────────────

    def add_actual_transaction(self, wallet_id: str, transaction: ActualTransaction) -> None:
        self._require_wallet(wallet_id)
        self._actual[wallet_id].append(transaction)

    def get_actual_transactions(
        self,
        wallet_id: str,
        since: datetime,
        until: datetime,
    ) -> list[ActualTransaction]:
        lower, upper = as_aware(since), as_aware(until)
        if upper < lower:
            raise StorageError(f"Range end {until} precedes range start {since}.")
        self._require_wallet(wallet_id)
        selected = [tx for tx in self._actual[wallet_id] if lower <= as_aware(tx.time) < upper]
        return sorted(selected, key=lambda tx: as_aware(tx.time))

    # ─── Private helpers ──────────────────────────────────────────────────────

    def _create_wallet(self) -> WalletInfo:
        wallet_id = str(uuid4())
        while wallet_id in self._wallets:
            logger.debug("Wallet id %s is taken, trying another one", wallet_id)
            wallet_id = str(uuid4())

        info = WalletInfo(id=wallet_id, month_start=self._config.default_month_start)
        self._wallets[wallet_id] = info
        self._regular[wallet_id] = []
        self._actual[wallet_id] = []
        logger.info("Wallet '%s' has been created", wallet_id)
        return info

    def _require_wallet(self, wallet_id: str) -> WalletInfo:
        info = self._wallets.get(wallet_id)
        if info is None:
            raise WalletNotFoundError(f"Wallet '{wallet_id}' does not exist.")
        return info
