# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for budget-wallet tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from budget_wallet.errors import StorageError
from budget_wallet.storage.memory import MemoryStorage
from budget_wallet.types import ActualTransaction, RegularTransaction
from budget_wallet.wallet import Wallet, get_wallet_for_owner


class FailingStorage(MemoryStorage):
    """MemoryStorage whose selected operations raise StorageError."""

    def __init__(self) -> None:
        super().__init__()
        self.failing: set[str] = set()

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise StorageError(f"{operation} failed: connection refused")

    def get_regular_transactions(self, wallet_id: str) -> list[RegularTransaction]:
        self._maybe_fail("get_regular_transactions")
        return super().get_regular_transactions(wallet_id)

    def get_actual_transactions(
        self, wallet_id: str, since: datetime, until: datetime
    ) -> list[ActualTransaction]:
        self._maybe_fail("get_actual_transactions")
        return super().get_actual_transactions(wallet_id, since, until)

    def set_wallet_info(self, wallet_id: str, month_start: int) -> None:
        self._maybe_fail("set_wallet_info")
        super().set_wallet_info(wallet_id, month_start)


@pytest.fixture
def storage() -> MemoryStorage:
    """An empty in-memory storage backend."""
    return MemoryStorage()


@pytest.fixture
def wallet(storage: MemoryStorage) -> Wallet:
    """A freshly provisioned wallet for 'owner-1' with month_start=1."""
    return get_wallet_for_owner("owner-1", create_if_absent=True, storage=storage)


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def failing_wallet(failing_storage: FailingStorage) -> Wallet:
    return get_wallet_for_owner("owner-1", create_if_absent=True, storage=failing_storage)
