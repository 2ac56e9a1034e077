# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the planned (regular) transaction registry."""

from __future__ import annotations

import pytest

from budget_wallet.errors import (
    DuplicateLabelError,
    InvalidLabelError,
    RangeViolationError,
    RegularTransactionNotFoundError,
    StorageError,
)
from budget_wallet.registry import RegularTransactionRegistry
from budget_wallet.storage.memory import MemoryStorage
from budget_wallet.types import RegularTransaction
from budget_wallet.wallet import Wallet

from conftest import FailingStorage


class TestAddRegularTransaction:
    @pytest.mark.parametrize("day", [0, 29])
    def test_out_of_range_date_is_rejected(self, wallet: Wallet, day: int) -> None:
        with pytest.raises(RangeViolationError) as excinfo:
            wallet.add_regular_transaction(RegularTransaction(label="rent", value=-800, date=day))
        assert excinfo.value.value == day
        assert wallet.list_regular_transactions() == []

    @pytest.mark.parametrize("day", [1, 28])
    def test_boundary_dates_are_accepted(self, wallet: Wallet, day: int) -> None:
        transaction = RegularTransaction(label="rent", value=-800, date=day)
        wallet.add_regular_transaction(transaction)
        assert wallet.list_regular_transactions() == [transaction]

    def test_empty_label_is_rejected(self, wallet: Wallet) -> None:
        with pytest.raises(InvalidLabelError) as excinfo:
            wallet.add_regular_transaction(RegularTransaction(label="", value=-100, date=2))
        assert excinfo.value.fatal is False
        assert wallet.list_regular_transactions() == []

    def test_duplicate_label_is_rejected_and_first_kept(self, wallet: Wallet) -> None:
        first = RegularTransaction(label="rent", value=-800, date=3)
        wallet.add_regular_transaction(first)
        with pytest.raises(DuplicateLabelError):
            wallet.add_regular_transaction(RegularTransaction(label="rent", value=-900, date=5))
        assert wallet.list_regular_transactions() == [first]

    def test_same_label_in_other_wallet_is_allowed(self, storage: MemoryStorage) -> None:
        registry = RegularTransactionRegistry(storage)
        first = storage.get_wallet_for_owner("owner-a", create_if_absent=True)
        second = storage.get_wallet_for_owner("owner-b", create_if_absent=True)
        registry.add(first.id, RegularTransaction(label="rent", value=-800, date=3))
        registry.add(second.id, RegularTransaction(label="rent", value=-650, date=3))
        assert len(registry.list_transactions(second.id)) == 1

    def test_storage_failure_propagates(
        self, failing_storage: FailingStorage, failing_wallet: Wallet
    ) -> None:
        failing_storage.failing.add("get_regular_transactions")
        with pytest.raises(StorageError):
            failing_wallet.add_regular_transaction(
                RegularTransaction(label="rent", value=-800, date=3)
            )


class TestRemoveRegularTransaction:
    def test_exact_match_is_removed(self, wallet: Wallet) -> None:
        rent = RegularTransaction(label="rent", value=-800, date=3)
        salary = RegularTransaction(label="salary", value=3000, date=1)
        wallet.add_regular_transaction(rent)
        wallet.add_regular_transaction(salary)
        wallet.remove_regular_transaction(rent)
        assert wallet.list_regular_transactions() == [salary]

    def test_partial_match_is_not_found(self, wallet: Wallet) -> None:
        rent = RegularTransaction(label="rent", value=-800, date=3)
        wallet.add_regular_transaction(rent)
        with pytest.raises(RegularTransactionNotFoundError):
            wallet.remove_regular_transaction(RegularTransaction(label="rent", value=-800, date=4))
        assert wallet.list_regular_transactions() == [rent]

    def test_removed_label_can_be_added_again(self, wallet: Wallet) -> None:
        rent = RegularTransaction(label="rent", value=-800, date=3)
        wallet.add_regular_transaction(rent)
        wallet.remove_regular_transaction(rent)
        wallet.add_regular_transaction(RegularTransaction(label="rent", value=-850, date=3))
        assert wallet.list_regular_transactions()[0].value == -850


class TestPlannedMonthlyIncome:
    def test_sums_raw_planned_values(self, wallet: Wallet) -> None:
        wallet.add_regular_transaction(RegularTransaction(label="salary", value=3000, date=1))
        wallet.add_regular_transaction(RegularTransaction(label="rent", value=-800, date=3))
        assert wallet.get_planned_monthly_income() == 2200

    def test_empty_wallet_plans_nothing(self, wallet: Wallet) -> None:
        assert wallet.get_planned_monthly_income() == 0
