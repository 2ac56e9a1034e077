# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
budget-wallet: planned vs realized money and what is left until the next cycle.

Quick start::

    from datetime import datetime

    from budget_wallet import (
        ActualTransaction,
        MemoryStorage,
        RegularTransaction,
        get_wallet_for_owner,
    )

    storage = MemoryStorage()
    wallet = get_wallet_for_owner("owner-1", create_if_absent=True, storage=storage)
    wallet.add_regular_transaction(RegularTransaction(label="salary", value=3100, date=1))
    wallet.add_transaction(ActualTransaction(value=-25, time=datetime(2026, 10, 3, 12)))

    print(wallet.get_balance(datetime(2026, 10, 10, 18)))  # 975
"""

from budget_wallet.config import DEFAULT_DAYS_IN_MONTH, DayTable, WalletConfig
from budget_wallet.errors import (
    BudgetWalletError,
    DuplicateLabelError,
    EmptyLabelError,
    InvalidLabelError,
    InvariantViolationError,
    RangeViolationError,
    RegularTransactionNotFoundError,
    SignMismatchError,
    StorageError,
    WalletNotFoundError,
)
from budget_wallet.matcher import accumulate_matched, unmatched_sum
from budget_wallet.proration import contribution, income_till_date, monthly_total, prorate
from budget_wallet.registry import RegularTransactionRegistry
from budget_wallet.storage import MemoryStorage, WalletStorage
from budget_wallet.types import (
    MAX_DAY,
    MIN_DAY,
    ActualTransaction,
    BalanceBreakdown,
    BillingWindow,
    RegularTransaction,
    WalletInfo,
)
from budget_wallet.wallet import Wallet, get_wallet_for_owner
from budget_wallet.window import resolve_billing_window

__all__ = [
    # Core class
    "Wallet",
    "get_wallet_for_owner",
    "RegularTransactionRegistry",
    # Types
    "MIN_DAY",
    "MAX_DAY",
    "RegularTransaction",
    "ActualTransaction",
    "WalletInfo",
    "BillingWindow",
    "BalanceBreakdown",
    # Config
    "DEFAULT_DAYS_IN_MONTH",
    "DayTable",
    "WalletConfig",
    # Errors
    "BudgetWalletError",
    "RangeViolationError",
    "DuplicateLabelError",
    "InvalidLabelError",
    "RegularTransactionNotFoundError",
    "WalletNotFoundError",
    "StorageError",
    "InvariantViolationError",
    "SignMismatchError",
    "EmptyLabelError",
    # Storage
    "WalletStorage",
    "MemoryStorage",
    # Utilities
    "resolve_billing_window",
    "accumulate_matched",
    "unmatched_sum",
    "contribution",
    "monthly_total",
    "prorate",
    "income_till_date",
]
