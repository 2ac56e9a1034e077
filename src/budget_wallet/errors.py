# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class BudgetWalletError(Exception):
    """Base class for all budget-wallet errors."""

    fatal: bool = False

    def __init__(self, message: str, code: str = "BUDGET_WALLET_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ─── Validation ───────────────────────────────────────────────────────────────


class RangeViolationError(BudgetWalletError):
    """
    Raised when a day-of-month value falls outside the allowed range.

    Attributes:
        field: Name of the offending field (``'date'`` or ``'month_start'``).
        value: The rejected value.
    """

    def __init__(self, field: str, value: int, low: int = 1, high: int = 28) -> None:
        super().__init__(
            f"Only days between {low} and {high} are allowed for '{field}'; got {value}.",
            code="RANGE_VIOLATION",
        )
        self.field = field
        self.value = value


class DuplicateLabelError(BudgetWalletError):
    """Raised when a planned transaction label is already used in the wallet."""

    def __init__(self, wallet_id: str, label: str) -> None:
        super().__init__(
            f"Label '{label}' already exists in wallet '{wallet_id}'.",
            code="DUPLICATE_LABEL",
        )
        self.wallet_id = wallet_id
        self.label = label


class RegularTransactionNotFoundError(BudgetWalletError):
    """Raised when no planned transaction matches a removal request exactly."""

    def __init__(self, wallet_id: str, label: str) -> None:
        super().__init__(
            f"No regular transaction exactly matching label '{label}' "
            f"exists in wallet '{wallet_id}'.",
            code="REGULAR_TRANSACTION_NOT_FOUND",
        )
        self.wallet_id = wallet_id
        self.label = label


class InvalidLabelError(BudgetWalletError):
    """Raised when a planned transaction is registered without a label."""

    def __init__(self, wallet_id: str) -> None:
        super().__init__(
            f"Regular transactions in wallet '{wallet_id}' need a non-empty label.",
            code="INVALID_LABEL",
        )
        self.wallet_id = wallet_id


class WalletNotFoundError(BudgetWalletError):
    """Raised when an owner or wallet cannot be resolved."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="WALLET_NOT_FOUND")


# ─── Storage ──────────────────────────────────────────────────────────────────


class StorageError(BudgetWalletError):
    """Raised by storage backends on I/O failure or an invalid query."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="STORAGE_ERROR")


# ─── Invariant violations ─────────────────────────────────────────────────────


class InvariantViolationError(BudgetWalletError):
    """
    Raised when wallet data breaks an invariant the balance maths relies on.

    These are data-integrity failures. Callers should fail the current request
    and alert rather than retry or substitute a default.
    """

    fatal = True

    def __init__(self, message: str, code: str = "INVARIANT_VIOLATION") -> None:
        super().__init__(message, code=code)


class SignMismatchError(InvariantViolationError):
    """
    Raised when a planned income is matched by realized expenses or vice versa.

    Attributes:
        label: The planned transaction label.
        planned: The planned value.
        matched: The summed realized value for the label.
    """

    def __init__(self, label: str, planned: int, matched: int) -> None:
        super().__init__(
            f"Mismatched signs for regular transaction '{label}' and its matched "
            f"actual counterpart: planned {planned}, actual {matched}.",
            code="SIGN_MISMATCH",
        )
        self.label = label
        self.planned = planned
        self.matched = matched


class EmptyLabelError(InvariantViolationError):
    """Raised when a planned transaction without a label reaches the matcher."""

    def __init__(self, value: int, date: int) -> None:
        super().__init__(
            f"Label for regular transaction (value {value}, day {date}) is empty.",
            code="EMPTY_LABEL",
        )
        self.value = value
        self.date = date
