# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from budget_wallet.storage.interface import WalletStorage
from budget_wallet.storage.memory import MemoryStorage

__all__ = ["WalletStorage", "MemoryStorage"]
