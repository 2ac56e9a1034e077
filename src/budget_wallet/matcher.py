# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from budget_wallet.errors import EmptyLabelError
from budget_wallet.types import ActualTransaction, RegularTransaction

logger = logging.getLogger("budget_wallet.matcher")


def accumulate_matched(
    regular: Iterable[RegularTransaction],
    actual: Iterable[ActualTransaction],
) -> dict[str, int]:
    """
    Sum realized values per label for labels that name a planned transaction.

    Every realized transaction sharing a planned label contributes, not only
    the first one. Realized transactions with an empty label are skipped.

    Raises:
        EmptyLabelError: If any planned transaction has an empty label.
    """
    planned_labels: set[str] = set()
    for planned in regular:
        if planned.label == "":
            raise EmptyLabelError(planned.value, planned.date)
        planned_labels.add(planned.label)

    matched: dict[str, int] = {}
    count = 0
    for realized in actual:
        if realized.label == "" or realized.label not in planned_labels:
            continue
        matched[realized.label] = matched.get(realized.label, 0) + realized.value
        count += 1

    logger.debug(
        "Matched %d actual transactions against %d planned labels", count, len(planned_labels)
    )
    return matched


def unmatched_sum(
    actual: Iterable[ActualTransaction],
    matched: Mapping[str, int],
) -> int:
    """Sum the realized transactions whose label is not a key of ``matched``."""
    return sum(realized.value for realized in actual if realized.label not in matched)
