"""Manager liquidity sorting, discrepancy detection and summary stats."""

from __future__ import annotations

import locale
from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Sequence

from config import DISCREPANCY_TOLERANCE
from core.formatting import number_or_zero
from models import LiquiditySummary, ManagerRecord

ASC = "asc"
DESC = "desc"

NAME_FIELD = "manager_name"


@dataclass(frozen=True)
class LiquiditySort:
    field: str = NAME_FIELD
    direction: str = ASC

    def indicator(self, column: str) -> str:
        if self.field != column:
            return ""
        return "↑" if self.direction == ASC else "↓"


def toggle_sort(current: LiquiditySort, column: str) -> LiquiditySort:
    """Two-state toggle: same column flips direction, new column starts ascending."""
    if current.field == column:
        return LiquiditySort(column, DESC if current.direction == ASC else ASC)
    return LiquiditySort(column, ASC)


def sort_managers(managers: Sequence[ManagerRecord], sort: LiquiditySort) -> List[ManagerRecord]:
    """
    Name sorts as text; every other column sorts numerically with
    unparseable/absent values treated as 0.
    """
    sign = 1 if sort.direction == ASC else -1

    if sort.field == NAME_FIELD:
        def cmp(a: ManagerRecord, b: ManagerRecord) -> int:
            return sign * locale.strcoll(a.get(NAME_FIELD) or "", b.get(NAME_FIELD) or "")
    else:
        def cmp(a: ManagerRecord, b: ManagerRecord) -> int:
            x = number_or_zero(a.get(sort.field))
            y = number_or_zero(b.get(sort.field))
            return sign * ((x > y) - (x < y))

    return sorted(managers, key=cmp_to_key(cmp))


def discrepancy(manager: ManagerRecord) -> float:
    """|dashboard team value - calculated team value|, missing values as 0."""
    dashboard = number_or_zero(manager.get("team_value_dashboard"))
    calculated = number_or_zero(manager.get("team_value_calculated"))
    return abs(dashboard - calculated)


def has_discrepancy(manager: ManagerRecord, tolerance: float = DISCREPANCY_TOLERANCE) -> bool:
    return discrepancy(manager) > tolerance


def summarize(managers: Sequence[ManagerRecord]) -> LiquiditySummary:
    count = len(managers)
    total_bank = sum(number_or_zero(m.get("bank_balance")) for m in managers)
    total_liquidity = sum(number_or_zero(m.get("available_liquidity")) for m in managers)
    total_team_value = sum(number_or_zero(m.get("team_value_dashboard")) for m in managers)

    return LiquiditySummary(
        manager_count=count,
        avg_bank_balance=total_bank / count if count else None,
        avg_available_liquidity=total_liquidity / count if count else None,
        total_team_value=total_team_value,
    )
