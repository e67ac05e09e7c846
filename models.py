from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

# A parsed CSV row: header key -> raw cell text. Rows are read-only after parse.
Record = Mapping[str, str]

# players_with_fmv.csv rows (i, fn, ln, ap, smc, mv, fair_market_value, mv_diff,
# mv_diff_pct, tn, pos, tp, ...)
PlayerRecord = Record

# manager_liquidity*.csv rows (manager_id, manager_name, team_value_dashboard,
# team_value_calculated, profit_taken, unrealized_profit_loss, bank_balance,
# available_liquidity)
ManagerRecord = Record

REQUIRED_PLAYER_COLUMNS: Sequence[str] = (
    "i",
    "fn",
    "ln",
    "ap",
    "smc",
    "mv",
    "fair_market_value",
    "mv_diff",
    "mv_diff_pct",
    "tn",
    "pos",
    "tp",
)

MANAGER_COLUMNS: Sequence[str] = (
    "manager_id",
    "manager_name",
    "team_value_dashboard",
    "team_value_calculated",
    "profit_taken",
    "unrealized_profit_loss",
    "bank_balance",
    "available_liquidity",
)


@dataclass(frozen=True)
class RegressionMetrics:
    """
    Single row of regression_metrics.csv.

    Every field is optional; only B and alpha are consumed by the calculator.
    A and TP0 are kept for display/debugging but the calculator uses its own constants.
    """
    A: Optional[float] = None
    TP0: Optional[float] = None
    B: Optional[float] = None
    alpha: Optional[float] = None
    n_samples: Optional[int] = None


@dataclass(frozen=True)
class LiquiditySummary:
    """Aggregates over the full manager set. Means are None when there are no managers."""
    manager_count: int
    avg_bank_balance: Optional[float]
    avg_available_liquidity: Optional[float]
    total_team_value: float
