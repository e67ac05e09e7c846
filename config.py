from typing import Dict, List, Tuple

# Where the pre-computed CSVs live: a local directory or an http(s) base URL
DEFAULT_DATA_SOURCE: str = "public"

PLAYERS_FILE: str = "players_with_fmv.csv"
METRICS_FILE: str = "regression_metrics.csv"

# Probed in order; generic name first, then league-id suffixed exports
MANAGER_LIQUIDITY_CANDIDATES: Tuple[str, ...] = (
    "manager_liquidity.csv",
    "manager_liquidity_7087364.csv",
    "manager_liquidity_1.csv",
)
LIQUIDITY_HINT: str = "Please run the calculate_manager_liquidity.py script first."

# FMV = A + B * (TP - TP0) ** alpha
FMV_A: float = 3_000_000
FMV_TP0: float = 200
DEFAULT_B: float = 558
DEFAULT_ALPHA: float = 1.445

CURVE_MAX_TP: int = 4000
CURVE_STEP: int = 50
EXAMPLE_POINTS: Tuple[int, ...] = (300, 500, 1000, 2000)

# Market value slider
MIN_MV_LIMIT: int = 0
MAX_MV_LIMIT: int = 50_000_000
MV_STEP: int = 1_000_000

# Dashboard vs calculated team value, absorbs float noise
DISCREPANCY_TOLERANCE: float = 0.01

POSITIONS: List[str] = ["all", "1", "2", "3", "4"]

POSITION_LABELS: Dict[str, str] = {
    "1": "GK",
    "2": "DEF",
    "3": "MID",
    "4": "FWD",
}

PLAYER_COLUMNS: List[str] = [
    "fn",
    "ln",
    "tn",
    "pos",
    "tp",
    "ap",
    "smc",
    "mv",
    "fair_market_value",
    "mv_diff_pct",
]

COLUMN_LABELS: Dict[str, str] = {
    "fn": "First Name",
    "ln": "Last Name",
    "tn": "Team",
    "pos": "Position",
    "ap": "Avg Points",
    "smc": "Games",
    "mv": "Market Value",
    "fair_market_value": "Fair MV",
    "mv_diff": "Difference",
    "mv_diff_pct": "Diff %",
    "tp": "Total Points",
    "a": "Assists",
}

LIQUIDITY_COLUMNS: List[str] = [
    "manager_name",
    "team_value_dashboard",
    "profit_taken",
    "unrealized_profit_loss",
    "bank_balance",
    "available_liquidity",
]

LIQUIDITY_LABELS: Dict[str, str] = {
    "manager_name": "Manager",
    "team_value_dashboard": "Team Value",
    "profit_taken": "Profit Taken",
    "unrealized_profit_loss": "Unrealized P/L",
    "bank_balance": "Bank Balance",
    "available_liquidity": "Available Liquidity",
}

PAGES: List[str] = ["Search Player", "Calculator", "Manager Liquidity"]

LOG_LEVEL: str = "INFO"
