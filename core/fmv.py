"""
Fair market value model.

    FMV(TP) = A + B * (TP - TP0) ** alpha     for TP > TP0
    FMV(TP) = A                               otherwise (including unparseable TP)

A and TP0 are fixed here; B and alpha come from the regression metrics export
when available.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from config import (
    CURVE_MAX_TP,
    CURVE_STEP,
    DEFAULT_ALPHA,
    DEFAULT_B,
    EXAMPLE_POINTS,
    FMV_A,
    FMV_TP0,
)
from core.formatting import parse_number
from models import RegressionMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FmvParams:
    B: float = DEFAULT_B
    alpha: float = DEFAULT_ALPHA
    from_metrics: bool = False


def params_from_metrics(metrics: Optional[RegressionMetrics]) -> FmvParams:
    """Take B/alpha from the metrics row, falling back per field to the defaults."""
    if metrics is None:
        return FmvParams()
    b = metrics.B if metrics.B is not None else DEFAULT_B
    alpha = metrics.alpha if metrics.alpha is not None else DEFAULT_ALPHA
    from_metrics = metrics.B is not None or metrics.alpha is not None
    if not from_metrics:
        logger.info("Regression metrics carry no B/alpha, using defaults")
    return FmvParams(B=b, alpha=alpha, from_metrics=from_metrics)


def fair_market_value(
    total_points: Union[str, float, int, None],
    b: float = DEFAULT_B,
    alpha: float = DEFAULT_ALPHA,
) -> float:
    """Evaluate the model. Used for both the live input and the plotted curve."""
    tp = parse_number(total_points)
    if tp is None or tp <= FMV_TP0:
        return FMV_A
    return FMV_A + b * (tp - FMV_TP0) ** alpha


def curve_points(
    params: FmvParams,
    start: float = FMV_TP0,
    stop: float = CURVE_MAX_TP,
    step: float = CURVE_STEP,
) -> List[Tuple[float, float]]:
    """(tp, fmv) samples from `start` to `stop` inclusive at a fixed step."""
    if step <= 0:
        raise ValueError("step must be positive")
    points: List[Tuple[float, float]] = []
    i = 0
    tp = start
    while tp <= stop:
        points.append((tp, fair_market_value(tp, params.B, params.alpha)))
        i += 1
        tp = start + i * step
    return points


def example_values(
    params: FmvParams,
    points: Sequence[int] = EXAMPLE_POINTS,
) -> List[Tuple[int, float]]:
    return [(p, fair_market_value(p, params.B, params.alpha)) for p in points]


def format_points(total_points: float) -> str:
    """Plain decimal, never exponent notation: 1234567 → '1234567', 850.5 → '850.5'."""
    if float(total_points).is_integer():
        return f"{total_points:.0f}"
    return f"{total_points:.2f}".rstrip("0")


def calculation_text(total_points: float, params: FmvParams) -> str:
    """Human-readable breakdown, e.g. '3,000,000 + 558 · (1000 − 200)^1.445'."""
    return (
        f"{FMV_A:,.0f} + {params.B:,g} · ({format_points(total_points)} − {FMV_TP0:g})"
        f"^{params.alpha:.3f}"
    )
