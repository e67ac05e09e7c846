import pytest

from config import CURVE_MAX_TP, CURVE_STEP, DEFAULT_ALPHA, DEFAULT_B, FMV_A, FMV_TP0
from core.fmv import (
    FmvParams,
    calculation_text,
    curve_points,
    example_values,
    fair_market_value,
    format_points,
    params_from_metrics,
)
from models import RegressionMetrics


def test_default_constants():
    assert (FMV_A, FMV_TP0, DEFAULT_B, DEFAULT_ALPHA) == (3_000_000, 200, 558, 1.445)


def test_baseline_at_and_below_threshold():
    assert fair_market_value(200) == FMV_A
    assert fair_market_value(0) == FMV_A
    assert fair_market_value(-50) == FMV_A


def test_unparseable_input_returns_baseline():
    assert fair_market_value("") == FMV_A
    assert fair_market_value("abc") == FMV_A
    assert fair_market_value(None) == FMV_A


def test_formula_above_threshold():
    assert fair_market_value(700) == FMV_A + DEFAULT_B * 500 ** DEFAULT_ALPHA
    assert fair_market_value(1000) == 3_000_000 + 558 * 800 ** 1.445
    assert fair_market_value("1000") == fair_market_value(1000)


def test_custom_coefficients():
    assert fair_market_value(300, b=2, alpha=1) == FMV_A + 200


def test_params_fall_back_per_field():
    assert params_from_metrics(None) == FmvParams()

    partial = params_from_metrics(RegressionMetrics(B=600.0))
    assert partial.B == 600.0
    assert partial.alpha == DEFAULT_ALPHA
    assert partial.from_metrics

    empty = params_from_metrics(RegressionMetrics(A=1.0, TP0=5.0))
    assert (empty.B, empty.alpha, empty.from_metrics) == (DEFAULT_B, DEFAULT_ALPHA, False)


def test_curve_is_inclusive_and_agrees_with_live_value():
    params = FmvParams(B=612.5, alpha=1.41)
    points = curve_points(params)
    assert points[0] == (FMV_TP0, FMV_A)
    assert points[-1][0] == CURVE_MAX_TP
    assert len(points) == (CURVE_MAX_TP - FMV_TP0) // CURVE_STEP + 1
    for tp, fmv in points:
        assert fmv == fair_market_value(tp, params.B, params.alpha)


def test_curve_rejects_non_positive_step():
    with pytest.raises(ValueError):
        curve_points(FmvParams(), step=0)


def test_example_values():
    examples = example_values(FmvParams())
    assert [p for p, _ in examples] == [300, 500, 1000, 2000]
    assert examples[2][1] == fair_market_value(1000)


def test_calculation_text():
    assert calculation_text(1000.0, FmvParams()) == "3,000,000 + 558 · (1000 − 200)^1.445"


def test_large_inputs_are_not_shown_in_exponent_notation():
    assert format_points(1_234_567.0) == "1234567"
    assert format_points(850.5) == "850.5"
    assert "e+" not in calculation_text(1_234_567.0, FmvParams())
    assert "(1234567 − 200)" in calculation_text(1_234_567.0, FmvParams())
