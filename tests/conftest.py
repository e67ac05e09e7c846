from __future__ import annotations

from pathlib import Path

import pytest

from data_loader import parse_csv

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def players():
    return parse_csv((FIXTURES / "players_with_fmv.csv").read_text(encoding="utf-8"))


@pytest.fixture()
def managers():
    return parse_csv((FIXTURES / "manager_liquidity_7087364.csv").read_text(encoding="utf-8"))
