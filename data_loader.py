from __future__ import annotations

import io
import logging
import warnings
from pathlib import Path
from types import MappingProxyType
from typing import List, Optional, Sequence, Tuple

import pandas as pd
import requests

from config import (
    LIQUIDITY_HINT,
    MANAGER_LIQUIDITY_CANDIDATES,
    METRICS_FILE,
    PLAYERS_FILE,
)
from core.formatting import parse_number
from errors import CsvParseError, ManagerSourceNotFoundError, SourceNotFoundError
from models import (
    MANAGER_COLUMNS,
    REQUIRED_PLAYER_COLUMNS,
    ManagerRecord,
    PlayerRecord,
    Record,
    RegressionMetrics,
)

logger = logging.getLogger(__name__)


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def join_source(source: str, filename: str) -> str:
    """Location of `filename` under a data source (directory or base URL)."""
    if _is_url(source):
        return source.rstrip("/") + "/" + filename
    return str(Path(source) / filename)


def fetch_text(location: str) -> str:
    """
    Retrieve the raw text of a CSV.

    HTTP(S) locations must answer with a success status; anything else is a file path.
    Raises SourceNotFoundError instead of handing an error page to the parser.
    """
    logger.debug("Fetching %s", location)
    if _is_url(location):
        try:
            response = requests.get(location)
        except requests.RequestException as e:
            raise SourceNotFoundError(location, str(e)) from e
        if not response.ok:
            raise SourceNotFoundError(location, f"HTTP {response.status_code}")
        return response.text

    path = Path(location)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceNotFoundError(location, str(e)) from e


def parse_csv(text: str) -> Tuple[Record, ...]:
    """
    Parse CSV text whose first row is the header.

    Every cell stays text. Blank lines are skipped and missing trailing cells
    come back as "". Rows are returned read-only.
    """
    if not text.strip():
        return ()

    try:
        # index_col=False only warns when a row has too many fields
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
    except pd.errors.EmptyDataError:
        return ()
    except (pd.errors.ParserError, pd.errors.ParserWarning) as e:
        raise CsvParseError(str(e)) from e

    df = df.fillna("")
    records: List[Record] = [
        MappingProxyType({str(k): str(v) for k, v in row.items()})
        for row in df.to_dict(orient="records")
    ]
    return tuple(records)


def missing_columns(records: Sequence[Record], expected: Sequence[str]) -> List[str]:
    """Expected columns absent from the header. Empty files report nothing."""
    if not records:
        return []
    present = set(records[0].keys())
    return [col for col in expected if col not in present]


def load_csv(location: str) -> Tuple[Record, ...]:
    text = fetch_text(location)
    try:
        return parse_csv(text)
    except CsvParseError as e:
        logger.warning("Could not parse %s: %s", location, e.detail)
        raise


def load_players(source: str) -> Tuple[PlayerRecord, ...]:
    location = join_source(source, PLAYERS_FILE)
    players = load_csv(location)
    missing = missing_columns(players, REQUIRED_PLAYER_COLUMNS)
    if missing:
        logger.warning("%s is missing columns: %s", location, ", ".join(missing))
    logger.info("Loaded %d players from %s", len(players), location)
    return players


def load_managers(
    source: str,
    candidates: Sequence[str] = MANAGER_LIQUIDITY_CANDIDATES,
) -> Tuple[ManagerRecord, ...]:
    """
    Load the first manager liquidity CSV that can be fetched.

    Candidates are tried in order; a fetch miss moves on to the next one, but a parse
    failure on a fetched file is final.
    """
    for filename in candidates:
        location = join_source(source, filename)
        try:
            text = fetch_text(location)
        except SourceNotFoundError as e:
            logger.info("Manager liquidity candidate missing: %s", e)
            continue
        try:
            managers = parse_csv(text)
        except CsvParseError as e:
            logger.warning("Could not parse %s: %s", location, e.detail)
            raise
        missing = missing_columns(managers, MANAGER_COLUMNS)
        if missing:
            logger.warning("%s is missing columns: %s", location, ", ".join(missing))
        logger.info("Loaded %d managers from %s", len(managers), location)
        return managers

    logger.warning("No manager liquidity CSV found under %s", source)
    raise ManagerSourceNotFoundError(candidates, LIQUIDITY_HINT)


def metrics_from_records(records: Sequence[Record]) -> Optional[RegressionMetrics]:
    """First data row → RegressionMetrics. Unparseable fields become None."""
    if not records:
        return None
    row = records[0]
    n_samples = parse_number(row.get("n_samples"))
    return RegressionMetrics(
        A=parse_number(row.get("A")),
        TP0=parse_number(row.get("TP0")),
        B=parse_number(row.get("B")),
        alpha=parse_number(row.get("alpha")),
        n_samples=int(n_samples) if n_samples is not None else None,
    )


def load_regression_metrics(source: str) -> Optional[RegressionMetrics]:
    """
    Load regression_metrics.csv. Missing or malformed files are not errors for the
    calculator: we log it and return None so the defaults apply.
    """
    location = join_source(source, METRICS_FILE)
    try:
        records = load_csv(location)
    except SourceNotFoundError:
        logger.info("Regression metrics not found at %s, using default coefficients", location)
        return None
    except CsvParseError:
        logger.info("Regression metrics at %s are malformed, using default coefficients", location)
        return None
    return metrics_from_records(records)
