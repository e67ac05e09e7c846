"""Player table filtering and sorting."""

from __future__ import annotations

import locale
from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Sequence

from config import MAX_MV_LIMIT, MIN_MV_LIMIT, POSITIONS
from core.formatting import number_or_zero, parse_number
from models import PlayerRecord, Record

ASC = "asc"
DESC = "desc"

SEARCH_FIELDS = ("fn", "ln", "tn", "pos")


@dataclass(frozen=True)
class PlayerFilter:
    """
    Conjunctive filter over the player table:
      - search: case-insensitive substring of first name, last name, team or position
      - position: "all" or an exact (trimmed) position code
      - min_market_value: inclusive lower bound on `mv` (absent → 0)
    """
    search: str = ""
    position: str = "all"
    min_market_value: float = 0

    def __post_init__(self) -> None:
        if self.position not in POSITIONS:
            raise ValueError(f"Unknown position filter {self.position!r}")
        if not MIN_MV_LIMIT <= self.min_market_value <= MAX_MV_LIMIT:
            raise ValueError(
                f"min_market_value must be within [{MIN_MV_LIMIT}, {MAX_MV_LIMIT}], "
                f"got {self.min_market_value}"
            )

    def matches_search(self, player: PlayerRecord) -> bool:
        if not self.search:
            return True
        term = self.search.lower()
        return any(term in (player.get(key) or "").lower() for key in SEARCH_FIELDS)

    def matches_position(self, player: PlayerRecord) -> bool:
        if self.position == "all":
            return True
        return str(player.get("pos") or "").strip() == self.position.strip()

    def matches_market_value(self, player: PlayerRecord) -> bool:
        return number_or_zero(player.get("mv")) >= self.min_market_value

    def matches(self, player: PlayerRecord) -> bool:
        return (
            self.matches_search(player)
            and self.matches_position(player)
            and self.matches_market_value(player)
        )


def filter_players(players: Sequence[PlayerRecord], criteria: PlayerFilter) -> List[PlayerRecord]:
    return [p for p in players if criteria.matches(p)]


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction; (None, None) means ingestion order."""
    field: Optional[str] = None
    direction: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.field is not None and self.direction is not None

    def indicator(self, column: str) -> str:
        if not self.active or self.field != column:
            return ""
        return "↑" if self.direction == ASC else "↓"


def next_sort_state(current: SortState, column: str) -> SortState:
    """
    Header click: asc → desc → unsorted on the same column.
    Clicking another column starts over at asc.
    """
    if current.field != column:
        return SortState(column, ASC)
    if current.direction == ASC:
        return SortState(column, DESC)
    if current.direction == DESC:
        return SortState()
    return SortState(column, ASC)


def compare_values(a: Optional[str], b: Optional[str]) -> int:
    """
    Numeric comparison when both sides parse as numbers, otherwise a
    case-sensitive locale-aware string comparison.
    """
    a_text = a or ""
    b_text = b or ""
    a_num = parse_number(a_text)
    b_num = parse_number(b_text)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    return locale.strcoll(a_text, b_text)


def sort_records(records: Sequence[Record], state: SortState) -> List[Record]:
    """Stable sort into a new list; the input is never reordered."""
    if not state.active:
        return list(records)

    sign = 1 if state.direction == ASC else -1
    field = state.field

    def cmp(x: Record, y: Record) -> int:
        return sign * compare_values(x.get(field), y.get(field))

    return sorted(records, key=cmp_to_key(cmp))


def filter_and_sort(
    players: Sequence[PlayerRecord],
    criteria: PlayerFilter,
    sort: SortState,
) -> List[PlayerRecord]:
    """Filter first, then sort. Pure: `players` is left untouched."""
    return sort_records(filter_players(players, criteria), sort)
