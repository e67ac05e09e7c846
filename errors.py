"""Error taxonomy for data loading."""

from __future__ import annotations

from typing import Sequence


class DashboardError(Exception):
    """Base class for failures that put a view into its error state."""


class SourceNotFoundError(DashboardError):
    """A CSV could not be fetched (missing file, non-success status, transport error)."""

    def __init__(self, location: str, reason: str = "") -> None:
        self.location = location
        self.reason = reason
        message = f"Source not found: {location}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ManagerSourceNotFoundError(SourceNotFoundError):
    """None of the manager liquidity candidates could be fetched."""

    def __init__(self, candidates: Sequence[str], hint: str) -> None:
        self.candidates = list(candidates)
        self.hint = hint
        super().__init__(", ".join(self.candidates))

    def __str__(self) -> str:
        return f"Manager liquidity CSV file not found. {self.hint}"


class CsvParseError(DashboardError):
    """Content was retrieved but is not well-formed CSV. `detail` keeps the parser message."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Error parsing CSV file")
