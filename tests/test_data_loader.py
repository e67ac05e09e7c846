from pathlib import Path

import pytest
import requests

import data_loader
from data_loader import (
    fetch_text,
    join_source,
    load_managers,
    load_players,
    load_regression_metrics,
    metrics_from_records,
    missing_columns,
    parse_csv,
)
from errors import CsvParseError, ManagerSourceNotFoundError, SourceNotFoundError


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


def test_join_source():
    assert join_source("http://host/data/", "a.csv") == "http://host/data/a.csv"
    assert join_source("public", "a.csv") == str(Path("public") / "a.csv")


def test_parse_csv_header_and_blank_lines():
    records = parse_csv("i,fn,ln\n\n1,Max,Kruse\n\n2,Leon,Goretzka\n")
    assert [dict(r) for r in records] == [
        {"i": "1", "fn": "Max", "ln": "Kruse"},
        {"i": "2", "fn": "Leon", "ln": "Goretzka"},
    ]


def test_parse_csv_keeps_text_and_fills_missing_trailing_cells():
    records = parse_csv("i,pos,mv\n007,1\n008,2,NA\n")
    assert dict(records[0]) == {"i": "007", "pos": "1", "mv": ""}
    assert records[1]["mv"] == "NA"


def test_parse_csv_empty_content():
    assert parse_csv("") == ()
    assert parse_csv("i,fn\n") == ()


def test_parsed_records_are_read_only():
    record = parse_csv("i,fn\n1,Max\n")[0]
    with pytest.raises(TypeError):
        record["fn"] = "Moritz"  # type: ignore[index]


def test_parse_csv_malformed_quoting():
    with pytest.raises(CsvParseError):
        parse_csv('i,fn\n1,"unterminated\n2,Max\n')


def test_parse_csv_extra_cells_in_first_row_fail_instead_of_truncating():
    with pytest.raises(CsvParseError):
        parse_csv("a,b\n1,2,3\n4,5\n")


def test_parse_csv_extra_cells_in_later_row_fail():
    with pytest.raises(CsvParseError):
        parse_csv("a,b\n1,2\n3,4,5\n")


def test_parse_error_has_readable_message_and_keeps_detail():
    with pytest.raises(CsvParseError) as exc:
        parse_csv('i,fn\n1,"unterminated\n')
    assert str(exc.value) == "Error parsing CSV file"
    assert exc.value.detail


def test_fetch_text_from_file(tmp_path: Path):
    path = tmp_path / "x.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    assert fetch_text(str(path)) == "a,b\n1,2\n"


def test_fetch_text_missing_file(tmp_path: Path):
    with pytest.raises(SourceNotFoundError):
        fetch_text(str(tmp_path / "missing.csv"))


def test_fetch_text_http_success(monkeypatch):
    monkeypatch.setattr(data_loader.requests, "get", lambda url: FakeResponse(200, "a\n1\n"))
    assert fetch_text("http://example.test/a.csv") == "a\n1\n"


def test_fetch_text_http_non_success_is_not_parsed(monkeypatch):
    monkeypatch.setattr(
        data_loader.requests, "get", lambda url: FakeResponse(404, "<html>Not Found</html>")
    )
    with pytest.raises(SourceNotFoundError) as exc:
        fetch_text("http://example.test/a.csv")
    assert "HTTP 404" in str(exc.value)


def test_fetch_text_http_transport_error(monkeypatch):
    def boom(url):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(data_loader.requests, "get", boom)
    with pytest.raises(SourceNotFoundError):
        fetch_text("https://example.test/a.csv")


def test_load_players(fixtures_dir: Path):
    players = load_players(str(fixtures_dir))
    assert len(players) == 5
    assert players[0]["fn"] == "Manuel"


def test_load_players_missing_source(tmp_path: Path):
    with pytest.raises(SourceNotFoundError):
        load_players(str(tmp_path))


def test_load_players_parse_failure(tmp_path: Path):
    (tmp_path / "players_with_fmv.csv").write_text('i,fn\n1,"Max\n', encoding="utf-8")
    with pytest.raises(CsvParseError):
        load_players(str(tmp_path))


def test_load_managers_probes_candidates_in_order(fixtures_dir: Path):
    managers = load_managers(str(fixtures_dir))
    assert [m["manager_name"] for m in managers] == ["Clara", "Anton", "Berta"]


def test_load_managers_prefers_generic_file(tmp_path: Path):
    (tmp_path / "manager_liquidity.csv").write_text("manager_id,manager_name\n1,Generic\n")
    (tmp_path / "manager_liquidity_1.csv").write_text("manager_id,manager_name\n2,Suffixed\n")
    assert load_managers(str(tmp_path))[0]["manager_name"] == "Generic"


def test_load_managers_not_found_has_hint(tmp_path: Path):
    with pytest.raises(ManagerSourceNotFoundError) as exc:
        load_managers(str(tmp_path))
    assert "calculate_manager_liquidity.py" in str(exc.value)
    assert exc.value.candidates[0] == "manager_liquidity.csv"


def test_load_managers_parse_failure_is_final(tmp_path: Path):
    (tmp_path / "manager_liquidity.csv").write_text('manager_id,manager_name\n1,"Bad\n')
    (tmp_path / "manager_liquidity_1.csv").write_text("manager_id,manager_name\n2,Fine\n")
    with pytest.raises(CsvParseError):
        load_managers(str(tmp_path))


def test_load_regression_metrics(fixtures_dir: Path):
    metrics = load_regression_metrics(str(fixtures_dir))
    assert metrics.B == 612.5
    assert metrics.alpha == 1.41
    assert metrics.n_samples == 418


def test_regression_metrics_missing_or_malformed_returns_none(tmp_path: Path):
    assert load_regression_metrics(str(tmp_path)) is None
    (tmp_path / "regression_metrics.csv").write_text('A,B\n1,"2\n')
    assert load_regression_metrics(str(tmp_path)) is None


def test_metrics_from_records_tolerates_missing_fields():
    metrics = metrics_from_records(parse_csv("B,alpha\n,abc\n"))
    assert metrics.B is None
    assert metrics.alpha is None
    assert metrics_from_records(()) is None


def test_missing_columns_are_reported():
    records = parse_csv("i,fn\n1,Max\n")
    assert missing_columns(records, ("i", "fn", "mv")) == ["mv"]
    assert missing_columns((), ("i",)) == []
