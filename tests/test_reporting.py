"""Tests for reporting module."""

import json

import pytest

from src.return_attribution.config import STOCKS
from src.return_attribution.engine import run_attribution
from src.return_attribution.reporting import (
    format_period_table,
    format_summary_table,
    result_to_dict,
    save_result_json,
)


@pytest.fixture
def result(stock_rows, buy_sell_decisions):
    return run_attribution(
        buy_sell_decisions, stock_rows("2024-01-01", "2024-01-20"), STOCKS,
        strategy="momentum", as_of="2024-03-01",
    )


def test_result_to_dict_is_json_safe(result):
    payload = result_to_dict(result)
    text = json.dumps(payload)
    assert payload["as_of"] == "2024-03-01"
    assert payload["periods"][1]["start_date"] == "2024-01-10"
    assert payload["periods"][1]["label"] == "Held 1"
    assert payload["summary"]["held_days"] == 5
    assert len(payload["daily_classifications"]) == 19
    assert "2024-01-10" in text


def test_format_period_table(result):
    table = format_period_table(result.periods)
    assert "Held 1" in table
    assert "Not Held 2" in table
    assert "2024-01-15" in table
    assert "5.10%" in table


def test_format_period_table_empty():
    assert "(no periods)" in format_period_table([])


def test_format_summary_table(result):
    table = format_summary_table(result)
    assert "AAPL / momentum" in table
    assert "Held Periods" in table
    assert "Buy & Hold" in table


def test_save_result_json(tmp_path, result):
    path = save_result_json({"momentum": result}, tmp_path / "out")
    assert path.exists()
    assert path.name == "attribution.json"
    data = json.loads(path.read_text())
    assert data["momentum"]["ticker"] == "AAPL"


def test_result_to_dict_includes_chart_series(result):
    chart = result_to_dict(result)["chart"]
    json.dumps(chart)
    running = chart["held_running_return_pct"]
    assert len(running) == 19
    assert running[0] == {"date": "2024-01-01", "value": None}
    held = [p for p in running if p["value"] is not None]
    assert [p["date"] for p in held][0] == "2024-01-10"
    assert held[-1]["value"] == pytest.approx(5.101, abs=1e-3)
    kinds = [s["kind"] for s in chart["shading_segments"]]
    assert kinds == ["not_held", "held", "not_held"]
    assert chart["shading_segments"][1]["start_date"] == "2024-01-10"
    assert chart["shading_segments"][1]["end_date"] == "2024-01-14"
