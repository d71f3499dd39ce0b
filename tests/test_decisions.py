"""Tests for decision parsing and ordering."""

import pandas as pd
import pytest

from src.return_attribution.decisions import group_by_strategy, normalize_decisions, parse_date
from src.return_attribution.models import Decision, InvalidInputError


def test_parse_date_normalizes_to_day():
    assert parse_date("2024-01-10T15:30:00") == pd.Timestamp("2024-01-10")


def test_parse_date_converts_aware_to_utc_day():
    # 23:30 at UTC-05:00 is already the next day in UTC
    assert parse_date("2024-01-10T23:30:00-05:00") == pd.Timestamp("2024-01-11")


@pytest.mark.parametrize(
    "bad", ["not-a-date", "2024-13-45", None, "", "Jan 99th", "01/10/2024", "10 Jan 2024"],
)
def test_parse_date_rejects_garbage(bad):
    with pytest.raises(InvalidInputError):
        parse_date(bad)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_sorted_ascending(buy_sell_decisions):
    out = normalize_decisions(buy_sell_decisions)
    assert [d.action for d in out] == ["buy", "sell"]
    assert out[0].date == pd.Timestamp("2024-01-10")


def test_stable_for_same_day():
    records = [
        {"ticker": "X", "strategy": "s", "date": "2024-01-05", "action": "sell"},
        {"ticker": "X", "strategy": "s", "date": "2024-01-02", "action": "buy"},
        {"ticker": "X", "strategy": "s", "date": "2024-01-05", "action": "buy"},
        {"ticker": "X", "strategy": "s", "date": "2024-01-05", "action": "hold"},
    ]
    out = normalize_decisions(records)
    assert [d.action for d in out] == ["buy", "sell", "buy", "hold"]


def test_no_record_dropped_without_filters():
    records = [
        {"ticker": "X", "strategy": "a", "date": "2024-01-02", "action": "weird"},
        {"ticker": "Y", "strategy": "b", "date": "2024-01-01", "action": "BUY"},
    ]
    assert len(normalize_decisions(records)) == 2


def test_filters_by_ticker_and_strategy():
    records = [
        {"ticker": "X", "strategy": "a", "date": "2024-01-02", "action": "buy"},
        {"ticker": "X", "strategy": "b", "date": "2024-01-03", "action": "buy"},
        {"ticker": "Y", "strategy": "a", "date": "2024-01-04", "action": "buy"},
    ]
    out = normalize_decisions(records, ticker="X", strategy="a")
    assert len(out) == 1
    assert out[0].date == pd.Timestamp("2024-01-02")


def test_accepts_decision_objects():
    d = Decision(ticker="X", strategy="a", date="2024-02-01", action="buy")
    out = normalize_decisions([d])
    assert out[0].date == pd.Timestamp("2024-02-01")


def test_bad_decision_date_raises():
    with pytest.raises(InvalidInputError):
        normalize_decisions([{"ticker": "X", "strategy": "a", "date": "yesterday-ish", "action": "buy"}])


def test_decision_object_action_is_coerced():
    d = Decision(ticker="X", strategy="a", date="2024-02-01", action=None)
    out = normalize_decisions([d])
    assert out[0].action == ""


def test_group_by_strategy_keeps_first_seen_order():
    decisions = normalize_decisions([
        {"ticker": "X", "strategy": "b", "date": "2024-01-01", "action": "buy"},
        {"ticker": "X", "strategy": "a", "date": "2024-01-02", "action": "buy"},
        {"ticker": "X", "strategy": "b", "date": "2024-01-03", "action": "sell"},
    ])
    grouped = group_by_strategy(decisions)
    assert list(grouped) == ["b", "a"]
    assert [d.action for d in grouped["b"]] == ["buy", "sell"]
