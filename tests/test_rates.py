"""Tests for loading exchange rate tables."""

import json
from decimal import Decimal

import pytest

from billable.domain.errors import InvalidAmountError, UnknownCurrencyError, ValidationError
from billable.utils.rates import build_rates, load_rates, parse_rate_pairs, rates_from_mapping


@pytest.fixture
def rates_file(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text(json.dumps({"USD": 1.0, "EUR": 0.9, "jpy": 150}))
    return path


def test_load_rates(rates_file):
    """Test floats in the file are read as exact Decimals."""
    assert load_rates(rates_file) == {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.9"),
        "JPY": Decimal("150"),
    }


def test_load_rates_wrapped(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text(json.dumps({"base": "USD", "rates": {"USD": 1, "GBP": 0.8}}))
    assert load_rates(path) == {"USD": Decimal(1), "GBP": Decimal("0.8")}


def test_load_rates_invalid_json(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text("{not json")
    with pytest.raises(ValidationError):
        load_rates(path)


def test_load_rates_not_an_object(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValidationError):
        load_rates(path)


def test_rates_from_mapping_rejects_unknown_currency():
    with pytest.raises(UnknownCurrencyError):
        rates_from_mapping({"XYZ": 1})


def test_rates_from_mapping_rejects_non_positive_rate():
    with pytest.raises(InvalidAmountError):
        rates_from_mapping({"USD": 0})


def test_parse_rate_pairs():
    assert parse_rate_pairs(["usd=1", "EUR=0.9"]) == {
        "USD": Decimal("1"),
        "EUR": Decimal("0.9"),
    }


def test_parse_rate_pairs_malformed():
    with pytest.raises(ValidationError):
        parse_rate_pairs(["USD:1"])


def test_build_rates_pairs_override_file(rates_file):
    rates = build_rates(rates_file, ["EUR=0.95", "GBP=0.8"])
    assert rates["EUR"] == Decimal("0.95")
    assert rates["GBP"] == Decimal("0.8")
    assert rates["USD"] == Decimal("1.0")


def test_build_rates_empty():
    assert build_rates() == {}
