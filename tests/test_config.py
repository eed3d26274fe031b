"""Tests for settings loading."""

import pytest
from decimal import Decimal
from pathlib import Path

from gstledger.config import LedgerSettings, load_settings
from gstledger.domain.errors import ValidationError


def test_defaults():
    settings = load_settings(environ={})
    assert settings == LedgerSettings()
    assert settings.gst_clearing_account_code == "506"
    assert settings.owners_equity_account_code == "970"
    assert settings.uncategorized_account_code == "999"
    assert settings.gst_rate == Decimal("0.10")
    assert settings.export_path is None


def test_environment_overrides():
    settings = load_settings(
        environ={
            "GSTLEDGER_GST_CLEARING_ACCOUNT": "820",
            "GSTLEDGER_OWNERS_EQUITY_ACCOUNT": "960",
            "GSTLEDGER_UNCATEGORISED_ACCOUNT": "998",
            "GSTLEDGER_GST_RATE": "0.15",
            "GSTLEDGER_INPUTS_DIR": "/data/statements",
            "GSTLEDGER_EXPORT_PATH": "/data/journal.csv",
        }
    )
    assert settings.gst_clearing_account_code == "820"
    assert settings.owners_equity_account_code == "960"
    assert settings.uncategorized_account_code == "998"
    assert settings.gst_rate == Decimal("0.15")
    assert settings.inputs_dir == Path("/data/statements")
    assert settings.export_path == Path("/data/journal.csv")


def test_keyword_overrides_win():
    settings = load_settings(environ={"GSTLEDGER_INPUTS_DIR": "env"}, inputs_dir="cli", export_path=None)
    assert settings.inputs_dir == Path("cli")
    assert settings.export_path is None


def test_unknown_override():
    with pytest.raises(TypeError):
        load_settings(environ={}, colour="blue")


@pytest.mark.parametrize("rate", ["ten", "1.5", "-0.1"])
def test_invalid_rate(rate):
    with pytest.raises(ValidationError):
        load_settings(environ={"GSTLEDGER_GST_RATE": rate})
