"""Ledger settings loaded from the environment."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping, Optional

from gstledger.domain.errors import ValidationError
from gstledger.domain.money import DEFAULT_GST_RATE

DEFAULT_GST_CLEARING_ACCOUNT = "506"
DEFAULT_OWNERS_EQUITY_ACCOUNT = "970"
DEFAULT_UNCATEGORIZED_ACCOUNT = "999"
DEFAULT_INPUTS_DIR = "inputs"


@dataclass(frozen=True)
class LedgerSettings:
    """Account codes and paths the ledger engine is wired with."""

    gst_clearing_account_code: str = DEFAULT_GST_CLEARING_ACCOUNT
    owners_equity_account_code: str = DEFAULT_OWNERS_EQUITY_ACCOUNT
    uncategorized_account_code: str = DEFAULT_UNCATEGORIZED_ACCOUNT
    gst_rate: Decimal = DEFAULT_GST_RATE
    inputs_dir: Path = Path(DEFAULT_INPUTS_DIR)
    export_path: Optional[Path] = None


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> LedgerSettings:
    """Build settings from GSTLEDGER_* environment variables.

    Keyword overrides (e.g. from CLI options) win over the environment; values
    of None are ignored.

    Raises:
        ValidationError: If GSTLEDGER_GST_RATE is not a number between 0 and 1
    """
    env = os.environ if environ is None else environ

    rate_text = env.get("GSTLEDGER_GST_RATE")
    gst_rate = DEFAULT_GST_RATE
    if rate_text:
        try:
            gst_rate = Decimal(rate_text)
        except InvalidOperation:
            raise ValidationError(f"GSTLEDGER_GST_RATE must be a number, got '{rate_text}'")
        if not 0 <= gst_rate < 1:
            raise ValidationError(f"GSTLEDGER_GST_RATE must be between 0 and 1, got {gst_rate}")

    export_path = env.get("GSTLEDGER_EXPORT_PATH")
    values = {
        "gst_clearing_account_code": env.get("GSTLEDGER_GST_CLEARING_ACCOUNT", DEFAULT_GST_CLEARING_ACCOUNT),
        "owners_equity_account_code": env.get("GSTLEDGER_OWNERS_EQUITY_ACCOUNT", DEFAULT_OWNERS_EQUITY_ACCOUNT),
        "uncategorized_account_code": env.get("GSTLEDGER_UNCATEGORISED_ACCOUNT", DEFAULT_UNCATEGORIZED_ACCOUNT),
        "gst_rate": gst_rate,
        "inputs_dir": Path(env.get("GSTLEDGER_INPUTS_DIR", DEFAULT_INPUTS_DIR)),
        "export_path": Path(export_path) if export_path else None,
    }
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in values:
            raise TypeError(f"Unknown setting '{key}'")
        values[key] = Path(value) if key in ("inputs_dir", "export_path") else value

    return LedgerSettings(**values)
