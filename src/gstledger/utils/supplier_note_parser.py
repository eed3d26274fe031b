"""Parsing of supplier annotations embedded in entry notes."""

import re
from typing import Optional

_SUPPLIER_PATTERN = re.compile(r"Supplier:\s*(?P<name>.+?)\s*\(confidence:\s*(?P<confidence>\d+(?:\.\d+)?)%\)")


def extract_supplier(notes: Optional[str]) -> Optional[tuple[str, float]]:
    """Pull a ``Supplier: <name> (confidence: N%)`` annotation out of notes.

    Returns:
        (supplier name, confidence as a fraction between 0 and 1), or None if
        the notes carry no annotation
    """
    if not notes:
        return None
    match = _SUPPLIER_PATTERN.search(notes)
    if match is None:
        return None
    return match.group("name"), float(match.group("confidence")) / 100
