"""CLI layer for gstledger."""
