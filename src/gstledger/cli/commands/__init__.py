"""CLI commands for gstledger."""
