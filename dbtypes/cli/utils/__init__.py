"""Output helpers for the dbtypes CLI."""
