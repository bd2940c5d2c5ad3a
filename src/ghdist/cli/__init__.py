"""Command-line interface for ghdist."""
