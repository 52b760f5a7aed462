"""Command-line interface for envguard."""
