"""Command-line interface for berth."""
