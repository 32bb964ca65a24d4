"""Command-line interface for Faultline."""
