"""Command-line interface for lstree."""
