"""Command-line interface for splitting and joining files."""
