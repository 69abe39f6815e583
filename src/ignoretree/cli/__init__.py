"""Command-line interface for ignoretree."""
