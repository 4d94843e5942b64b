"""Command-line interface for truffula."""
