"""Command-line interface for structvalue."""
