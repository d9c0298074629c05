"""Command-line interface for viewdeck."""
