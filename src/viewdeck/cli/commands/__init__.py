"""Subcommands registered on the viewdeck CLI group."""
