"""Textual screens, dialogs and widgets for viewdeck."""
