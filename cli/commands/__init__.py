"""Command implementations shared by the one-shot commands and the menu."""
