"""Presentation layer: message text, Rich console, terminal I/O."""
