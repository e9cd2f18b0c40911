"""Shared helpers: debug log, formatting, error rendering."""
