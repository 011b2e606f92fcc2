"""Notion block rendering."""
