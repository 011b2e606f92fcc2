"""Notion API client."""
