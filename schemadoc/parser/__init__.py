"""Input document loading."""
