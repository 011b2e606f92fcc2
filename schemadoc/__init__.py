"""schemadoc - Field-schema documentation and example payload generator."""

__version__ = "0.1.0"
