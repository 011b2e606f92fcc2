"""Exceptions raised while loading and processing field schemas."""


class SchemaError(Exception):
    """Base class for schemadoc errors."""


class SchemaTooDeepError(SchemaError):
    """Field nesting exceeded the configured maximum depth."""

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Schema too deep at '{path}' (max depth {max_depth})")


class DocumentLoadError(SchemaError):
    """Input document could not be read or is not a JSON object."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load {source}: {reason}")


class ExampleSerializationError(SchemaError):
    """Synthesized example could not be serialized to JSON."""
