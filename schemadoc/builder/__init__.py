"""
Example Builder Module

Builds deterministic example payloads from parsed FieldSpec trees:
- Format-aware string placeholders (YYYYMMDD, HHMM, ISO8601)
- Nested object/array construction
- Null placeholders for types without a synthesis rule
"""

from .example_synthesizer import ExampleSynthesizer, synthesize, to_example_json

__all__ = [
    "ExampleSynthesizer",
    "synthesize",
    "to_example_json",
]
