"""Core step parsing logic.

This package contains:
- codec: YAML shape recognition and round-trip encoding
- validator: Shape-specific semantic rules
- normalizer: Conversion to the canonical step record
- loader: Text to canonical step in one call
"""

from .codec import (
    compose,
    decode_step,
    decode_steps,
    dump_step,
    dump_steps,
    encode_step,
    encode_steps,
    format_excerpt,
    load_step,
    load_steps,
)
from .loader import parse_step, parse_steps
from .normalizer import to_canonical, to_canonical_steps
from .validator import format_value, validate_step

__all__ = [
    "compose",
    "decode_step",
    "decode_steps",
    "dump_step",
    "dump_steps",
    "encode_step",
    "encode_steps",
    "format_excerpt",
    "format_value",
    "load_step",
    "load_steps",
    "parse_step",
    "parse_steps",
    "to_canonical",
    "to_canonical_steps",
    "validate_step",
]
