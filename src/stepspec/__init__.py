"""stepspec: parse, validate and normalize declarative workflow steps."""

from .core import (
    decode_step,
    decode_steps,
    dump_step,
    dump_steps,
    encode_step,
    encode_steps,
    load_step,
    load_steps,
    parse_step,
    parse_steps,
    to_canonical,
    to_canonical_steps,
    validate_step,
)
from .errors import StepDecodeError, StepEncodeError, StepError, StepValidationError
from .models import (
    ArgsMap,
    BareName,
    CanonicalStep,
    EmptyStep,
    InlineString,
    OptionsMap,
    RawStep,
)

__version__ = "0.1.0"

__all__ = [
    "ArgsMap",
    "BareName",
    "CanonicalStep",
    "EmptyStep",
    "InlineString",
    "OptionsMap",
    "RawStep",
    "StepDecodeError",
    "StepEncodeError",
    "StepError",
    "StepValidationError",
    "__version__",
    "decode_step",
    "decode_steps",
    "dump_step",
    "dump_steps",
    "encode_step",
    "encode_steps",
    "load_step",
    "load_steps",
    "parse_step",
    "parse_steps",
    "to_canonical",
    "to_canonical_steps",
    "validate_step",
]
