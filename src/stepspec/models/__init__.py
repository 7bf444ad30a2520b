"""Pydantic data models for workflow steps.

This package defines:
- Raw (decoded) step variants, one per YAML shape (BareName, ArgsMap,
  OptionsMap, InlineString, EmptyStep)
- The canonical step record handed to the execution engine (CanonicalStep)

Example:
    >>> from stepspec.models import BareName, CanonicalStep
    >>> BareName(name="plan")
    >>> CanonicalStep(name="plan")
"""

from .canonical import CanonicalStep
from .raw import (
    ArgsMap,
    BareName,
    EmptyStep,
    InlineString,
    OptionsMap,
    OptionValue,
    RawStep,
    Scalar,
)

__all__ = [
    "ArgsMap",
    "BareName",
    "CanonicalStep",
    "EmptyStep",
    "InlineString",
    "OptionValue",
    "OptionsMap",
    "RawStep",
    "Scalar",
]
