"""Raw step models: the decoded form of a workflow step.

A step may be written in one of four YAML shapes. Each shape decodes to its own
variant so that exactly one shape is ever active for a given step, and the
variant records enough to re-encode the step in the shape it was written in.

Example:
    >>> BareName(name="plan")
    >>> ArgsMap(entries={"init": {"extra_args": ["-upgrade"]}})
    >>> OptionsMap(entries={"env": {"name": "TF_VAR_x", "command": "echo 1"}})
    >>> InlineString(entries={"run": "make lint"})
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

Scalar = str | int | float | bool | None
OptionValue = Scalar | list[Scalar]


class BareName(BaseModel):
    """Step written as a single scalar, e.g. ``plan``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bare_name"] = "bare_name"
    name: str


class ArgsMap(BaseModel):
    """Step written as ``<step>: {extra_args: [...]}``.

    Attributes:
        entries: Top-level key to nested key to ordered argument list.
            Well-formed steps have a single top-level key and a single
            ``extra_args`` nested key; anything else is rejected by validation.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["args_map"] = "args_map"
    entries: dict[str, dict[str, list[str]]] = Field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        return list(self.entries)


class OptionsMap(BaseModel):
    """Step written as ``<step>: {option: value, ...}``, e.g. an env step.

    Option values are YAML scalars or lists of scalars. Non-string scalars are
    kept as-is so that validation can report them.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["options_map"] = "options_map"
    entries: dict[str, dict[str, OptionValue]] = Field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        return list(self.entries)


class InlineString(BaseModel):
    """Step written as ``<step>: <command string>``, e.g. ``run: make``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline_string"] = "inline_string"
    entries: dict[str, str] = Field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        return list(self.entries)


class EmptyStep(BaseModel):
    """Blank step element. Decodes fine, never validates."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"


RawStep = Annotated[
    BareName | ArgsMap | OptionsMap | InlineString | EmptyStep,
    Field(discriminator="kind"),
]
