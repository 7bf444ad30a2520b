"""Normalization of validated steps into the canonical record."""

from collections.abc import Iterable

from ..constants import (
    COMMAND_KEY,
    EXTRA_ARGS_KEY,
    NAME_KEY,
    OUTPUT_KEY,
    SHELL_ARGS_KEY,
    SHELL_KEY,
    StepName,
)
from ..errors import StepValidationError
from ..models import (
    ArgsMap,
    BareName,
    CanonicalStep,
    EmptyStep,
    InlineString,
    OptionsMap,
    OptionValue,
    RawStep,
)


def _text(value: OptionValue) -> str:
    return "" if value is None else str(value)


def _shell_args(value: OptionValue) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(str(item) for item in value)
    return tuple(str(value).split())


def _from_options(step: OptionsMap) -> CanonicalStep:
    name, options = next(iter(step.entries.items()))
    fields: dict[str, object] = {
        "name": name,
        "run_command": _text(options.get(COMMAND_KEY)),
        "shell": _text(options.get(SHELL_KEY)),
        "shell_args": _shell_args(options.get(SHELL_ARGS_KEY)),
    }
    if name == StepName.ENV.value:
        # "value" is accepted by validation but not carried over
        fields["env_var_name"] = _text(options.get(NAME_KEY))
    else:
        fields["output"] = _text(options.get(OUTPUT_KEY))
    return CanonicalStep(**fields)


def to_canonical(step: RawStep) -> CanonicalStep:
    """Convert a validated raw step into its canonical record.

    The result for a step that did not pass ``validate_step`` is unspecified.

    Args:
        step: Raw step variant

    Returns:
        Canonical step for the execution engine

    Raises:
        StepValidationError: If the step is empty
    """
    if isinstance(step, BareName):
        return CanonicalStep(name=step.name)
    if isinstance(step, ArgsMap):
        name, args = next(iter(step.entries.items()))
        return CanonicalStep(name=name, extra_args=tuple(args.get(EXTRA_ARGS_KEY, ())))
    if isinstance(step, OptionsMap):
        return _from_options(step)
    if isinstance(step, InlineString):
        name, command = next(iter(step.entries.items()))
        return CanonicalStep(name=name, run_command=command)
    if isinstance(step, EmptyStep):
        raise StepValidationError("step element is empty")
    raise StepValidationError(f"unsupported step element: {type(step).__name__}")


def to_canonical_steps(steps: Iterable[RawStep]) -> list[CanonicalStep]:
    """Convert validated raw steps into canonical records, preserving order."""
    return [to_canonical(step) for step in steps]
