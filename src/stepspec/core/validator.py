"""Semantic validation of decoded workflow steps.

Each rule raises StepValidationError with a fixed message. Messages are shown
to users as-is, so their wording is part of the public contract.
"""

from ..constants import (
    BUILTIN_STEP_NAMES,
    COMMAND_KEY,
    ENV_OPTION_KEYS,
    EXTRA_ARGS_KEY,
    INLINE_STEP_NAMES,
    MULTIENV_OUTPUT_MODES,
    NAME_KEY,
    OPTIONS_STEP_NAMES,
    OUTPUT_KEY,
    RUN_OPTION_KEYS,
    RUN_OUTPUT_MODES,
    SHELL_ARGS_KEY,
    SHELL_KEY,
    VALUE_KEY,
    StepName,
)
from ..errors import StepValidationError
from ..models import ArgsMap, BareName, EmptyStep, InlineString, OptionsMap, OptionValue, RawStep


def format_value(value: object) -> str:
    """Render an option value for an error message; lists as ``[a b]``."""
    if isinstance(value, list):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _quote_all(keys: tuple[str, ...]) -> str:
    quoted = [f'"{key}"' for key in keys]
    return ", ".join(quoted[:-1]) + f" and {quoted[-1]}"


def _not_a_step_type(name: str) -> StepValidationError:
    return StepValidationError(f'"{name}" is not a valid step type')


def _single_key(keys: list[str]) -> str:
    if len(keys) != 1:
        raise StepValidationError(
            f"step element can only contain a single key, found {len(keys)}: {','.join(keys)}"
        )
    return keys[0]


def _validate_bare_name(step: BareName) -> None:
    if step.name not in BUILTIN_STEP_NAMES:
        raise StepValidationError(
            f"\"{step.name}\" is not a valid step type, maybe you omitted the 'run' key"
        )


def _validate_args_map(step: ArgsMap) -> None:
    key = _single_key(step.keys)
    if key not in BUILTIN_STEP_NAMES:
        raise _not_a_step_type(key)

    arg_keys = list(step.entries[key])
    if len(arg_keys) > 1:
        raise StepValidationError(
            "built-in steps only support a single extra_args key, "
            f"found {len(arg_keys)}: {','.join(arg_keys)}"
        )
    if arg_keys and arg_keys[0] != EXTRA_ARGS_KEY:
        raise StepValidationError(
            "built-in steps only support a single extra_args key, "
            f'found "{arg_keys[0]}" in step {key}'
        )


def _validate_shell_options(key: str, options: dict[str, OptionValue]) -> None:
    """Rules shared by every options-map step."""
    if SHELL_ARGS_KEY in options and SHELL_KEY not in options:
        raise StepValidationError(
            f'workflow steps only support "{SHELL_ARGS_KEY}" key in combination '
            f'with "{SHELL_KEY}" key'
        )
    if SHELL_KEY in options and COMMAND_KEY not in options:
        raise StepValidationError(
            f'workflow steps only support "{SHELL_KEY}" key in combination '
            f'with "{COMMAND_KEY}" key'
        )

    shell_args = options.get(SHELL_ARGS_KEY)
    if shell_args is None or isinstance(shell_args, str):
        return
    if not isinstance(shell_args, list):
        raise StepValidationError(
            f'"{key}" step "{SHELL_ARGS_KEY}" option must be a string or a list of strings, '
            f"found {format_value(shell_args)}"
        )
    for item in shell_args:
        if not isinstance(item, str):
            raise StepValidationError(
                f'"{key}" step "{SHELL_ARGS_KEY}" option must contain only strings, '
                f"found {format_value(item)}"
            )


def _require_strings(key: str, options: dict[str, OptionValue], names: tuple[str, ...]) -> None:
    for name in names:
        if name in options and not isinstance(options[name], str):
            raise StepValidationError(
                f'"{key}" step "{name}" option must be a string, '
                f"found {format_value(options[name])}"
            )


def _validate_env_options(options: dict[str, OptionValue]) -> None:
    for option in options:
        if option not in ENV_OPTION_KEYS:
            raise StepValidationError(
                f"env steps only support keys {_quote_all(ENV_OPTION_KEYS)}, "
                f'found key "{option}"'
            )
    if NAME_KEY not in options:
        raise StepValidationError(f'env steps must have a "{NAME_KEY}" key set')
    if VALUE_KEY in options and COMMAND_KEY in options:
        raise StepValidationError(
            f'env steps only support one of the "{VALUE_KEY}" or "{COMMAND_KEY}" keys, '
            "found both"
        )
    _require_strings(StepName.ENV.value, options, (NAME_KEY, VALUE_KEY, COMMAND_KEY, SHELL_KEY))


def _validate_command_options(key: str, options: dict[str, OptionValue]) -> None:
    """Rules for run and multienv steps written with options."""
    for option in options:
        if option not in RUN_OPTION_KEYS:
            raise StepValidationError(
                f'"{key}" steps only support keys {_quote_all(RUN_OPTION_KEYS)}, '
                f'found key "{option}"'
            )
    if COMMAND_KEY not in options:
        raise StepValidationError(f'"{key}" steps must have a "{COMMAND_KEY}" key set')
    _require_strings(key, options, (COMMAND_KEY, SHELL_KEY))

    if OUTPUT_KEY not in options:
        return
    output = options[OUTPUT_KEY]
    if key == StepName.RUN.value and output not in RUN_OUTPUT_MODES:
        raise StepValidationError(
            f'"{key}" step "{OUTPUT_KEY}" option must be one of '
            f'"show", "hide" or "strip_refreshing", found {format_value(output)}'
        )
    if key == StepName.MULTIENV.value and output not in MULTIENV_OUTPUT_MODES:
        raise StepValidationError(
            f'"{key}" step "{OUTPUT_KEY}" option must be one of "show" or "hide", '
            f"found {format_value(output)}"
        )


def _validate_options_map(step: OptionsMap) -> None:
    key = _single_key(step.keys)
    if key not in OPTIONS_STEP_NAMES:
        raise _not_a_step_type(key)

    options = step.entries[key]
    _validate_shell_options(key, options)
    if key == StepName.ENV.value:
        _validate_env_options(options)
    else:
        _validate_command_options(key, options)


def _validate_inline_string(step: InlineString) -> None:
    # The command text itself is opaque and never parsed
    key = _single_key(step.keys)
    if key not in INLINE_STEP_NAMES:
        raise _not_a_step_type(key)


def validate_step(step: RawStep) -> None:
    """Check a decoded step against the rules for its shape.

    Does not modify ``step``; safe to call repeatedly.

    Args:
        step: Raw step variant from ``decode_step``

    Raises:
        StepValidationError: On the first rule the step violates
    """
    if isinstance(step, EmptyStep):
        raise StepValidationError("step element is empty")
    if isinstance(step, BareName):
        _validate_bare_name(step)
    elif isinstance(step, ArgsMap):
        _validate_args_map(step)
    elif isinstance(step, OptionsMap):
        _validate_options_map(step)
    elif isinstance(step, InlineString):
        _validate_inline_string(step)
    else:
        raise StepValidationError(f"unsupported step element: {type(step).__name__}")
