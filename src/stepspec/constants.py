"""Constants for stepspec."""

from enum import Enum


class StepName(str, Enum):
    """Step names understood by the execution engine."""

    # Built-in steps
    INIT = "init"
    PLAN = "plan"
    APPLY = "apply"
    POLICY_CHECK = "policy_check"
    IMPORT = "import"

    # Custom command steps
    ENV = "env"
    RUN = "run"
    MULTIENV = "multienv"


# Steps usable as a bare name or with extra_args
BUILTIN_STEP_NAMES = (
    StepName.INIT.value,
    StepName.PLAN.value,
    StepName.APPLY.value,
    StepName.POLICY_CHECK.value,
    StepName.IMPORT.value,
)
OPTIONS_STEP_NAMES = (StepName.ENV.value, StepName.RUN.value, StepName.MULTIENV.value)
INLINE_STEP_NAMES = (StepName.RUN.value, StepName.MULTIENV.value)

# Option keys
EXTRA_ARGS_KEY = "extra_args"
NAME_KEY = "name"
VALUE_KEY = "value"
COMMAND_KEY = "command"
OUTPUT_KEY = "output"
SHELL_KEY = "shell"
SHELL_ARGS_KEY = "shellArgs"

ENV_OPTION_KEYS = (NAME_KEY, VALUE_KEY, COMMAND_KEY, SHELL_KEY, SHELL_ARGS_KEY)
RUN_OPTION_KEYS = (COMMAND_KEY, OUTPUT_KEY, SHELL_KEY, SHELL_ARGS_KEY)

# Post-processing modes for command output
RUN_OUTPUT_MODES = ("show", "hide", "strip_refreshing")
MULTIENV_OUTPUT_MODES = ("show", "hide")

CONFIG_FILENAME = "stepspec.toml"
