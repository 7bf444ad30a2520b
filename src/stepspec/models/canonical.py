"""Canonical step model consumed by the execution engine."""

from pydantic import BaseModel, ConfigDict, Field

from ..constants import StepName


class CanonicalStep(BaseModel):
    """Normalized step, independent of the YAML shape it was written in.

    Attributes:
        name: Step name.
        extra_args: Extra arguments for a built-in step.
        run_command: Command for run, multienv and env steps.
        env_var_name: Variable set by an env step.
        output: Output post-processing mode for run and multienv steps.
        shell: Shell used to run ``run_command``, if chosen explicitly.
        shell_args: Arguments passed to ``shell``.
    """

    model_config = ConfigDict(frozen=True)

    name: StepName = Field(description="Step name")
    extra_args: tuple[str, ...] = Field(default=(), description="Extra built-in step arguments")
    run_command: str = Field(default="", description="Custom command to run")
    env_var_name: str = Field(default="", description="Env step variable name")
    output: str = Field(default="", description="Output post-processing mode")
    shell: str = Field(default="", description="Explicit shell for the command")
    shell_args: tuple[str, ...] = Field(default=(), description="Arguments for the shell")
