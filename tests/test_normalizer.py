"""Tests for canonical step normalization."""

import pytest

from stepspec.core.normalizer import to_canonical, to_canonical_steps
from stepspec.errors import StepValidationError
from stepspec.models import ArgsMap, BareName, CanonicalStep, EmptyStep, InlineString, OptionsMap

CANONICAL_CASES = [
    pytest.param(BareName(name="init"), CanonicalStep(name="init"), id="init step"),
    pytest.param(BareName(name="plan"), CanonicalStep(name="plan"), id="plan step"),
    pytest.param(
        BareName(name="policy_check"), CanonicalStep(name="policy_check"), id="policy_check step"
    ),
    pytest.param(BareName(name="apply"), CanonicalStep(name="apply"), id="apply step"),
    pytest.param(BareName(name="import"), CanonicalStep(name="import"), id="import step"),
    pytest.param(
        OptionsMap(entries={"env": {"name": "test", "command": "echo 123"}}),
        CanonicalStep(name="env", run_command="echo 123", env_var_name="test"),
        id="env step",
    ),
    pytest.param(
        ArgsMap(entries={"init": {"extra_args": ["arg1", "arg2"]}}),
        CanonicalStep(name="init", extra_args=("arg1", "arg2")),
        id="init extra_args",
    ),
    pytest.param(
        ArgsMap(entries={"plan": {"extra_args": ["arg1", "arg2"]}}),
        CanonicalStep(name="plan", extra_args=("arg1", "arg2")),
        id="plan extra_args",
    ),
    pytest.param(
        ArgsMap(entries={"policy_check": {"extra_args": ["arg1", "arg2"]}}),
        CanonicalStep(name="policy_check", extra_args=("arg1", "arg2")),
        id="policy_check extra_args",
    ),
    pytest.param(
        ArgsMap(entries={"apply": {"extra_args": ["arg1", "arg2"]}}),
        CanonicalStep(name="apply", extra_args=("arg1", "arg2")),
        id="apply extra_args",
    ),
    pytest.param(
        ArgsMap(entries={"import": {"extra_args": ["arg1", "arg2"]}}),
        CanonicalStep(name="import", extra_args=("arg1", "arg2")),
        id="import extra_args",
    ),
    pytest.param(
        ArgsMap(entries={"import": {}}),
        CanonicalStep(name="import"),
        id="extra_args style without arguments",
    ),
    pytest.param(
        InlineString(entries={"run": "my 'run command'"}),
        CanonicalStep(name="run", run_command="my 'run command'"),
        id="run step",
    ),
    pytest.param(
        OptionsMap(entries={"run": {"command": "my 'run command'", "output": "hide"}}),
        CanonicalStep(name="run", run_command="my 'run command'", output="hide"),
        id="run step with output",
    ),
    pytest.param(
        InlineString(entries={"multienv": "envs.sh"}),
        CanonicalStep(name="multienv", run_command="envs.sh"),
        id="multienv step",
    ),
    pytest.param(
        OptionsMap(entries={"multienv": {"command": "envs.sh", "output": "hide"}}),
        CanonicalStep(name="multienv", run_command="envs.sh", output="hide"),
        id="multienv step with output",
    ),
    pytest.param(
        OptionsMap(
            entries={"run": {"command": "make", "shell": "bash", "shellArgs": "-eu -c"}}
        ),
        CanonicalStep(name="run", run_command="make", shell="bash", shell_args=("-eu", "-c")),
        id="run step with shell args string",
    ),
    pytest.param(
        OptionsMap(
            entries={
                "env": {
                    "name": "X",
                    "command": "echo 1",
                    "shell": "bash",
                    "shellArgs": ["-c", "--debug"],
                }
            }
        ),
        CanonicalStep(
            name="env",
            run_command="echo 1",
            env_var_name="X",
            shell="bash",
            shell_args=("-c", "--debug"),
        ),
        id="env step with shell args list",
    ),
]


@pytest.mark.parametrize(("step", "expected"), CANONICAL_CASES)
def test_to_canonical(step: object, expected: CanonicalStep) -> None:
    assert to_canonical(step) == expected  # type: ignore[arg-type]


def test_env_value_is_not_projected() -> None:
    step = OptionsMap(entries={"env": {"name": "REGION", "value": "us-east-1"}})
    canonical = to_canonical(step)
    assert canonical == CanonicalStep(name="env", env_var_name="REGION")
    assert "us-east-1" not in canonical.model_dump_json()


def test_empty_step_has_no_canonical_form() -> None:
    with pytest.raises(StepValidationError, match="step element is empty"):
        to_canonical(EmptyStep())


def test_to_canonical_steps_preserves_order() -> None:
    steps = [BareName(name="plan"), InlineString(entries={"run": "echo"}), BareName(name="apply")]
    assert [step.name for step in to_canonical_steps(steps)] == ["plan", "run", "apply"]


def test_canonical_step_has_no_raw_reference() -> None:
    raw = ArgsMap(entries={"init": {"extra_args": ["a"]}})
    canonical = to_canonical(raw)
    raw.entries["init"]["extra_args"].append("b")
    assert canonical.extra_args == ("a",)
