"""Tests for stepspec data models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from stepspec.constants import StepName
from stepspec.models import (
    ArgsMap,
    BareName,
    CanonicalStep,
    EmptyStep,
    InlineString,
    OptionsMap,
    RawStep,
)


def test_raw_step_discriminator():
    adapter = TypeAdapter(RawStep)
    assert adapter.validate_python({"kind": "bare_name", "name": "plan"}) == BareName(name="plan")
    assert adapter.validate_python({"kind": "empty"}) == EmptyStep()
    step = adapter.validate_python(
        {"kind": "args_map", "entries": {"init": {"extra_args": ["a"]}}}
    )
    assert isinstance(step, ArgsMap)


def test_raw_step_serialization_round_trip():
    adapter = TypeAdapter(RawStep)
    step = OptionsMap(entries={"env": {"name": "x", "command": "y"}})
    assert adapter.validate_json(adapter.dump_json(step)) == step


def test_raw_steps_are_frozen():
    step = BareName(name="plan")
    with pytest.raises(ValidationError):
        step.name = "apply"  # type: ignore[misc]


def test_option_values_keep_scalar_types():
    step = OptionsMap(entries={"run": {"shellArgs": ["-c", 42, True, None, 1.5]}})
    assert step.entries["run"]["shellArgs"] == ["-c", 42, True, None, 1.5]
    assert isinstance(step.entries["run"]["shellArgs"][2], bool)


def test_variants_are_distinct():
    assert InlineString(entries={"run": "x"}) != OptionsMap(entries={"run": {"command": "x"}})
    assert InlineString(entries={}).keys == []


def test_canonical_step_defaults():
    step = CanonicalStep(name=StepName.PLAN.value)
    assert step.name is StepName.PLAN
    assert step.extra_args == ()
    assert step.run_command == ""
    assert step.env_var_name == ""
    assert step.output == ""
    assert step.shell == ""
    assert step.shell_args == ()


def test_canonical_step_rejects_unknown_name():
    with pytest.raises(ValidationError):
        CanonicalStep(name="bogus")


def test_canonical_step_is_frozen():
    step = CanonicalStep(name="plan")
    with pytest.raises(ValidationError):
        step.run_command = "x"  # type: ignore[misc]
