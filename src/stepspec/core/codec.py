"""Shape recognition and round-trip encoding for workflow steps.

A step is decoded from a PyYAML node (as produced by ``yaml.compose``) by
trying each shape in a fixed order, since the shapes are not disjoint at the
syntax level. Encoding goes back through PyYAML's safe representer so that the
resulting node decodes to an equal step.
"""

import logging
from collections.abc import Iterable, Sequence

import yaml
from yaml.constructor import SafeConstructor
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode
from yaml.representer import SafeRepresenter

from ..config import DumpConfig
from ..errors import StepDecodeError, StepEncodeError
from ..models import (
    ArgsMap,
    BareName,
    EmptyStep,
    InlineString,
    OptionsMap,
    OptionValue,
    RawStep,
    Scalar,
)

logger = logging.getLogger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"


# ============================================================================
# Diagnostics
# ============================================================================


def format_excerpt(source: str, line: int, column: int) -> str:
    """Render source lines around a position with a caret under the column.

    Args:
        source: Full YAML source text
        line: 0-based line of the offending token
        column: 0-based column of the offending token

    Returns:
        One line of context on each side, the offending line marked with ``>``
    """
    lines = source.rstrip("\0").split("\n")
    if line >= len(lines):
        return ""

    rendered: list[str] = []
    for idx in range(max(0, line - 1), min(len(lines), line + 2)):
        marker = ">" if idx == line else " "
        prefix = f"{marker}{idx + 1:>3} | "
        rendered.append(f"{prefix}{lines[idx]}")
        if idx == line:
            rendered.append(" " * (len(prefix) + column) + "^")
    return "\n".join(rendered)


def _error_at(mark: yaml.Mark | None, message: str) -> StepDecodeError:
    if mark is None:
        return StepDecodeError(message)
    excerpt = ""
    if mark.buffer is not None:
        excerpt = format_excerpt(mark.buffer, mark.line, mark.column)
    return StepDecodeError(message, line=mark.line + 1, column=mark.column + 1, excerpt=excerpt)


def _yaml_problem(exc: yaml.MarkedYAMLError) -> str:
    parts = [part for part in (exc.context, exc.problem) if part]
    return ", ".join(parts) or str(exc)


def _node_kind(node: Node) -> str:
    if isinstance(node, MappingNode):
        return "mapping"
    if isinstance(node, SequenceNode):
        return "sequence"
    return "scalar"


def _mismatch(node: Node, expected: str) -> StepDecodeError:
    return _error_at(node.start_mark, f"{_node_kind(node)} was used where {expected} is expected")


# ============================================================================
# Decoding
# ============================================================================


def _is_null(node: Node) -> bool:
    return isinstance(node, ScalarNode) and node.tag == NULL_TAG


def _scalar_text(node: ScalarNode) -> str:
    return "" if _is_null(node) else node.value


def _mapping_items(node: MappingNode) -> list[tuple[str, Node]]:
    """Return (key, value node) pairs, rejecting complex and duplicate keys."""
    items: list[tuple[str, Node]] = []
    seen: set[str] = set()
    for key_node, value_node in node.value:
        if not isinstance(key_node, ScalarNode):
            raise _error_at(key_node.start_mark, "mapping key must be a scalar")
        key = key_node.value
        if key in seen:
            raise _error_at(key_node.start_mark, f'mapping key "{key}" already defined')
        seen.add(key)
        items.append((key, value_node))
    return items


def _is_scalar_sequence(node: Node) -> bool:
    return isinstance(node, SequenceNode) and all(
        isinstance(item, ScalarNode) for item in node.value
    )


def _is_args_value(node: Node) -> bool:
    return isinstance(node, MappingNode) and all(
        _is_scalar_sequence(value) for _, value in node.value
    )


def _is_options_value(node: Node) -> bool:
    return isinstance(node, MappingNode) and all(
        isinstance(value, ScalarNode) or _is_scalar_sequence(value) for _, value in node.value
    )


def _construct_scalar(constructor: SafeConstructor, node: ScalarNode) -> Scalar:
    try:
        value = constructor.construct_object(node)
    except yaml.MarkedYAMLError as exc:
        raise _error_at(exc.problem_mark, _yaml_problem(exc)) from exc
    except (ValueError, KeyError, AttributeError, TypeError) as exc:
        message = f"cannot decode {node.tag} value {node.value!r}"
        raise _error_at(node.start_mark, message) from exc
    # bool is an int subclass; timestamps and binary keep their source text
    if value is None or isinstance(value, (str, int, float)):
        return value
    return node.value


def _decode_args(node: MappingNode) -> dict[str, list[str]]:
    return {
        key: [_scalar_text(item) for item in value.value] for key, value in _mapping_items(node)
    }


def _decode_options(constructor: SafeConstructor, node: MappingNode) -> dict[str, OptionValue]:
    options: dict[str, OptionValue] = {}
    for key, value in _mapping_items(node):
        if isinstance(value, SequenceNode):
            options[key] = [_construct_scalar(constructor, item) for item in value.value]
        else:
            options[key] = _construct_scalar(constructor, value)
    return options


def _unmatched_mapping(items: list[tuple[str, Node]]) -> StepDecodeError:
    """Build the error for a mapping that matches no step shape.

    Points at the first node that breaks the shape implied by the first value.
    """
    for _, value in items:
        if isinstance(value, SequenceNode):
            return _mismatch(value, "mapping")

    expects_mapping = isinstance(items[0][1], MappingNode)
    for _, value in items:
        if expects_mapping and not isinstance(value, MappingNode):
            return _mismatch(value, "mapping")
        if not expects_mapping and not isinstance(value, ScalarNode):
            return _mismatch(value, "scalar")

    for _, value in items:
        if not isinstance(value, MappingNode):
            continue
        for _, option in value.value:
            if isinstance(option, MappingNode):
                return _mismatch(option, "scalar or sequence")
            if isinstance(option, SequenceNode):
                for item in option.value:
                    if not isinstance(item, ScalarNode):
                        return _mismatch(item, "scalar")

    return _error_at(items[0][1].start_mark, "unrecognized step element")


def decode_step(node: Node | None) -> RawStep:
    """Decode a YAML node into the raw step variant matching its shape.

    Args:
        node: Node produced by ``yaml.compose``, or None for an empty document

    Returns:
        Exactly one raw step variant (EmptyStep for a blank node)

    Raises:
        StepDecodeError: If the node matches none of the step shapes
    """
    if node is None or _is_null(node):
        return EmptyStep()

    if isinstance(node, ScalarNode):
        return BareName(name=node.value)

    if not isinstance(node, MappingNode):
        raise _mismatch(node, "mapping")

    items = _mapping_items(node)
    if not items:
        return EmptyStep()

    if all(_is_args_value(value) for _, value in items):
        logger.debug(f"Decoded extra-args step: {[key for key, _ in items]}")
        return ArgsMap(entries={key: _decode_args(value) for key, value in items})

    if all(_is_options_value(value) for _, value in items):
        logger.debug(f"Decoded options step: {[key for key, _ in items]}")
        constructor = SafeConstructor()
        return OptionsMap(
            entries={key: _decode_options(constructor, value) for key, value in items}
        )

    if all(isinstance(value, ScalarNode) for _, value in items):
        logger.debug(f"Decoded inline step: {[key for key, _ in items]}")
        return InlineString(entries={key: _scalar_text(value) for key, value in items})

    raise _unmatched_mapping(items)


def decode_steps(node: Node | None) -> list[RawStep]:
    """Decode a YAML sequence of steps.

    Raises:
        StepDecodeError: If the node is not a sequence or any item fails to decode
    """
    if node is None or _is_null(node):
        return []
    if not isinstance(node, SequenceNode):
        raise _mismatch(node, "sequence")
    return [decode_step(item) for item in node.value]


def compose(text: str) -> Node | None:
    """Compose YAML text into a single node tree.

    Raises:
        StepDecodeError: If the text is not valid single-document YAML
    """
    loader = yaml.SafeLoader(text)
    try:
        return loader.get_single_node()
    except yaml.MarkedYAMLError as exc:
        raise _error_at(exc.problem_mark, _yaml_problem(exc)) from exc
    except yaml.YAMLError as exc:
        raise StepDecodeError(str(exc)) from exc
    finally:
        loader.dispose()


def load_step(text: str) -> RawStep:
    """Decode a single step from YAML text."""
    return decode_step(compose(text))


def load_steps(text: str) -> list[RawStep]:
    """Decode a YAML list of steps from text."""
    return decode_steps(compose(text))


# ============================================================================
# Encoding
# ============================================================================


def _step_data(step: RawStep) -> object:
    """Plain data with the same shape the step was decoded from."""
    if isinstance(step, EmptyStep):
        return None
    if isinstance(step, BareName):
        return step.name
    if isinstance(step, ArgsMap):
        return {
            key: {nested: list(args) for nested, args in value.items()}
            for key, value in step.entries.items()
        }
    if isinstance(step, OptionsMap):
        return {
            key: {
                option: list(value) if isinstance(value, list) else value
                for option, value in options.items()
            }
            for key, options in step.entries.items()
        }
    if isinstance(step, InlineString):
        return dict(step.entries)
    raise StepEncodeError(f"cannot encode {type(step).__name__} as a workflow step")


def encode_step(step: RawStep, *, default_flow_style: bool | None = False) -> Node:
    """Encode a raw step back into a YAML node of the same shape.

    Args:
        step: Raw step variant
        default_flow_style: Passed through to the PyYAML representer

    Returns:
        Node that ``decode_step`` turns back into an equal step

    Raises:
        StepEncodeError: If ``step`` is not a raw step variant
    """
    representer = SafeRepresenter(default_flow_style=default_flow_style, sort_keys=False)
    return representer.represent_data(_step_data(step))


def encode_steps(steps: Iterable[RawStep], *, default_flow_style: bool | None = False) -> Node:
    """Encode raw steps as a YAML sequence node."""
    representer = SafeRepresenter(default_flow_style=default_flow_style, sort_keys=False)
    return representer.represent_data([_step_data(step) for step in steps])


def _serialize(node: Node, config: DumpConfig) -> str:
    return yaml.serialize(
        node,
        Dumper=yaml.SafeDumper,
        indent=config.indent,
        width=config.width,
        explicit_start=config.explicit_start,
        allow_unicode=True,
    )


def dump_step(step: RawStep, config: DumpConfig | None = None) -> str:
    """Serialize a raw step to YAML text in the shape it was written in."""
    config = config or DumpConfig()
    return _serialize(encode_step(step, default_flow_style=config.default_flow_style), config)


def dump_steps(steps: Sequence[RawStep], config: DumpConfig | None = None) -> str:
    """Serialize raw steps to a YAML list."""
    config = config or DumpConfig()
    return _serialize(encode_steps(steps, default_flow_style=config.default_flow_style), config)
