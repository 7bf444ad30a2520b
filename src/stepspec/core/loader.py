"""Text-to-canonical step loading.

Composes the codec, validator and normalizer for callers that only need the
canonical records, such as the execution engine's config loading.
"""

import logging

from ..models import CanonicalStep
from .codec import load_step, load_steps
from .normalizer import to_canonical
from .validator import validate_step

logger = logging.getLogger(__name__)


def parse_step(text: str) -> CanonicalStep:
    """Decode, validate and normalize a single step from YAML text.

    Raises:
        StepDecodeError: If the text does not match any step shape
        StepValidationError: If the step violates a rule for its shape
    """
    raw = load_step(text)
    validate_step(raw)
    step = to_canonical(raw)
    logger.debug(f"Parsed {raw.kind} step as {step.name.value!r}")
    return step


def parse_steps(text: str) -> list[CanonicalStep]:
    """Decode, validate and normalize a YAML list of steps.

    The first invalid step aborts loading; its error is raised unchanged.
    """
    raw_steps = load_steps(text)
    steps: list[CanonicalStep] = []
    for index, raw in enumerate(raw_steps):
        logger.debug(f"Validating step {index} ({raw.kind})")
        validate_step(raw)
        steps.append(to_canonical(raw))
    logger.debug(f"Parsed {len(steps)} steps")
    return steps
