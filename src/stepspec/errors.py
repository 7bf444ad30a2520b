"""Step parsing errors."""


class StepError(Exception):
    """Base exception for workflow step errors."""


class StepDecodeError(StepError):
    """Raised when a YAML node does not match any step shape.

    Carries the 1-based position of the offending node and an excerpt of the
    surrounding source with a caret under the column. ``str()`` yields the
    full diagnostic, which is shown to users unchanged.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        excerpt: str = "",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.excerpt = excerpt
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line is None or self.column is None:
            return self.message
        header = f"[{self.line}:{self.column}] {self.message}"
        if not self.excerpt:
            return header
        return f"{header}\n{self.excerpt}"


class StepEncodeError(StepError):
    """Raised when a value cannot be encoded as a step node."""


class StepValidationError(StepError):
    """Raised when a decoded step violates a semantic rule."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
