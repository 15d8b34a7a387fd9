"""Domain errors surfaced to callers of the analysis pipeline."""


class InputError(ValueError):
    """Raised when a diet analysis request fails validation."""

    def __init__(self, message: str, errors: list[dict[str, object]] | None = None):
        super().__init__(message)
        self.errors = errors or []
