"""Error types shared across the culvert sizing engine."""
from _collections_abc import Sequence


class InvalidInput(ValueError):
    """Exception raised when measurements or adjustment parameters are malformed."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: list[str] = list(errors)
        message: str = "; ".join(self.errors) if self.errors else "Unknown input error."
        super().__init__(message)
