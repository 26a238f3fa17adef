"""Domain errors (typed) for score records.

Why: One error family the application layer can map to user-facing messages,
without the domain knowing who presents them.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""


class ValidationError(DomainError):
    """Invalid input/domain state."""


class NullArgumentError(ValidationError):
    """A required argument was None."""

    def __init__(self, *names: str) -> None:
        self.names = names
        super().__init__(*names)

    def __str__(self) -> str:
        return f"required argument(s) missing: {', '.join(self.names)}"


class InvalidTitleError(ValidationError):
    """Score title does not satisfy the title constraints."""


class InvalidScoreValueError(ValidationError):
    """Score value is not a number or lies outside the allowed bounds."""


class BadDateError(DomainError):
    """Date text does not match the `yyyy-MM-dd HH:mm` pattern."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(text)

    def __str__(self) -> str:
        return f"invalid date '{self.text}', expected format yyyy-MM-dd HH:mm"


class DuplicateScoreError(DomainError):
    """Operation would result in the same score twice in a list."""


class ScoreNotFoundError(DomainError):
    """Score is not present in the list."""
