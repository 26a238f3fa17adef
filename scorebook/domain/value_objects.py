from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import InvalidScoreValueError, InvalidTitleError, NullArgumentError

TITLE_MAX_LENGTH = 50
# \w covers non-ASCII letters and digits; a leading space is rejected
_TITLE_PATTERN = re.compile(r"[\w.()#-][\w .()#-]*")

SCORE_MIN = 0
SCORE_MAX = 100


@dataclass(slots=True, frozen=True)
class Title:
    """Name of a score, e.g. "Midterm" or "Quiz 3"."""

    text: str

    def __post_init__(self) -> None:
        if self.text is None:
            raise NullArgumentError("text")
        if not isinstance(self.text, str):
            raise InvalidTitleError(f"title must be text, got {type(self.text).__name__}")
        if len(self.text) > TITLE_MAX_LENGTH:
            raise InvalidTitleError(f"title must be at most {TITLE_MAX_LENGTH} characters")
        if not _TITLE_PATTERN.fullmatch(self.text):
            raise InvalidTitleError(
                "title must not start with a space and may contain only "
                "letters, digits, spaces and -_.()#"
            )

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True, frozen=True, order=True)
class ScoreValue:
    value: int | float

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullArgumentError("value")
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidScoreValueError(f"score must be a number, got {self.value!r}")
        if not math.isfinite(self.value):
            raise InvalidScoreValueError("score must be finite")
        if not (SCORE_MIN <= self.value <= SCORE_MAX):
            raise InvalidScoreValueError(f"score must be between {SCORE_MIN} and {SCORE_MAX}")

    @classmethod
    def parse(cls, text: str) -> ScoreValue:
        """Build a ScoreValue from user input such as "85" or "72.5"."""
        if text is None:
            raise NullArgumentError("text")
        raw = text.strip()
        try:
            number: int | float = int(raw)
        except ValueError:
            try:
                number = float(raw)
            except ValueError as ex:
                raise InvalidScoreValueError(f"score must be a number, got '{text}'") from ex
        return cls(number)

    def __str__(self) -> str:
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return str(self.value)
