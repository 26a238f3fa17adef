# scorebook/domain/score.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from .errors import BadDateError, DomainError, NullArgumentError
from .types import Result
from .value_objects import ScoreValue, Title

DATE_PATTERN = "yyyy-MM-dd HH:mm"
_DATE_FORMAT = "%Y-%m-%d %H:%M"
# strptime alone accepts unpadded fields like "2024-3-5 9:0"
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


def parse_timestamp(text: str) -> datetime:
    """Parse `yyyy-MM-dd HH:mm` into a naive datetime.

    Raises:
        BadDateError: text does not have the exact shape, or names a
            date/time that does not exist (month 13, Feb 30, hour 24).
    """
    if not isinstance(text, str) or not _DATE_SHAPE.fullmatch(text):
        raise BadDateError(str(text))
    try:
        return datetime.strptime(text, _DATE_FORMAT)
    except ValueError as ex:
        raise BadDateError(text) from ex


def format_timestamp(moment: datetime) -> str:
    """Render a datetime in the same pattern parse_timestamp accepts."""
    return moment.strftime(_DATE_FORMAT)


@dataclass(frozen=True)
class ScoreRecord:
    """
    Immutable score attached to a contact.

    - name:       title of the score ("Midterm")
    - value:      bounded numeric score
    - timestamp:  when the score was obtained, minute precision

    Guarantees: all fields present; timestamp is a real calendar date-time.
    Build from user text with `ScoreRecord.create`.
    """

    name: Title
    value: ScoreValue
    timestamp: datetime

    def __post_init__(self) -> None:
        missing = [
            label
            for label, field_value in (
                ("name", self.name),
                ("value", self.value),
                ("timestamp", self.timestamp),
            )
            if field_value is None
        ]
        if missing:
            raise NullArgumentError(*missing)

    @classmethod
    def create(cls, name: Title, value: ScoreValue, date_text: str) -> ScoreRecord:
        """Validate inputs and build a record.

        Raises:
            NullArgumentError: any argument is None.
            BadDateError: date_text is not a valid `yyyy-MM-dd HH:mm` date-time.
        """
        missing = [
            label
            for label, arg in (("name", name), ("value", value), ("date_text", date_text))
            if arg is None
        ]
        if missing:
            raise NullArgumentError(*missing)
        return cls(name=name, value=value, timestamp=parse_timestamp(date_text))

    def get_name(self) -> Title:
        return self.name

    def get_value(self) -> ScoreValue:
        return self.value

    def get_timestamp(self) -> datetime:
        return self.timestamp

    def is_same_score(self, other: ScoreRecord | None) -> bool:
        """Returns True if both records describe the same logical score.

        Used for duplicate detection in score lists; compares the same fields
        as equality.
        """
        if other is self:
            return True
        return (
            isinstance(other, ScoreRecord)
            and other.name == self.name
            and other.value == self.value
            and other.timestamp == self.timestamp
        )

    def __str__(self) -> str:
        return (
            f"Name: {self.name}; Score: {self.value}; "
            f"Date: {self.timestamp.isoformat(timespec='minutes')}"
        )


def try_create_score(
    name: Title, value: ScoreValue, date_text: str
) -> Result[ScoreRecord, DomainError]:
    """Result-returning variant of ScoreRecord.create."""
    try:
        return Result.success(ScoreRecord.create(name, value, date_text))
    except DomainError as ex:
        return Result.failure(ex)
