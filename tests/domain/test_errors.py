"""Tests for domain errors."""

import pickle

import pytest

from scorebook.domain.errors import (
    BadDateError,
    DomainError,
    DuplicateScoreError,
    InvalidScoreValueError,
    InvalidTitleError,
    NullArgumentError,
    ScoreNotFoundError,
    ValidationError,
)


def test_null_argument_error_is_validation_error():
    err = NullArgumentError("name", "value")
    assert isinstance(err, ValidationError)
    assert isinstance(err, DomainError)
    assert err.names == ("name", "value")
    assert str(err) == "required argument(s) missing: name, value"


def test_bad_date_error_is_not_validation_error():
    """BadDateError is its own kind, distinct from generic validation errors."""
    err = BadDateError(text="2024-13-01 10:00")
    assert isinstance(err, DomainError)
    assert not isinstance(err, ValidationError)


def test_bad_date_error_message_names_the_pattern():
    err = BadDateError(text="not-a-date")
    assert err.text == "not-a-date"
    assert str(err) == "invalid date 'not-a-date', expected format yyyy-MM-dd HH:mm"


def test_bad_date_error_survives_pickling():
    err = pickle.loads(pickle.dumps(BadDateError("2024-02-30 09:00")))
    assert isinstance(err, BadDateError)
    assert err.text == "2024-02-30 09:00"


def test_bad_date_error_accepts_notes():
    err = BadDateError("x")
    err.add_note("while importing row 3")
    assert err.__notes__ == ["while importing row 3"]


def test_null_argument_error_survives_pickling():
    err = pickle.loads(pickle.dumps(NullArgumentError("name", "value")))
    assert err.names == ("name", "value")
    assert str(err) == "required argument(s) missing: name, value"


@pytest.mark.parametrize(
    "cls,base",
    [
        (InvalidTitleError, ValidationError),
        (InvalidScoreValueError, ValidationError),
        (DuplicateScoreError, DomainError),
        (ScoreNotFoundError, DomainError),
    ],
)
def test_error_hierarchy(cls: type, base: type) -> None:
    assert issubclass(cls, base)
