"""Tests for UniqueScoreList."""

import pytest

from scorebook.domain.errors import DuplicateScoreError, NullArgumentError, ScoreNotFoundError
from scorebook.domain.score import ScoreRecord
from scorebook.domain.score_list import UniqueScoreList
from scorebook.domain.value_objects import ScoreValue, Title


def make_score(name: str, value: float, date: str) -> ScoreRecord:
    return ScoreRecord.create(Title(name), ScoreValue(value), date)


MIDTERM = make_score("Midterm", 85, "2024-03-15 14:30")
QUIZ = make_score("Quiz", 60, "2024-02-01 09:00")
FINAL = make_score("Final", 92, "2024-05-20 10:00")


def test_add_and_contains():
    scores = UniqueScoreList()
    scores.add(MIDTERM)

    assert scores.contains(make_score("Midterm", 85, "2024-03-15 14:30"))
    assert MIDTERM in scores
    assert QUIZ not in scores
    assert "Midterm" not in scores
    assert len(scores) == 1


def test_add_duplicate_rejected():
    scores = UniqueScoreList([MIDTERM])
    with pytest.raises(DuplicateScoreError):
        scores.add(make_score("Midterm", 85, "2024-03-15 14:30"))
    assert len(scores) == 1


def test_same_title_different_date_is_not_duplicate():
    scores = UniqueScoreList([MIDTERM])
    scores.add(make_score("Midterm", 85, "2024-03-16 14:30"))
    assert len(scores) == 2


def test_contains_none_rejected():
    with pytest.raises(NullArgumentError):
        UniqueScoreList().contains(None)  # type: ignore[arg-type]


def test_remove():
    scores = UniqueScoreList([MIDTERM, QUIZ])
    scores.remove(make_score("Midterm", 85, "2024-03-15 14:30"))
    assert list(scores) == [QUIZ]


def test_remove_missing_raises():
    with pytest.raises(ScoreNotFoundError):
        UniqueScoreList([QUIZ]).remove(MIDTERM)


class TestSetScore:
    def test_replaces_in_place(self) -> None:
        scores = UniqueScoreList([QUIZ, MIDTERM, FINAL])
        edited = make_score("Midterm", 90, "2024-03-15 14:30")

        scores.set_score(MIDTERM, edited)

        assert list(scores) == [QUIZ, edited, FINAL]

    def test_same_score_allowed(self) -> None:
        scores = UniqueScoreList([MIDTERM])
        scores.set_score(MIDTERM, make_score("Midterm", 85, "2024-03-15 14:30"))
        assert list(scores) == [MIDTERM]

    def test_missing_target(self) -> None:
        with pytest.raises(ScoreNotFoundError):
            UniqueScoreList([QUIZ]).set_score(MIDTERM, FINAL)

    def test_edited_duplicates_other_entry(self) -> None:
        scores = UniqueScoreList([QUIZ, MIDTERM])
        with pytest.raises(DuplicateScoreError):
            scores.set_score(MIDTERM, QUIZ)

    @pytest.mark.parametrize(
        "target,edited,missing",
        [
            (QUIZ, None, ("edited",)),
            (None, QUIZ, ("target",)),
            (None, None, ("target", "edited")),
        ],
    )
    def test_none_rejected_names_missing_argument(self, target, edited, missing) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            UniqueScoreList([QUIZ]).set_score(target, edited)
        assert exc_info.value.names == missing


def test_set_scores_rejects_internal_duplicates():
    scores = UniqueScoreList([FINAL])
    with pytest.raises(DuplicateScoreError):
        scores.set_scores([MIDTERM, QUIZ, make_score("Midterm", 85, "2024-03-15 14:30")])
    assert list(scores) == [FINAL]


def test_iteration_keeps_insertion_order():
    scores = UniqueScoreList([MIDTERM, QUIZ, FINAL])
    assert list(scores) == [MIDTERM, QUIZ, FINAL]
    assert scores.as_tuple() == (MIDTERM, QUIZ, FINAL)


def test_sorted_by_date_and_latest():
    scores = UniqueScoreList([MIDTERM, FINAL, QUIZ])
    assert scores.sorted_by_date() == (QUIZ, MIDTERM, FINAL)
    assert scores.latest() == FINAL


def test_latest_empty():
    assert UniqueScoreList().latest() is None


def test_equality():
    assert UniqueScoreList([MIDTERM, QUIZ]) == UniqueScoreList([MIDTERM, QUIZ])
    assert UniqueScoreList([MIDTERM, QUIZ]) != UniqueScoreList([QUIZ, MIDTERM])
    assert UniqueScoreList() != []
