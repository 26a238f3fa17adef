"""A contact's scores, kept free of duplicates.

Why: `ScoreRecord.is_same_score` is the notion of sameness used here, so a
list never holds two records for the same logical score.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DuplicateScoreError, NullArgumentError, ScoreNotFoundError
from .score import ScoreRecord


class UniqueScoreList:
    """Insertion-ordered list of ScoreRecords without duplicates."""

    def __init__(self, scores: Iterable[ScoreRecord] = ()) -> None:
        self._scores: list[ScoreRecord] = []
        self.set_scores(scores)

    def contains(self, score: ScoreRecord) -> bool:
        if score is None:
            raise NullArgumentError("score")
        return any(existing.is_same_score(score) for existing in self._scores)

    def add(self, score: ScoreRecord) -> None:
        """Append a score.

        Raises:
            DuplicateScoreError: an equivalent score is already present.
        """
        if self.contains(score):
            raise DuplicateScoreError(f"score already exists: {score}")
        self._scores.append(score)

    def set_score(self, target: ScoreRecord, edited: ScoreRecord) -> None:
        """Replace `target` with `edited`, keeping its position.

        Raises:
            ScoreNotFoundError: target is not in the list.
            DuplicateScoreError: edited matches a different entry.
        """
        missing = [
            label for label, arg in (("target", target), ("edited", edited)) if arg is None
        ]
        if missing:
            raise NullArgumentError(*missing)
        index = self._index_of(target)
        if not target.is_same_score(edited) and self.contains(edited):
            raise DuplicateScoreError(f"score already exists: {edited}")
        self._scores[index] = edited

    def remove(self, score: ScoreRecord) -> None:
        """Raises ScoreNotFoundError if the score is absent."""
        del self._scores[self._index_of(score)]

    def set_scores(self, scores: Iterable[ScoreRecord]) -> None:
        """Replace the whole content; rejects input holding duplicates."""
        incoming = list(scores)
        for i, score in enumerate(incoming):
            if score is None:
                raise NullArgumentError("scores")
            if any(score.is_same_score(other) for other in incoming[i + 1 :]):
                raise DuplicateScoreError(f"score already exists: {score}")
        self._scores = incoming

    def latest(self) -> ScoreRecord | None:
        """Most recent score by timestamp, None for an empty list."""
        return max(self._scores, key=lambda s: s.timestamp, default=None)

    def sorted_by_date(self) -> tuple[ScoreRecord, ...]:
        return tuple(sorted(self._scores, key=lambda s: s.timestamp))

    def as_tuple(self) -> tuple[ScoreRecord, ...]:
        return tuple(self._scores)

    def _index_of(self, score: ScoreRecord) -> int:
        if score is None:
            raise NullArgumentError("score")
        for i, existing in enumerate(self._scores):
            if existing.is_same_score(score):
                return i
        raise ScoreNotFoundError(f"score not found: {score}")

    def __contains__(self, score: object) -> bool:
        return isinstance(score, ScoreRecord) and self.contains(score)

    def __iter__(self) -> Iterator[ScoreRecord]:
        return iter(tuple(self._scores))

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueScoreList):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self) -> str:
        return f"UniqueScoreList({self._scores!r})"
