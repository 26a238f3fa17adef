# scorebook/application/use_cases/record_score.py
from __future__ import annotations

import logging

from scorebook.application.dto.score_dto import AddScoreRequest, RemoveScoreRequest
from scorebook.application.ports.clock_port import ClockPort
from scorebook.domain.errors import DomainError, NullArgumentError
from scorebook.domain.score import ScoreRecord, format_timestamp
from scorebook.domain.score_list import UniqueScoreList
from scorebook.domain.types import Result
from scorebook.domain.value_objects import ScoreValue, Title

logger = logging.getLogger(__name__)


def build_score(title: str, value: str, date: str) -> ScoreRecord:
    """Turn raw text into a validated ScoreRecord (raises DomainError)."""
    return ScoreRecord.create(Title(title), ScoreValue.parse(value), date)


class RecordScore:
    """
    Application Use-Case adding a score to a contact's score list.
    Handles errors via Result[T, E]; domain errors never escape execute().
    """

    def __init__(
        self,
        scores: UniqueScoreList,
        clock: ClockPort | None = None,
        default_to_now: bool = True,
    ) -> None:
        self.scores = scores
        self.clock = clock
        self.default_to_now = default_to_now

    def execute(self, req: AddScoreRequest) -> Result[ScoreRecord, DomainError]:
        date = req.date
        if date is None:
            if not (self.default_to_now and self.clock):
                return Result.failure(NullArgumentError("date"))
            # typed dates are local wall-clock time
            date = format_timestamp(self.clock.now().astimezone())

        try:
            score = build_score(req.title, req.value, date)
            self.scores.add(score)
        except DomainError as ex:
            logger.info("rejected score %r: %s", req.title, ex)
            return Result.failure(ex)

        logger.debug("recorded score: %s", score)
        return Result.success(score)


class RemoveScore:
    """Use-Case removing a score that matches the request exactly."""

    def __init__(self, scores: UniqueScoreList) -> None:
        self.scores = scores

    def execute(self, req: RemoveScoreRequest) -> Result[ScoreRecord, DomainError]:
        try:
            score = build_score(req.title, req.value, req.date)
            self.scores.remove(score)
        except DomainError as ex:
            logger.info("could not remove score %r: %s", req.title, ex)
            return Result.failure(ex)

        logger.debug("removed score: %s", score)
        return Result.success(score)
