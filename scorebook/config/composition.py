import logging

from scorebook.application.ports.clock_port import ClockPort
from scorebook.application.use_cases.record_score import RecordScore, RemoveScore
from scorebook.config.settings import AppSettings
from scorebook.domain.score_list import UniqueScoreList
from scorebook.infrastructure.time.system_clock import SystemClock


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


def build_clock() -> ClockPort:
    """Build clock adapter for time operations."""
    return SystemClock()


def build_record_score_use_case(
    scores: UniqueScoreList | None = None, settings: AppSettings | None = None
) -> RecordScore:
    settings = settings or AppSettings()
    return RecordScore(
        scores=scores if scores is not None else UniqueScoreList(),
        clock=build_clock(),
        default_to_now=settings.default_to_now,
    )


def build_remove_score_use_case(scores: UniqueScoreList) -> RemoveScore:
    return RemoveScore(scores=scores)
