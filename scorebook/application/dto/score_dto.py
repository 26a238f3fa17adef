# scorebook/application/dto/score_dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AddScoreRequest:
    """
    DTO for recording a score from raw user input.

    - title: score name, validated into a Title
    - value: numeric text, validated into a ScoreValue
    - date:  `yyyy-MM-dd HH:mm`; None means "now" when the use case allows it
    """

    title: str
    value: str
    date: str | None = None


@dataclass(frozen=True)
class RemoveScoreRequest:
    """DTO identifying a score to remove; all fields required."""

    title: str
    value: str
    date: str
