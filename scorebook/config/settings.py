"""Application settings with environment-driven configuration.

Why: Single place that reads env; every other layer receives settings
     via the composition root.
"""

import logging
import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    """

    # ===== Logging =====
    log_level: str = field(
        default_factory=lambda: os.getenv("SCOREBOOK_LOG_LEVEL", "WARNING").upper()
    )
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "SCOREBOOK_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    )

    # ===== Scores =====
    default_to_now: bool = field(
        default_factory=lambda: os.getenv("SCOREBOOK_DEFAULT_TO_NOW", "true").lower() == "true"
    )
    # When false, a score without --date is rejected instead of stamped with "now"

    def __post_init__(self) -> None:
        # unknown names would make logging.basicConfig raise ValueError
        level = str(self.log_level).upper()
        if level not in logging.getLevelNamesMapping():
            level = "WARNING"
        object.__setattr__(self, "log_level", level)
