"""Application ports package."""

from scorebook.application.ports.clock_port import ClockPort

__all__ = [
    "ClockPort",
]
