"""Ticket record stored in board columns."""

from __future__ import annotations

from dataclasses import dataclass

MAX_POINTS = 255


@dataclass(frozen=True)
class Ticket:
    """A unit of work: title, free-text body and a story point estimate.

    Points are an unsigned 8-bit value (0-255). Tickets cannot be edited
    once created.
    """

    title: str
    body: str = ""
    points: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.points, int) or isinstance(self.points, bool):
            raise ValueError(f"points must be an integer, got {type(self.points).__name__}")
        if not 0 <= self.points <= MAX_POINTS:
            raise ValueError(f"points must be between 0 and {MAX_POINTS}, got {self.points}")
