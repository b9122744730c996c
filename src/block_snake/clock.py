"""Elapsed play time, counted in whole seconds."""

from __future__ import annotations


class TimeTracker:
    """An ``MM:SS`` counter advanced once per clock tick."""

    def __init__(self, minutes: int = 0, seconds: int = 0) -> None:
        if minutes < 0 or not 0 <= seconds < 60:
            raise ValueError("Expected minutes >= 0 and 0 <= seconds < 60.")
        self.minutes = minutes
        self.seconds = seconds

    @classmethod
    def from_text(cls, text: str) -> TimeTracker:
        """Build a tracker from its ``MM:SS`` display form."""
        try:
            mins, secs = (int(part) for part in text.split(":"))
        except ValueError:
            raise ValueError(f"Invalid time text: {text!r}") from None
        return cls(mins, secs)

    def advance(self) -> str:
        """Add one second and return the new display text."""
        if self.seconds == 59:
            self.minutes += 1
            self.seconds = 0
        else:
            self.seconds += 1
        return self.text

    def reset(self) -> None:
        self.minutes = 0
        self.seconds = 0

    @property
    def elapsed(self) -> int:
        """Total elapsed seconds."""
        return self.minutes * 60 + self.seconds

    @property
    def text(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.text
