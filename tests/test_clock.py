"""Tests for the TimeTracker module."""

import pytest

from block_snake.clock import TimeTracker


class TestTimeTracker:
    def test_starts_at_zero(self):
        assert TimeTracker().text == "00:00"

    def test_advance_one_second(self):
        clock = TimeTracker()
        assert clock.advance() == "00:01"

    def test_minute_rollover(self):
        clock = TimeTracker.from_text("00:59")
        assert clock.advance() == "01:00"

    def test_rollover_past_ten_minutes(self):
        clock = TimeTracker(9, 59)
        clock.advance()
        assert clock.text == "10:00"

    def test_many_advances(self):
        clock = TimeTracker()
        for _ in range(125):
            clock.advance()
        assert clock.text == "02:05"
        assert clock.elapsed == 125

    def test_reset(self):
        clock = TimeTracker(3, 12)
        clock.reset()
        assert str(clock) == "00:00"

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            TimeTracker(0, 60)
        with pytest.raises(ValueError):
            TimeTracker(-1, 0)

    def test_invalid_text(self):
        with pytest.raises(ValueError, match="Invalid time text"):
            TimeTracker.from_text("12")
        with pytest.raises(ValueError, match="Invalid time text"):
            TimeTracker.from_text("aa:bb")
