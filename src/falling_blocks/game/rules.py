from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Indexed by rows cleared at once, multiplied by the level
    line_clear_scores: tuple[int, ...] = (0, 40, 100, 300, 1200)
    hard_drop_points: int = 2
    soft_drop_points: int = 1
    lines_per_level: int = 10
    base_drop_interval_ms: int = 1000
    drop_interval_step_ms: int = 100
    min_drop_interval_ms: int = 100

    def __post_init__(self) -> None:
        if len(self.line_clear_scores) < 2:
            raise ValueError("line_clear_scores needs an entry for at least one row")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.min_drop_interval_ms <= 0 or self.base_drop_interval_ms < self.min_drop_interval_ms:
            raise ValueError("drop intervals must be positive and base >= min")

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        assert lines >= 0, "negative line count"
        if lines >= len(self.line_clear_scores):
            return 0
        return self.line_clear_scores[lines] * level

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def drop_interval_for_level(self, level: int) -> int:
        interval = self.base_drop_interval_ms - (level - 1) * self.drop_interval_step_ms
        return max(self.min_drop_interval_ms, interval)
