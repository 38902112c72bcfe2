from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScoringRules:
    line_clear_score: int = 100
    points_per_level: int = 1000
    starting_level: int = 1

    def level_for(self, score: int) -> int:
        return score // self.points_per_level + self.starting_level

    def update(self, score: int, high_score: int, cleared: int) -> Tuple[int, int, int]:
        """Return (score, level, high_score) after clearing ``cleared`` lines."""
        new_score = score + cleared * self.line_clear_score
        return new_score, self.level_for(new_score), max(new_score, high_score)
