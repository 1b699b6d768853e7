from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Linear on purpose: clearing k rows at once is worth k single clears
    points_per_line: int = 10

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line
