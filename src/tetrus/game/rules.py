from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ScoringRules:
    # Points for clearing 1, 2, 3 or 4 rows at once, before the level multiplier
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)
    lines_per_level: int = 10

    def score_for_lines(self, lines: int, level: int = 0) -> int:
        if not 1 <= lines <= len(self.line_clear_scores):
            return 0
        return self.line_clear_scores[lines - 1] * (level + 1)


@dataclass
class Score:
    rules: ScoringRules = field(default_factory=ScoringRules)
    points: int = 0
    level: int = 0
    total_lines_cleared: int = 0

    def update(self, n_lines_cleared: int) -> bool:
        """Account for one settled piece. Returns True on a level up."""
        if n_lines_cleared <= 0:
            return False
        self.points += self.rules.score_for_lines(n_lines_cleared, self.level)
        self.total_lines_cleared += n_lines_cleared
        new_level = self.total_lines_cleared // self.rules.lines_per_level
        did_level_up = new_level > self.level
        self.level = new_level
        return did_level_up

    def block_drop_delay(self) -> float:
        """Seconds between gravity drops (Tetris marathon curve)."""
        return (0.8 - (self.level - 1) * 0.007) ** (self.level - 1)
