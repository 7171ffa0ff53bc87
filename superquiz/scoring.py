"""Per-game score and streak bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass

from superquiz.models import CORRECT, PARTIAL, Feedback

CORRECT_POINTS = 10
PARTIAL_POINTS = 5
# A finished quiz at or above this percentage counts as passed
PASS_PERCENTAGE = 60

MODES = ("quiz", "spell", "meaning")


@dataclass
class GameSession:
    mode: str  # quiz | spell | meaning
    score: int = 0
    streak: int = 0
    max_streak: int = 0
    total_answered: int = 0
    correct_count: int = 0
    index: int = 0

    def _hit(self, points: int) -> None:
        self.score += points
        self.correct_count += 1
        self.streak += 1
        self.max_streak = max(self.max_streak, self.streak)

    def record(self, feedback: Feedback) -> int:
        """Apply a graded answer. Returns the points awarded."""
        self.total_answered += 1
        if feedback.verdict == CORRECT:
            self._hit(CORRECT_POINTS)
            return CORRECT_POINTS
        self.streak = 0
        if feedback.verdict == PARTIAL:
            self.score += PARTIAL_POINTS
            return PARTIAL_POINTS
        return 0

    def record_choice(self, is_correct: bool) -> int:
        """Apply a multiple-choice answer."""
        self.total_answered += 1
        if is_correct:
            self._hit(CORRECT_POINTS)
            return CORRECT_POINTS
        self.streak = 0
        return 0

    def advance(self, n_items: int) -> int:
        """Move to the next item, wrapping back to the first after the last."""
        if n_items <= 0 or self.index >= n_items - 1:
            self.index = 0
        else:
            self.index += 1
        return self.index

    def summary(self) -> dict:
        percentage = (
            round(self.correct_count / self.total_answered * 100)
            if self.total_answered else 0
        )
        return {
            "mode": self.mode,
            "score": self.score,
            "streak": self.streak,
            "max_streak": self.max_streak,
            "total_answered": self.total_answered,
            "correct_count": self.correct_count,
            "incorrect_count": self.total_answered - self.correct_count,
            "percentage": percentage,
            "passed": percentage >= PASS_PERCENTAGE,
        }
