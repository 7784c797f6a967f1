from dataclasses import dataclass

@dataclass(frozen=True)
class GameStats:
    correct: int = 0
    wrong: int = 0
    streak: int = 0
    best_streak: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.wrong

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total != 0 else 0.0

    def record(self, is_correct: bool) -> "GameStats":
        streak = self.streak + 1 if is_correct else 0
        return GameStats(
            correct=self.correct + (1 if is_correct else 0),
            wrong=self.wrong + (0 if is_correct else 1),
            streak=streak,
            best_streak=max(self.best_streak, streak)
        )
