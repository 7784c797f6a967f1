from dataclasses import dataclass
from typing import Optional

from flaghunt.Classes.Country import Country
from flaghunt.Classes.GameState import GameState
from flaghunt.Classes.GameStats import GameStats
from flaghunt.Classes.Question import Question

@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of the controller handed to the presentation layer.

    `round` identifies the active question; it is 0 while loading.
    """

    state: GameState
    question: Optional[Question]
    selected_option: Optional[Country]
    stats: GameStats
    fact: Optional[str]
    fact_loading: bool
    round: int

    @property
    def is_correct(self) -> Optional[bool]:
        if self.question is None or self.selected_option is None:
            return None

        return self.question.is_target(self.selected_option)
