from dataclasses import dataclass

from flaghunt.Classes.Country import Country

@dataclass(frozen=True)
class Question:
    """
    One round of the quiz.

    `options` always holds the target plus three distractors, each code appearing once.
    """

    target: Country
    options: tuple[Country, ...]

    def is_target(self, country: Country) -> bool:
        return country.code == self.target.code
