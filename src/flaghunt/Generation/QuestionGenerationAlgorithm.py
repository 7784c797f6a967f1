from typing import Sequence
from loguru import logger

import random

from flaghunt.Catalog import CatalogError, MINIMUM_CATALOG_SIZE
from flaghunt.Classes.Country import Country
from flaghunt.Classes.Question import Question

DISTRACTOR_COUNT = MINIMUM_CATALOG_SIZE - 1

def generate_question(catalog: Sequence[Country], rng: random.Random) -> Question:
    """
    Picks a target and three distinct distractors, then shuffles them together.

    Distractors are drawn by rejection: a candidate is kept only when its code matches neither the target nor an already kept distractor.
    The loop only terminates when the catalog has enough distinct codes, so that is checked first.
    """

    if len({country.code for country in catalog}) < MINIMUM_CATALOG_SIZE:
        raise CatalogError(
            f"Cannot build a question from fewer than {MINIMUM_CATALOG_SIZE} distinct countries"
        )

    target = rng.choice(catalog)
    distractors: list[Country] = []

    while len(distractors) < DISTRACTOR_COUNT:
        candidate = rng.choice(catalog)
        if candidate.code == target.code:
            continue

        if any(distractor.code == candidate.code for distractor in distractors):
            continue

        distractors.append(candidate)

    options = [target, *distractors]
    rng.shuffle(options) # Fisher-Yates, unbiased

    logger.trace("Generated question for {} with options {}", target, [str(option) for option in options])
    return Question(target=target, options=tuple(options))
