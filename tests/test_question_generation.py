import random

import pytest

from flaghunt.Catalog import CatalogError, DEFAULT_CATALOG
from flaghunt.Classes.Country import Country
from flaghunt.Generation.QuestionGenerationAlgorithm import generate_question

@pytest.mark.parametrize("seed", range(50))
def test_question_has_four_unique_options_including_target(catalog, seed):
    question = generate_question(catalog, random.Random(seed))

    codes = [option.code for option in question.options]
    assert len(codes) == 4
    assert len(set(codes)) == 4
    assert question.target in question.options

def test_same_seed_gives_same_sequence():
    first, second = random.Random(1234), random.Random(1234)

    questions_a = [generate_question(DEFAULT_CATALOG, first) for _ in range(20)]
    questions_b = [generate_question(DEFAULT_CATALOG, second) for _ in range(20)]

    assert questions_a == questions_b

def test_minimal_catalog_uses_every_country(catalog):
    minimal = catalog[:4]
    question = generate_question(minimal, random.Random(7))

    assert sorted(option.code for option in question.options) == sorted(c.code for c in minimal)

def test_options_are_shuffled():
    rng = random.Random(3)
    positions = {
        question.options.index(question.target)
        for question in (generate_question(DEFAULT_CATALOG, rng) for _ in range(100))
    }

    assert positions == {0, 1, 2, 3}

def test_too_small_catalog_raises_instead_of_looping(catalog):
    with pytest.raises(CatalogError):
        generate_question(catalog[:3], random.Random(0))

def test_duplicate_codes_do_not_count_as_distinct():
    catalog = [
        Country("aa", "Aland"),
        Country("aa", "Aland again"),
        Country("bb", "Borduria"),
        Country("cc", "Carpania"),
    ]

    with pytest.raises(CatalogError):
        generate_question(catalog, random.Random(0))
