import threading

import pytest

from flaghunt.Classes.Country import Country

SMALL_CATALOG = (
    Country("aa", "Aland"),
    Country("bb", "Borduria"),
    Country("cc", "Carpania"),
    Country("dd", "Drusselstein"),
    Country("ee", "Elbonia"),
)

class StaticFacts:
    def __init__(self, text="Flags are fun.") -> None:
        self.text = text
        self.calls: list[tuple[str, bool]] = []

    def fetch_fact(self, country_name, was_correct):
        self.calls.append((country_name, was_correct))
        return self.text

class FailingFacts:
    def fetch_fact(self, country_name, was_correct):
        raise RuntimeError("service unavailable")

class BlockingFacts:
    def __init__(self) -> None:
        self.release = threading.Event()

    def fetch_fact(self, country_name, was_correct):
        self.release.wait(5)
        return f"Late fact about {country_name}"

@pytest.fixture
def catalog():
    return SMALL_CATALOG

@pytest.fixture
def static_facts():
    return StaticFacts()

@pytest.fixture
def failing_facts():
    return FailingFacts()

@pytest.fixture
def blocking_facts():
    facts = BlockingFacts()
    yield facts
    facts.release.set()
