from typing import Optional, Protocol, Sequence
from loguru import logger
from threading import Lock
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError

import random

from flaghunt.Catalog import validate_catalog
from flaghunt.Generation.QuestionGenerationAlgorithm import generate_question
from flaghunt.Classes.Country import Country
from flaghunt.Classes.GameSnapshot import GameSnapshot
from flaghunt.Classes.GameState import GameState
from flaghunt.Classes.GameStats import GameStats
from flaghunt.Classes.Question import Question

FALLBACK_FACT = "This country is full of history and culture waiting to be discovered!"

class FactProvider(Protocol):
    def fetch_fact(self, country_name: str, was_correct: bool) -> Optional[str]:
        ...

class GameController:
    """
    Owns the state of one game session.

    LOADING -> PLAYING on `start`, PLAYING -> RESULT on `submit_guess`, RESULT -> PLAYING on `advance_to_next`.
    Actions arriving in any other state are ignored.

    Each guess issues one fact request on a background worker, tagged with the round it belongs to.
    A fact for a round that is no longer current is dropped.
    """

    def __init__(
        self,
        catalog: Sequence[Country],
        fact_provider: Optional[FactProvider],
        rng: Optional[random.Random] = None
    ) -> None:
        self.catalog: tuple[Country, ...] = validate_catalog(catalog)
        self.fact_provider: Optional[FactProvider] = fact_provider
        self.rng: random.Random = rng or random.Random()

        self._lock = Lock()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fact")
        self._pending: Optional[Future] = None

        self._state: GameState = GameState.LOADING
        self._question: Optional[Question] = None
        self._selected_option: Optional[Country] = None
        self._stats: GameStats = GameStats()
        self._fact: Optional[str] = None
        self._fact_loading: bool = False
        self._round: int = 0

    def __enter__(self) -> "GameController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _next_question(self) -> None:
        # Caller holds the lock
        self._question = generate_question(self.catalog, self.rng)
        self._selected_option = None
        self._fact = None
        self._fact_loading = False
        self._round += 1
        self._state = GameState.PLAYING

        logger.info("Round {}: the target is {}", self._round, self._question.target)

    def start(self) -> bool:
        with self._lock:
            if self._state != GameState.LOADING:
                logger.debug("Ignoring start while {}", self._state.value)
                return False

            self._next_question()
            return True

    def submit_guess(self, country: Country) -> bool:
        with self._lock:
            if self._state != GameState.PLAYING or self._question is None:
                logger.debug("Ignoring guess {} while {}", country, self._state.value)
                return False

            question = self._question
            is_correct = question.is_target(country)

            self._selected_option = country
            self._state = GameState.RESULT
            self._stats = self._stats.record(is_correct)

            logger.info(
                "Round {}: guessed {} ({})",
                self._round,
                country,
                is_correct and "correct" or "wrong"
            )

            if self.fact_provider is None:
                return True

            self._fact_loading = True
            issued_round = self._round

        self._pending = self._executor.submit(self._fetch_fact, issued_round, question.target.name, is_correct)
        return True

    def advance_to_next(self) -> bool:
        with self._lock:
            if self._state != GameState.RESULT:
                logger.debug("Ignoring advance while {}", self._state.value)
                return False

            self._next_question()
            return True

    def _fetch_fact(self, issued_round: int, country_name: str, was_correct: bool) -> None:
        assert self.fact_provider

        try:
            fact = self.fact_provider.fetch_fact(country_name, was_correct)
        except Exception:
            logger.exception("The fact provider failed for {}", country_name)
            fact = None

        with self._lock:
            if issued_round != self._round:
                logger.debug("Discarding fact for round {} (now on round {})", issued_round, self._round)
                return

            self._fact = fact or FALLBACK_FACT
            self._fact_loading = False

    def wait_for_fact(self, timeout: Optional[float] = None) -> bool:
        """
        Blocks until the last fact request has been applied or discarded.

        Returns False when it is still running after `timeout` seconds.
        """

        pending = self._pending
        if pending is None:
            return True

        try:
            pending.result(timeout=timeout)
        except TimeoutError:
            logger.warning("The fact is taking longer than {} seconds", timeout)
            return False

        return True

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                state=self._state,
                question=self._question,
                selected_option=self._selected_option,
                stats=self._stats,
                fact=self._fact,
                fact_loading=self._fact_loading,
                round=self._round
            )
