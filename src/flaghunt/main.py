from typing import Callable, Optional
from loguru import logger

import argparse
import random
import sys

from flaghunt.CliParser import parser
from flaghunt.Catalog import CatalogError, resolve_catalog
from flaghunt.GameController import FactProvider, GameController
from flaghunt.FactProviders.Gemini import GeminiFactProvider
from flaghunt.FactProviders.Offline import OfflineFactProvider
from flaghunt.Classes.Country import Country
from flaghunt.Classes.GameState import GameState
from flaghunt.Display import render_fact, render_question, render_result

QUIT_ANSWERS = ("q", "quit", "exit")

logger.remove(0)

def choose_fact_provider(args: argparse.Namespace, catalog: tuple[Country, ...]) -> Optional[FactProvider]:
    if not args.fact:
        logger.info("Facts are disabled")
        return None

    if args.offline or not args.gemini_key:
        if not args.offline:
            logger.warning("No Gemini API key (use '--gemini-key' or GEMINI_API_KEY), falling back to offline facts")

        return OfflineFactProvider({country.name: country.code for country in catalog})

    return GeminiFactProvider(args.gemini_key, args.model, args.timeout)

def parse_choice(answer: str, option_count: int) -> Optional[int]:
    try:
        choice = int(answer.strip())
    except ValueError:
        return None

    if not 1 <= choice <= option_count:
        return None

    return choice - 1

def play(controller: GameController, rounds: Optional[int], fact_wait: float, read: Callable[[str], str] = input) -> None:
    controller.start()

    while True:
        snapshot = controller.snapshot()
        assert snapshot.state == GameState.PLAYING and snapshot.question

        print()
        print(render_question(snapshot))

        answer = read("Your answer (1-4, q to quit): ").strip().lower()
        if answer in QUIT_ANSWERS:
            return

        choice = parse_choice(answer, len(snapshot.question.options))
        if choice is None:
            print("Please pick a number between 1 and 4.")
            continue

        controller.submit_guess(snapshot.question.options[choice])
        snapshot = controller.snapshot()
        print(render_result(snapshot))

        if snapshot.fact_loading:
            print(render_fact(snapshot))
            controller.wait_for_fact(fact_wait)
            snapshot = controller.snapshot()

        fact_text = render_fact(snapshot)
        if fact_text and not snapshot.fact_loading:
            print(fact_text)

        if rounds is not None and snapshot.round >= rounds:
            return

        if read("Press Enter for the next flag (q to quit) ").strip().lower() in QUIT_ANSWERS:
            return

        controller.advance_to_next()

def main() -> None:
    args = parser.parse_args()

    debug_level: str = args.level.upper()
    logger.add(sys.stderr, level=debug_level)
    logger.add(
        args.logs_path,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}",
        level=debug_level
    )

    try:
        catalog = resolve_catalog(args.catalog, args.world)
    except CatalogError as e:
        logger.critical("Invalid country catalog: {}", e)
        sys.exit(1)

    logger.success("Loaded a catalog of {} countries", len(catalog))

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    fact_provider = choose_fact_provider(args, catalog)

    with GameController(catalog, fact_provider, rng) as controller:
        try:
            play(controller, args.rounds, args.fact_wait)
        except (KeyboardInterrupt, EOFError):
            print()

        stats = controller.snapshot().stats

    print()
    print(
        f"Final score: {stats.correct}/{stats.total} "
        f"({stats.accuracy * 100:.0f}%), best streak {stats.best_streak}"
    )

if __name__ == "__main__":
    main()
