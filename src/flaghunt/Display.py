from typing import Optional
from loguru import logger

import countryflag

from flaghunt.Classes.Country import Country
from flaghunt.Classes.GameSnapshot import GameSnapshot
from flaghunt.Classes.GameStats import GameStats

WHITE_FLAG = "🏳"

def flag_emoji(country: Country) -> str:
    try:
        flag = countryflag.getflag([country.name])
    except Exception:
        logger.trace("countryflag lookup failed for {}, using a white flag", country)
        return WHITE_FLAG

    return flag or WHITE_FLAG

def render_header(stats: GameStats) -> str:
    return (
        f"✔ {stats.correct}   ✘ {stats.wrong}   "
        f"streak {stats.streak} (best {stats.best_streak})   "
        f"accuracy {stats.accuracy * 100:.0f}%"
    )

def render_question(snapshot: GameSnapshot) -> str:
    assert snapshot.question

    lines = [
        render_header(snapshot.stats),
        "",
        f"Flag #{snapshot.round}:  {flag_emoji(snapshot.question.target)}",
        f"({snapshot.question.target.flag_url})",
        "",
    ]

    for position, option in enumerate(snapshot.question.options):
        lines.append(f"  {position + 1}. {option.name}")

    return "\n".join(lines)

def render_result(snapshot: GameSnapshot) -> str:
    assert snapshot.question

    target = snapshot.question.target
    if snapshot.is_correct:
        return f"Correct! That is the flag of {target.name}."

    selected: Optional[Country] = snapshot.selected_option
    guessed = selected.name if selected else "nothing"
    return f"Wrong, you picked {guessed}. That is the flag of {target.name}."

def render_fact(snapshot: GameSnapshot) -> Optional[str]:
    if snapshot.fact_loading:
        return "Looking up a fact..."

    if snapshot.fact is None:
        return None

    assert snapshot.question
    return f"Did you know? ({snapshot.question.target.name})\n  {snapshot.fact}"
