from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from horse_race.engine import MAX_ADVANCE, has_winner, rank_horses, step_tick
from horse_race.models import Horse


@dataclass(frozen=True)
class TickTrace:
    tick: int
    tick_value: int
    increments: tuple[int, ...]
    # AFTER the increments were applied
    advances: tuple[int, ...]
    finished: bool


@dataclass(frozen=True)
class RaceTrace:
    ticks: list[TickTrace]
    # None when the tick values ran out before anyone reached the line
    winner: int | None
    ranking: tuple[int, ...]
    final_advances: tuple[int, ...]


def run_ticks_with_trace(horses: list[Horse], tick_values: Iterable[int]) -> RaceTrace:
    """
    Replay a race from a sequence of tick values, returning a per-tick log.

    Stops at the first tick on which a horse reaches the winning line, or
    when tick_values is exhausted. Uses the same rules as the interactive
    race; nothing is drawn.
    """
    log: list[TickTrace] = []
    for t, value in enumerate(tick_values, start=1):
        increments = step_tick(horses, value, MAX_ADVANCE)
        log.append(
            TickTrace(
                tick=t,
                tick_value=value,
                increments=tuple(increments),
                advances=tuple(h.advance for h in horses),
                finished=has_winner(horses),
            )
        )
        if log[-1].finished:
            break

    ranking = rank_horses(horses)
    winner = ranking[0].index if has_winner(horses) else None
    return RaceTrace(
        ticks=log,
        winner=winner,
        ranking=tuple(h.index for h in ranking),
        final_advances=tuple(h.advance for h in horses),
    )
