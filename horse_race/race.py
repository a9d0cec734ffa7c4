from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from horse_race.engine import HORSE_COUNT, MAX_ADVANCE, distribute, make_horses, rank_horses
from horse_race.logging import get_logger
from horse_race.models import Horse
from horse_race.renderer import RaceRenderer
from horse_race.sources import TickSource, Trigger, millis_since_epoch
from horse_race.surface import OutputSurface

logger = get_logger(__name__)


class RaceStatus(str, Enum):
    RUNNING = "RUNNING"
    FINISHED = "FINISHED"


@dataclass(frozen=True)
class RaceResult:
    winner: int
    ranking: tuple[Horse, ...]
    ticks: int


def run_race(
    surface: OutputSurface,
    trigger: Trigger,
    tick_source: TickSource = millis_since_epoch,
    horse_count: int = HORSE_COUNT,
) -> RaceResult:
    """
    Run one race to completion on `surface`.

    Ordering per tick (never reordered):
      trigger -> tick value -> distribute -> apply -> erase -> render

    Any OSError raised by the surface propagates: the display is assumed
    unusable and the race is abandoned.
    """
    horses = make_horses(horse_count)
    renderer = RaceRenderer(surface, horses)
    status = RaceStatus.RUNNING
    ticks = 0

    logger.info("Race started with %d horses", len(horses))
    renderer.render()

    while status is RaceStatus.RUNNING:
        trigger.wait()
        if trigger.echoes_line:
            surface.cursor_up()

        tick = tick_source()
        increments = distribute(tick, MAX_ADVANCE, len(horses))
        renderer.apply_tick(increments)
        ticks += 1
        logger.debug(
            "tick %d value=%d increments=%s advances=%s",
            ticks,
            tick,
            increments,
            [h.advance for h in horses],
        )

        renderer.erase_last_render()
        renderer.render()

        if renderer.finished:
            status = RaceStatus.FINISHED

    winner = renderer.render_results()
    logger.info("Horse %d won after %d ticks", winner.index, ticks)
    return RaceResult(
        winner=winner.index,
        ranking=tuple(rank_horses(horses)),
        ticks=ticks,
    )
