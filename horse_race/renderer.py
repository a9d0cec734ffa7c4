from __future__ import annotations

from typing import Iterable, Sequence

from horse_race.engine import WINNING_NUM, apply_tick, has_winner, rank_horses
from horse_race.models import Horse
from horse_race.surface import OutputSurface

HORSE_COLORS = ("red", "green", "magenta", "blue", "cyan")
PROGRESS_CHAR = "_"
FINISH_LINE = "|"


def color_for(index: int) -> str:
    return HORSE_COLORS[index % len(HORSE_COLORS)]


def format_horse_line(horse: Horse) -> str:
    """
    Render one track: the progress run, the horse number, then padding up
    to the finish line marker.

    The marker sits in column WINNING_NUM; once a horse is at or past
    WINNING_NUM - 1 there is no room left for it and it is dropped.
    """
    line = f"{PROGRESS_CHAR * horse.advance}{horse.index}"
    until_finish = WINNING_NUM - 1 - horse.advance
    if until_finish > 0:
        line += " " * until_finish + FINISH_LINE
    return line


def winner_line(horse: Horse) -> str:
    return f"horse {horse.index} won!"


class RaceRenderer:
    """
    Owns the live race state and draws it onto an OutputSurface.

    One line is written per horse, in order, so the last rendering is
    always len(horses) lines tall.
    """

    def __init__(self, surface: OutputSurface, horses: list[Horse]) -> None:
        self.surface = surface
        self.horses = horses
        self.lines_written = 0

    def apply_tick(self, increments: Sequence[int]) -> None:
        apply_tick(self.horses, increments)

    @property
    def finished(self) -> bool:
        return has_winner(self.horses)

    def _write_horses(self, horses: Iterable[Horse]) -> int:
        count = 0
        for horse in horses:
            self.surface.write_line(format_horse_line(horse), color_for(horse.index))
            count += 1
        return count

    def render(self, by_rank: bool = False) -> list[Horse]:
        """
        Write one line per horse and return the horses in the order drawn.

        With by_rank=True (the sorted results view) the horses are drawn
        by rank, furthest first and ties by lower index. The first one drawn
        is the winner.
        """
        order = rank_horses(self.horses) if by_rank else list(self.horses)
        self.lines_written = self._write_horses(order)
        return order

    def erase_last_render(self, line_count: int | None = None) -> None:
        """
        Return to the start of the line, then move up and clear line_count
        lines. Defaults to the number of lines the last render wrote.
        """
        if line_count is None:
            line_count = self.lines_written
        self.surface.carriage_return()
        for _ in range(line_count):
            self.surface.cursor_up()
            self.surface.clear_line()
        self.lines_written = 0

    def render_results(self) -> Horse:
        """
        Replace the last rendering with the final ranking and announce the
        winner underneath in its own color.
        """
        self.erase_last_render()
        ranking = self.render(by_rank=True)
        winner = ranking[0]
        self.surface.write_line(winner_line(winner), color_for(winner.index))
        return winner
