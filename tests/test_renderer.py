from horse_race.engine import WINNING_NUM
from horse_race.models import Horse
from horse_race.renderer import (
    FINISH_LINE,
    HORSE_COLORS,
    RaceRenderer,
    color_for,
    format_horse_line,
)
from horse_race.surface import InMemorySurface


def make_field(*advances):
    return [Horse(index=i, advance=a) for i, a in enumerate(advances)]


def test_palette_cycles_every_five_horses():
    assert [color_for(i) for i in range(7)] == [
        "red",
        "green",
        "magenta",
        "blue",
        "cyan",
        "red",
        "green",
    ]
    assert color_for(10) == HORSE_COLORS[0]


def test_track_is_progress_run_then_horse_number():
    line = format_horse_line(Horse(index=2, advance=5))
    assert line.startswith("_____2 ")
    assert line == "_____2" + " " * 44 + FINISH_LINE


def test_horse_at_start_gets_full_padding():
    assert format_horse_line(Horse(index=0, advance=0)) == "0" + " " * 49 + "|"


def test_finish_marker_lines_up_across_tracks():
    widths = {len(format_horse_line(Horse(index=3, advance=a))) for a in range(WINNING_NUM - 1)}
    assert widths == {WINNING_NUM + 1}


def test_marker_is_dropped_at_or_past_the_line():
    assert format_horse_line(Horse(index=4, advance=48)) == "_" * 48 + "4 |"
    assert format_horse_line(Horse(index=4, advance=49)) == "_" * 49 + "4"
    assert format_horse_line(Horse(index=4, advance=50)) == "_" * 50 + "4"
    assert format_horse_line(Horse(index=4, advance=53)) == "_" * 53 + "4"


def test_render_writes_one_colored_line_per_horse():
    surface = InMemorySurface()
    renderer = RaceRenderer(surface, make_field(0, 3, 1, 0, 0, 2, 7))

    renderer.render()

    assert renderer.lines_written == 7
    assert surface.cursor_row == 7
    assert [color for _, color in surface.rows] == [color_for(i) for i in range(7)]
    assert surface.rows[1][0].startswith("___1 ")
    assert surface.rows[6][0].startswith("_______6 ")


def test_sorted_render_uses_rank_order():
    surface = InMemorySurface()
    renderer = RaceRenderer(surface, make_field(12, 9, 12))

    order = renderer.render(by_rank=True)

    assert [h.index for h in order] == [0, 2, 1]
    assert [text.rstrip(" |") for text in surface.lines] == [
        "_" * 12 + "0",
        "_" * 12 + "2",
        "_" * 9 + "1",
    ]
    # Colors follow the horse, not the row
    assert [color for _, color in surface.rows] == ["red", "magenta", "green"]


def test_erase_then_render_returns_cursor_to_same_place():
    surface = InMemorySurface()
    renderer = RaceRenderer(surface, make_field(0, 0, 0, 0, 0, 0, 0))
    renderer.render()
    after_first = surface.cursor_row

    renderer.erase_last_render(7)
    assert surface.cursor_row == 0
    assert surface.lines == []

    renderer.apply_tick([1] * 7)
    renderer.render()

    assert surface.cursor_row == after_first
    assert len(surface.rows) == 7
    assert all(text.startswith("_") for text in surface.lines)


def test_erase_keeps_output_above_the_race():
    surface = InMemorySurface()
    surface.write_line("press enter")
    renderer = RaceRenderer(surface, make_field(0, 0))
    renderer.render()

    renderer.erase_last_render()

    assert surface.lines == ["press enter"]
    assert surface.cursor_row == 1


def test_results_replace_race_and_announce_winner():
    surface = InMemorySurface()
    renderer = RaceRenderer(surface, make_field(40, 51, 51, 3))
    renderer.render()

    winner = renderer.render_results()

    assert winner.index == 1
    assert len(surface.rows) == 5
    assert surface.lines[0] == "_" * 51 + "1"
    assert surface.lines[1] == "_" * 51 + "2"
    assert surface.rows[-1] == ("horse 1 won!", "green")
