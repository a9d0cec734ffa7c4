from __future__ import annotations

import argparse
import itertools
import sys
from typing import Iterable

from horse_race.engine import make_horses
from horse_race.logging import get_logger
from horse_race.models import Horse
from horse_race.race import run_race
from horse_race.renderer import format_horse_line, winner_line
from horse_race.sources import StdinTrigger, millis_since_epoch
from horse_race.surface import SurfaceUnavailableError, open_terminal_surface
from horse_race.trace import RaceTrace, run_ticks_with_trace

logger = get_logger(__name__)


def _render_trace_report(trace: RaceTrace) -> str:
    out: list[str] = []
    for entry in trace.ticks:
        incs = " ".join(f"+{i}" for i in entry.increments)
        advances = " ".join(f"{a:2d}" for a in entry.advances)
        mark = " *" if entry.finished else ""
        out.append(f"Tick {entry.tick:3d} | value={entry.tick_value} | {incs} | {advances}{mark}")

    if trace.winner is None:
        out.append("(No horse reached the finish line. Try increasing --max-ticks.)")
        return "\n".join(out) + "\n"

    out.append("")
    out.append("Results")
    for place, index in enumerate(trace.ranking, start=1):
        horse = Horse(index=index, advance=trace.final_advances[index])
        out.append(f"  {place}: {format_horse_line(horse)}")
    out.append(winner_line(Horse(index=trace.winner)))
    return "\n".join(out) + "\n"


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        surface = open_terminal_surface()
    except SurfaceUnavailableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        run_race(surface, StdinTrigger(), millis_since_epoch)
    except OSError as e:
        logger.exception("Race aborted: output surface failed")
        print(f"ERROR: output failed: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_trace(args: argparse.Namespace) -> int:
    max_ticks = args.max_ticks
    if max_ticks < 1:
        print("ERROR: --max-ticks must be positive.", file=sys.stderr)
        return 2

    tick_values: Iterable[int]
    if args.tick_value is not None:
        if args.tick_value < 0:
            print("ERROR: --tick-value must be non-negative.", file=sys.stderr)
            return 2
        tick_values = itertools.repeat(args.tick_value, max_ticks)
    else:
        tick_values = (millis_since_epoch() for _ in range(max_ticks))

    trace = run_ticks_with_trace(make_horses(), tick_values)
    sys.stdout.write(_render_trace_report(trace))
    return 0 if trace.winner is not None else 2


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="horse_race",
        description=(
            "Horse Race: terminal race animation.\n"
            "\n"
            "Press Enter to move every horse; first past the line wins."
        ),
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run the interactive race on this terminal.")
    run.set_defaults(func=_cmd_run)

    trace = sub.add_parser("trace", help="Replay a race without a terminal and print every tick.")
    trace.add_argument(
        "--tick-value",
        type=int,
        default=None,
        help="Use this tick value for every tick instead of the wall clock.",
    )
    trace.add_argument("--max-ticks", type=int, default=100, help="Safety cap: max ticks to simulate.")
    trace.set_defaults(func=_cmd_trace)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
