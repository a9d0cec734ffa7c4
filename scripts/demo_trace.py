from __future__ import annotations

from horse_race.engine import WINNING_NUM, make_horses
from horse_race.sources import millis_since_epoch
from horse_race.trace import run_ticks_with_trace


def main() -> None:
    horses = make_horses()

    # Wall-clock ticks taken back to back share most of their low digits,
    # which is exactly what the interactive race sees between key presses.
    trace = run_ticks_with_trace(horses, (millis_since_epoch() for _ in range(WINNING_NUM)))

    for entry in trace.ticks:
        print(f"\nTick {entry.tick:2d} | value={entry.tick_value}")
        for index, (inc, advance) in enumerate(zip(entry.increments, entry.advances)):
            # Horses at or past the winning line are starred
            done = "*" if advance >= WINNING_NUM else " "
            print(f"  horse {index}  +{inc}  advance={advance:3d} {done}")

    if trace.winner is not None:
        print(f"\nhorse {trace.winner} won after {len(trace.ticks)} ticks")


if __name__ == "__main__":
    main()
