from __future__ import annotations

from typing import Sequence

from horse_race.models import Horse

WINNING_NUM = 50
MAX_ADVANCE = 4
HORSE_COUNT = 7
# Increments are modelled as unsigned 32-bit values; the largest one is `radix`.
ADVANCE_LIMIT = 2**32 - 2


def distribute(tick: int, radix: int, n: int) -> list[int]:
    """
    Split one tick value into n per-horse increments.

    The tick is read as a number in base `radix`, least significant digit
    first. Horse i receives digit i plus one, so every increment lies in
    [1, radix] and every horse moves on every tick. Once the digits run out
    the remaining horses receive 1.

    Example (radix 4): 57 = 1 + 2*4 + 3*16 -> [2, 3, 4, 1, 1, ...]
    """
    if radix < 2:
        raise ValueError(f"radix must be >= 2 (got {radix})")
    if radix > ADVANCE_LIMIT:
        raise ValueError(f"radix must be <= {ADVANCE_LIMIT} (got {radix})")
    if n < 1:
        raise ValueError(f"n must be positive (got {n})")
    if tick < 0:
        raise ValueError(f"tick must be non-negative (got {tick})")

    increments: list[int] = []
    remaining = tick
    for _ in range(n):
        increments.append(remaining % radix + 1)
        remaining //= radix
    return increments


def make_horses(count: int = HORSE_COUNT) -> list[Horse]:
    return [Horse(index=i) for i in range(count)]


def apply_tick(horses: list[Horse], increments: Sequence[int]) -> None:
    """Add increments[i] to horses[i].advance for every horse."""
    if len(increments) != len(horses):
        raise ValueError(
            f"expected {len(horses)} increments, got {len(increments)}"
        )
    for horse, inc in zip(horses, increments):
        if inc < 0:
            raise ValueError(f"increment for horse {horse.index} is negative: {inc}")
        horse.advance += inc


def has_winner(horses: Sequence[Horse]) -> bool:
    return any(h.advance >= WINNING_NUM for h in horses)


def rank_horses(horses: Sequence[Horse]) -> list[Horse]:
    """
    Order horses by advance, furthest first.

    Ties keep their field order (sorted() is stable), so the lower index
    ranks first. The first element is the winner.
    """
    return sorted(horses, key=lambda h: h.advance, reverse=True)


def step_tick(horses: list[Horse], tick: int, radix: int = MAX_ADVANCE) -> list[int]:
    """
    Advance every horse by one tick and return the increments applied.
    """
    increments = distribute(tick, radix, len(horses))
    apply_tick(horses, increments)
    return increments
