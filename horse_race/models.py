from dataclasses import dataclass


@dataclass
class Horse:
    # Stable zero-based position in the field; also the number drawn on the track.
    index: int
    # Distance travelled. Only ever increased, once per tick.
    advance: int = 0
