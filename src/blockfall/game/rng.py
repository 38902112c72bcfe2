from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2**31

NUM_SELECTORS = 7

FORK_SALT = 0x2545F491


def lcg_hash(seed: int) -> int:
    return (LCG_MULTIPLIER * seed + LCG_INCREMENT) % LCG_MODULUS


@dataclass(frozen=True)
class PseudoRandomStream:
    """Immutable linear-congruential stream of piece selectors.

    ``advance`` returns a new stream and never touches this one, so a stream
    stored in a game state replays the same pieces every time it is used.
    """

    seed: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", int(self.seed) % LCG_MODULUS)

    @classmethod
    def from_clock(cls, clock: Callable[[], float] = time.time) -> "PseudoRandomStream":
        # Only impure entry point: millisecond component of the wall clock.
        millis = int(clock() * 1000) % 1000
        return cls(lcg_hash(millis))

    def advance(self) -> "PseudoRandomStream":
        return PseudoRandomStream(lcg_hash(self.seed))

    def fork(self) -> "PseudoRandomStream":
        """Side stream derived from this seed, off the main ``advance`` chain."""
        return PseudoRandomStream(lcg_hash(self.seed ^ FORK_SALT))

    def value(self) -> int:
        # seed == m - 1 would scale to 7
        return min((NUM_SELECTORS * self.seed) // (LCG_MODULUS - 1), NUM_SELECTORS - 1)
