# backend/tiles.py

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

MAX_COUNT = 8


class TileState(IntEnum):
    """
    Sentinel tile values. Revealed tiles hold their adjacent mine count (0-8),
    so every sentinel is negative.
    """
    HIDDEN = -1
    FLAGGED = -2
    MINE = -3


def is_revealed_count(value) -> bool:
    return value is not None and 0 <= value <= MAX_COUNT


class Outcome(Enum):
    COUNT = "count"
    MINE_HIT = "mine_hit"
    INVALID = "invalid"
    NO_RESULT = "no_result"


@dataclass(frozen=True)
class Result:
    """
    Outcome of an uncover, also used as the feedback the host reports
    back to an agent.

    Only COUNT results carry a value; the other outcomes are singletons
    (Result.MINE_HIT, Result.INVALID, NO_RESULT).
    """
    outcome: Outcome
    value: Optional[int] = None

    @classmethod
    def count(cls, n: int) -> "Result":
        if not is_revealed_count(n):
            raise ValueError(f"Adjacent mine count must be in [0, {MAX_COUNT}], got {n}")
        return cls(Outcome.COUNT, n)

    @property
    def is_count(self) -> bool:
        return self.outcome is Outcome.COUNT

    @property
    def is_mine_hit(self) -> bool:
        return self.outcome is Outcome.MINE_HIT

    @property
    def is_invalid(self) -> bool:
        return self.outcome is Outcome.INVALID

    def to_json(self):
        if self.is_count:
            return self.value
        return self.outcome.value

    def __repr__(self):
        if self.is_count:
            return f"Result.count({self.value})"
        return f"Result.{self.outcome.name}"


Result.MINE_HIT = Result(Outcome.MINE_HIT)
Result.INVALID = Result(Outcome.INVALID)
NO_RESULT = Result(Outcome.NO_RESULT)
