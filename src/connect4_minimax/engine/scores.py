"""
Score constants and the tagged value passed between search levels.

Numeric ranges:
    0        neutral
    +-1      one open three (per window)
    +-100    realized four-in-a-row, sign gives the winner
    +-1000   alpha-beta cutoff sentinel, not an evaluation
    +-100000 initial alpha/beta window, never returned
"""

import enum
from dataclasses import dataclass


SCORE_THREE = 1
SCORE_WIN = 100
PRUNE_SENTINEL = 1000
SCORE_BOUND = 100000

# Per-column bookkeeping for columns never searched (int32 extremes)
UNVISITED_MAX = -2**31
UNVISITED_MIN = 2**31 - 1


class ScoreKind(enum.Enum):
    EVALUATED = "evaluated"
    TERMINAL = "terminal"
    PRUNED = "pruned"


@dataclass(frozen=True)
class SearchValue:
    """
    Result of one search node.

    `numeric` is what the parent compares against its bounds. A pruned node
    carries the +-1000 sentinel there, so a parent cannot tell it apart from
    an evaluated score by value alone; `kind` keeps the distinction.
    """
    kind: ScoreKind
    numeric: int

    @classmethod
    def leaf(cls, evaluation: int) -> "SearchValue":
        if abs(evaluation) == SCORE_WIN:
            return cls(ScoreKind.TERMINAL, evaluation)
        return cls(ScoreKind.EVALUATED, evaluation)

    @classmethod
    def pruned(cls, sign: int) -> "SearchValue":
        return cls(ScoreKind.PRUNED, sign * PRUNE_SENTINEL)

    @classmethod
    def bound(cls, value: int) -> "SearchValue":
        return cls(ScoreKind.EVALUATED, value)

    @property
    def is_terminal(self) -> bool:
        return self.kind is ScoreKind.TERMINAL

    @property
    def is_pruned(self) -> bool:
        return self.kind is ScoreKind.PRUNED


def in_search_window(value: int) -> bool:
    """True for values the bound update accepts (strictly inside +-100000)."""
    return -SCORE_BOUND < value < SCORE_BOUND
