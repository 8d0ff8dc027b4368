"""Per-puzzle session state: active puzzle, slot counter, live tasks."""

import random
import re
from dataclasses import dataclass, field

from . import config
from .task import GuessTask

_DIGITS_RE = re.compile(r"[0-9]+")


def resolve_puzzle_id(
    text: str, rng: random.Random | None = None, max_id: int = config.MAX_PUZZLE_ID
) -> int:
    """Parse a user-supplied puzzle id.

    Anything that is not a run of decimal digits with a positive value is
    replaced by a random id in [1, max_id).  Surrounding whitespace is ignored.
    """
    text = text.strip()
    if _DIGITS_RE.fullmatch(text):
        value = int(text)
        if value > 0:
            return value
    return (rng or random).randrange(1, max_id)


@dataclass
class PuzzleSession:
    current_puzzle_id: int
    next_slot: int = 0
    live_tasks: set[GuessTask] = field(default_factory=set)

    def allocate_slot(self) -> int:
        slot = self.next_slot
        self.next_slot += 1
        return slot

    def replace_puzzle(self, puzzle_id: int) -> list[GuessTask]:
        """Switch puzzles. Returns the tasks that were cancelled."""
        stale = list(self.live_tasks)
        for task in stale:
            task.cancel()
        self.live_tasks.clear()
        self.next_slot = 0
        self.current_puzzle_id = puzzle_id
        return stale
