"""Display sink contract and the in-memory guess table that implements it."""

from enum import Enum
from typing import Protocol

from .models import GridRow, GridState


class Column(str, Enum):
    GUESS = "guess"
    LETTERS = "letters"
    POSITION = "position"


class DisplaySink(Protocol):
    """What the controller needs from a view. Holds no guess state of its own."""

    def set_cell(self, slot: int, column: Column, value: str) -> None: ...

    def ensure_row_count(self, n: int) -> None: ...

    def reset_grid(self, default_row_count: int) -> None: ...

    def set_puzzle_label(self, text: str) -> None: ...

    def clear_input_field(self) -> None: ...


class GuessGrid:
    """Table model: one row of three string cells per slot."""

    def __init__(self, default_row_count: int = 0):
        self.rows: list[dict[Column, str]] = []
        self.puzzle_label = ""
        self.input_text = ""
        self.reset_grid(default_row_count)

    def set_cell(self, slot: int, column: Column, value: str) -> None:
        self.ensure_row_count(slot + 1)
        self.rows[slot][column] = value

    def ensure_row_count(self, n: int) -> None:
        while len(self.rows) < n:
            self.rows.append({c: "" for c in Column})

    def reset_grid(self, default_row_count: int) -> None:
        self.rows = []
        self.ensure_row_count(default_row_count)

    def set_puzzle_label(self, text: str) -> None:
        self.puzzle_label = text

    def clear_input_field(self) -> None:
        self.input_text = ""

    def snapshot(self) -> GridState:
        return GridState(
            puzzle_label=self.puzzle_label,
            input_text=self.input_text,
            rows=[
                GridRow(
                    guess=row[Column.GUESS],
                    letters=row[Column.LETTERS],
                    position=row[Column.POSITION],
                )
                for row in self.rows
            ],
        )
