from pydantic import BaseModel


class GuessRequest(BaseModel):
    guess: str


class GuessAccepted(BaseModel):
    slot: int | None = None  # None when the guess was empty and ignored


class NewPuzzleRequest(BaseModel):
    puzzle_id: str = ""  # malformed or empty → random puzzle


class GridRow(BaseModel):
    guess: str = ""
    letters: str = ""
    position: str = ""


class GridState(BaseModel):
    puzzle_label: str
    input_text: str = ""
    rows: list[GridRow]
