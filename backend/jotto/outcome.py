"""Interpretation of raw scoring-service lines into guess outcomes."""

import re
from dataclasses import dataclass
from typing import Literal

OutcomeKind = Literal[
    "win", "scored", "format_error", "dictionary_error", "cancelled", "transport_failure"
]


@dataclass(frozen=True)
class GuessOutcome:
    kind: OutcomeKind
    letter_matches: int | None = None  # only set for "scored"
    position_matches: int | None = None  # only set for "scored"
    detail: str = ""


WIN = GuessOutcome(kind="win")
CANCELLED = GuessOutcome(kind="cancelled")

FORMAT_ERROR_TEXT = "Incorrectly formatted request"
DICTIONARY_ERROR_TEXT = "Invalid guess."
FAILURE_TEXT = "Request failed"

# "guess L P"; anything after the two counts is ignored
_SCORE_RE = re.compile(r"^guess (\d+) (\d+)(?:\s|$)")


def transport_failure(detail: str) -> GuessOutcome:
    return GuessOutcome(kind="transport_failure", detail=detail)


def interpret(raw: str) -> GuessOutcome:
    """Map one response line from the service to a GuessOutcome.

    Total: unrecognised lines become a transport failure carrying the
    offending text, they never raise.
    """
    line = raw.strip()
    if line == "guess 5 5":
        return WIN

    m = _SCORE_RE.match(line)
    if m:
        letters, positions = int(m.group(1)), int(m.group(2))
        if (letters, positions) == (5, 5):
            return WIN
        return GuessOutcome(
            kind="scored", letter_matches=letters, position_matches=positions
        )

    if line.startswith("error 0:"):
        return GuessOutcome(kind="format_error", detail=line[len("error 0:"):].strip())
    if line.startswith("error 2:"):
        return GuessOutcome(
            kind="dictionary_error", detail=line[len("error 2:"):].strip()
        )

    return transport_failure(f"unrecognised response: {line!r}")


def display_cells(outcome: GuessOutcome, guess: str) -> tuple[str, str]:
    """Return the (letters, position) column text for an outcome."""
    if outcome.kind == "win":
        return f"You win! The secret word was {guess}!", ""
    if outcome.kind == "scored":
        return str(outcome.letter_matches), str(outcome.position_matches)
    if outcome.kind == "format_error":
        return FORMAT_ERROR_TEXT, ""
    if outcome.kind == "dictionary_error":
        return DICTIONARY_ERROR_TEXT, ""
    return FAILURE_TEXT, ""
