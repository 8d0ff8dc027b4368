#!/usr/bin/env python3
"""Terminal Jotto client.

Usage:
    python scripts/play.py                 # random puzzle
    python scripts/play.py --puzzle 42     # puzzle #42
    python scripts/play.py --url http://localhost:8080/jotto.py

Type a five-letter guess and press enter; you can keep guessing while
earlier guesses are still waiting for the server.  Commands:
    :new [id]   switch puzzle (random when id is missing or invalid)
    :grid       print the whole table
    :quit       exit
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add backend to sys.path so the jotto package imports without installing
_BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(_BACKEND_DIR))

from jotto import config  # noqa: E402
from jotto.controller import GuessController  # noqa: E402
from jotto.grid import Column, GuessGrid  # noqa: E402
from jotto.service import GuessServiceClient  # noqa: E402


class ConsoleGrid(GuessGrid):
    """GuessGrid that echoes finished rows and puzzle changes to stdout."""

    def set_cell(self, slot: int, column: Column, value: str) -> None:
        super().set_cell(slot, column, value)
        if column is Column.POSITION and self.rows[slot][Column.LETTERS]:
            print(f"\n  {_format_row(slot, self.rows[slot])}")

    def set_puzzle_label(self, text: str) -> None:
        super().set_puzzle_label(text)
        print(f"[jotto] {text}")


def _format_row(slot: int, row: dict) -> str:
    return f"{slot + 1:>3}  {row[Column.GUESS]:<8} {row[Column.LETTERS]:<40} {row[Column.POSITION]}"


def _print_grid(grid: GuessGrid) -> None:
    print(grid.puzzle_label)
    for slot, row in enumerate(grid.rows):
        if row[Column.GUESS]:
            print(f"  {_format_row(slot, row)}")


async def play(puzzle: str, url: str) -> None:
    grid = ConsoleGrid()
    async with GuessServiceClient(url, timeout=config.REQUEST_TIMEOUT) as client:
        controller = GuessController(client, grid, initial_puzzle=puzzle)
        try:
            while True:
                try:
                    line = await asyncio.to_thread(input, "guess> ")
                except EOFError:
                    break
                line = line.strip()
                if line == ":quit":
                    break
                if line == ":grid":
                    _print_grid(grid)
                elif line.startswith(":new"):
                    controller.on_new_puzzle_requested(line[len(":new"):])
                else:
                    controller.on_guess_submitted(line)
        finally:
            await controller.aclose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Jotto against the scoring service.")
    parser.add_argument(
        "--puzzle",
        default=config.INITIAL_PUZZLE,
        help="Puzzle number (default: random)",
    )
    parser.add_argument(
        "--url",
        default=config.SERVICE_URL,
        help="Scoring service URL",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(play(args.puzzle, args.url))


if __name__ == "__main__":
    main()
