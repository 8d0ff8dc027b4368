"""Concurrent guess controller.

Every submitted guess gets a slot (its row in the table) and its own
asyncio task.  Results come back in whatever order the service answers and
are written only to the row captured at dispatch time.  Changing the puzzle
cancels every outstanding task: their calls still finish, but the results
are dropped at ``on_task_complete`` instead of being written to rows that
now belong to the new puzzle.

All state is owned by the event loop the controller runs on.  Completions
are plain (non-async) callbacks, so two of them can never interleave.
"""

import asyncio
import logging
import random

from . import config
from .grid import Column, DisplaySink
from .outcome import GuessOutcome, display_cells, interpret
from .session import PuzzleSession, resolve_puzzle_id
from .task import GuessService, GuessTask

logger = logging.getLogger(__name__)


class GuessController:
    def __init__(
        self,
        client: GuessService,
        sink: DisplaySink,
        *,
        initial_puzzle: str = config.INITIAL_PUZZLE,
        default_rows: int = config.DEFAULT_ROWS,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.sink = sink
        self.default_rows = default_rows
        self._rng = rng or random.Random()
        self._running: set[asyncio.Task] = set()

        self.session = PuzzleSession(resolve_puzzle_id(initial_puzzle, self._rng))
        self._show_new_puzzle()

    # ------------------------------------------------------------------
    # UI entry points
    # ------------------------------------------------------------------

    def on_guess_submitted(self, guess_text: str) -> int | None:
        return self.submit_guess(guess_text)

    def on_new_puzzle_requested(self, puzzle_id_text: str) -> int:
        return self.set_puzzle(puzzle_id_text)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    @property
    def puzzle_id(self) -> int:
        return self.session.current_puzzle_id

    @property
    def live_task_count(self) -> int:
        return len(self.session.live_tasks)

    def submit_guess(self, raw_text: str) -> int | None:
        """Show the guess in a fresh row and dispatch its request.

        Returns the slot, or None when the text was empty.  Must be called
        from the running event loop.
        """
        guess = raw_text.lower()
        if not guess:
            return None

        slot = self.session.allocate_slot()
        self.sink.ensure_row_count(slot + 1)
        self.sink.set_cell(slot, Column.GUESS, guess)
        self.sink.set_cell(slot, Column.LETTERS, "")
        self.sink.set_cell(slot, Column.POSITION, "")
        self.sink.clear_input_field()

        task = GuessTask(guess_text=guess, slot=slot, puzzle_id=self.session.current_puzzle_id)
        self.session.live_tasks.add(task)
        handle = asyncio.create_task(task.run(self.client, self.on_task_complete))
        self._running.add(handle)
        handle.add_done_callback(self._running.discard)

        logger.debug("[controller] slot %d <- %r (puzzle %d)", slot, guess, task.puzzle_id)
        return slot

    def on_task_complete(self, task: GuessTask, result: str | GuessOutcome) -> None:
        self.session.live_tasks.discard(task)

        outcome = result if isinstance(result, GuessOutcome) else interpret(result)
        if task.cancelled or outcome.kind == "cancelled":
            logger.info(
                "[controller] Dropping result for cancelled guess %r (slot %d, puzzle %d)",
                task.guess_text,
                task.slot,
                task.puzzle_id,
            )
            return

        if outcome.kind == "transport_failure":
            logger.warning(
                "[controller] Guess %r (slot %d) failed: %s",
                task.guess_text,
                task.slot,
                outcome.detail,
            )

        letters, position = display_cells(outcome, task.guess_text)
        self.sink.set_cell(task.slot, Column.LETTERS, letters)
        self.sink.set_cell(task.slot, Column.POSITION, position)

    def set_puzzle(self, puzzle_id_text: str) -> int:
        """Switch to a new puzzle, invalidating every outstanding guess."""
        puzzle_id = resolve_puzzle_id(puzzle_id_text, self._rng)
        stale = self.session.replace_puzzle(puzzle_id)
        logger.info(
            "[controller] Puzzle %d (requested %r); cancelled %d pending guess(es)",
            puzzle_id,
            puzzle_id_text,
            len(stale),
        )
        self._show_new_puzzle()
        return puzzle_id

    def _show_new_puzzle(self) -> None:
        self.sink.reset_grid(self.default_rows)
        self.sink.set_puzzle_label(f"Puzzle #{self.session.current_puzzle_id}")
        self.sink.clear_input_field()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def wait_idle(self) -> None:
        """Wait until every dispatched request, cancelled or not, has finished."""
        while self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)

    async def aclose(self) -> None:
        """Abort outstanding requests. Used on shutdown only."""
        for task in self.session.live_tasks:
            task.cancel()
        for handle in list(self._running):
            handle.cancel()
        await self.wait_idle()
        self.session.live_tasks.clear()
