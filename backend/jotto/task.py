"""One dispatched guess: the single service call it owns and its cancel flag."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from .outcome import CANCELLED, GuessOutcome, transport_failure
from .service import GuessServiceError

logger = logging.getLogger(__name__)


class GuessService(Protocol):
    async def request(self, puzzle_id: int, guess: str) -> str: ...


CompletionCallback = Callable[["GuessTask", "str | GuessOutcome"], None]


@dataclass(eq=False)
class GuessTask:
    guess_text: str
    slot: int
    puzzle_id: int  # puzzle at submission time
    cancelled: bool = False

    def cancel(self) -> None:
        """Mark the result as stale. The underlying call keeps running."""
        self.cancelled = True

    async def run(self, client: GuessService, on_complete: CompletionCallback) -> None:
        """Await the service call and report exactly once through *on_complete*.

        Transport failures are reported as an outcome, never raised.
        """
        try:
            raw = await client.request(self.puzzle_id, self.guess_text)
        except asyncio.CancelledError:
            on_complete(self, CANCELLED)
            raise
        except GuessServiceError as exc:
            logger.warning("[task] slot %d (%r) failed: %s", self.slot, self.guess_text, exc)
            on_complete(self, transport_failure(str(exc)))
            return
        except Exception as exc:
            logger.exception("[task] slot %d (%r) crashed", self.slot, self.guess_text)
            on_complete(self, transport_failure(repr(exc)))
            return
        on_complete(self, raw)
