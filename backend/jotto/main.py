import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .controller import GuessController
from .grid import GuessGrid
from .models import GridState, GuessAccepted, GuessRequest, NewPuzzleRequest
from .service import GuessServiceClient

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Client state (one table per process, created at startup)
# ---------------------------------------------------------------------------
_grid: GuessGrid | None = None
_controller: GuessController | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _grid, _controller

    client = GuessServiceClient(config.SERVICE_URL, timeout=config.REQUEST_TIMEOUT)
    _grid = GuessGrid()
    _controller = GuessController(
        client,
        _grid,
        initial_puzzle=config.INITIAL_PUZZLE,
        default_rows=config.DEFAULT_ROWS,
    )
    logger.info(
        "[jotto] Scoring service %s, starting on puzzle %d",
        config.SERVICE_URL,
        _controller.puzzle_id,
    )

    yield

    await _controller.aclose()
    await client.aclose()


app = FastAPI(lifespan=lifespan)


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.get("/api/grid", response_model=GridState)
async def get_grid():
    return _grid.snapshot()


@app.post("/api/puzzle", response_model=GridState)
async def post_puzzle(body: NewPuzzleRequest):
    _controller.on_new_puzzle_requested(body.puzzle_id)
    return _grid.snapshot()


@app.post("/api/guess", response_model=GuessAccepted)
async def post_guess(body: GuessRequest):
    # async so the dispatched request lands on the server's event loop
    slot = _controller.on_guess_submitted(body.guess)
    return GuessAccepted(slot=slot)
