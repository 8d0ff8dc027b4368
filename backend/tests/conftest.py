"""Shared fixtures: a scriptable fake scoring service and a recording grid."""

import asyncio
import random

import pytest
from jotto.controller import GuessController
from jotto.grid import Column, GuessGrid


class FakeService:
    """Each request parks on a future the test resolves explicitly."""

    def __init__(self):
        self.calls: list[tuple[int, str]] = []
        self._futures: list[asyncio.Future] = []

    async def request(self, puzzle_id: int, guess: str) -> str:
        fut = asyncio.get_running_loop().create_future()
        self.calls.append((puzzle_id, guess))
        self._futures.append(fut)
        return await fut

    def reply(self, index: int, line: str) -> None:
        self._futures[index].set_result(line)

    def fail(self, index: int, exc: BaseException) -> None:
        self._futures[index].set_exception(exc)


class RecordingGrid(GuessGrid):
    """GuessGrid that also keeps a log of every cell write."""

    def __init__(self, default_row_count: int = 0):
        self.writes: list[tuple[int, Column, str]] = []
        super().__init__(default_row_count)

    def set_cell(self, slot: int, column: Column, value: str) -> None:
        self.writes.append((slot, column, value))
        super().set_cell(slot, column, value)


async def settle(rounds: int = 5) -> None:
    """Let dispatched tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def grid():
    return RecordingGrid()


@pytest.fixture
def controller(service, grid):
    return GuessController(
        service, grid, initial_puzzle="7", default_rows=3, rng=random.Random(0)
    )
