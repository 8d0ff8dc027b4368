"""Tests for the HTTP scoring-service client and GuessTask error handling."""

import httpx
import pytest
from jotto.outcome import GuessOutcome
from jotto.service import GuessServiceClient, GuessServiceError
from jotto.task import GuessTask

URL = "http://jotto.test/jotto.py"


def make_client(handler) -> GuessServiceClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GuessServiceClient(URL, http_client=http)


# ── GuessServiceClient ────────────────────────────────────────────────────

class TestGuessServiceClient:
    @pytest.mark.asyncio
    async def test_sends_puzzle_and_guess(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="guess 2 1\n")

        client = make_client(handler)
        assert await client.request(1, "hello") == "guess 2 1"
        assert seen[0].url.params["puzzle"] == "1"
        assert seen[0].url.params["guess"] == "hello"
        assert seen[0].url.path == "/jotto.py"

    @pytest.mark.asyncio
    async def test_returns_first_line_only(self):
        client = make_client(lambda r: httpx.Response(200, text="error 0: bad\nextra\n"))
        assert await client.request(1, "x") == "error 0: bad"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        client = make_client(lambda r: httpx.Response(200, text=""))
        assert await client.request(1, "hello") == ""

    @pytest.mark.asyncio
    async def test_http_status_raises(self):
        client = make_client(lambda r: httpx.Response(503, text="down"))
        with pytest.raises(GuessServiceError):
            await client.request(1, "hello")

    @pytest.mark.asyncio
    async def test_connection_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = make_client(handler)
        with pytest.raises(GuessServiceError, match="ConnectError"):
            await client.request(1, "hello")

    @pytest.mark.asyncio
    async def test_context_manager_closes_owned_client(self):
        async with GuessServiceClient(URL) as client:
            pass
        assert client._client.is_closed

    @pytest.mark.asyncio
    async def test_borrowed_client_left_open(self):
        http = httpx.AsyncClient()
        async with GuessServiceClient(URL, http_client=http):
            pass
        assert not http.is_closed
        await http.aclose()


# ── GuessTask.run ─────────────────────────────────────────────────────────

class TestGuessTaskRun:
    @pytest.mark.asyncio
    async def test_reports_raw_line(self):
        results = []
        client = make_client(lambda r: httpx.Response(200, text="guess 3 1"))
        task = GuessTask("hello", 4, 1)
        await task.run(client, lambda t, res: results.append((t, res)))
        assert results == [(task, "guess 3 1")]

    @pytest.mark.asyncio
    async def test_reports_transport_failure_instead_of_raising(self):
        results = []
        client = make_client(lambda r: httpx.Response(500))
        task = GuessTask("hello", 0, 1)
        await task.run(client, lambda t, res: results.append(res))

        assert len(results) == 1
        assert isinstance(results[0], GuessOutcome)
        assert results[0].kind == "transport_failure"
