"""HTTP client for the remote Jotto scoring service."""

import logging

import httpx

from . import config

logger = logging.getLogger(__name__)

_HEADERS = {"User-Agent": "JottoClient/1.0 (educational)"}


class GuessServiceError(Exception):
    """The scoring service could not be reached or returned a bad status."""


class GuessServiceClient:
    """Sends one guess per request and returns the service's first response line.

    The service answers a ``GET <url>?puzzle=<id>&guess=<word>`` with a single
    line such as ``guess 2 1`` or ``error 2: Invalid guess. ...``.  Any
    network or HTTP failure is raised as GuessServiceError; the line itself
    is returned uninterpreted.
    """

    def __init__(
        self,
        base_url: str = config.SERVICE_URL,
        *,
        timeout: float = config.REQUEST_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout, headers=_HEADERS
        )

    async def request(self, puzzle_id: int, guess: str) -> str:
        params = {"puzzle": str(puzzle_id), "guess": guess}
        logger.debug("[service] GET %s %s", self.base_url, params)
        try:
            resp = await self._client.get(self.base_url, params=params)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise GuessServiceError(f"{type(exc).__name__}: {exc}") from exc

        lines = resp.text.splitlines()
        return lines[0] if lines else ""

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "GuessServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
