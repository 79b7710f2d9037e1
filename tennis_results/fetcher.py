# tennis_results/fetcher.py
"""
Fetcher module: sequential HTTP GETs with fixed polite headers.

Every request is awaited before the next one starts. Failures are returned as
data, one :class:`FetchResult` per URL, so a dead source never stops the run.
No retries, no rate limiting and no explicit timeout (aiohttp defaults apply).
"""
from __future__ import annotations

from typing import Iterable, List

from aiohttp import ClientSession

from tennis_results.config import ResultsConfig
from tennis_results.logger import logger
from tennis_results.models import FetchResult


class Fetcher:
    """Fetches pages over a shared session and captures errors as data."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchResult:
        """
        GET *url* and return its status and body text.

        HTTP error statuses count as successful fetches. Any exception raised
        while requesting or reading is captured in ``FetchResult.error``.
        """
        try:
            async with self.session.get(url) as resp:
                text = await resp.text(errors="replace")
                logger.info("Fetched %s -> %s (%d chars)", url, resp.status, len(text))
                return FetchResult(url=url, status=resp.status, body=text)
        except Exception as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            return FetchResult(url=url, error=f"{type(exc).__name__}: {exc}")

    async def fetch_many(self, urls: Iterable[str]) -> List[FetchResult]:
        results: List[FetchResult] = []
        for url in urls:
            results.append(await self.fetch(url))
        return results


async def fetch_all(urls: Iterable[str], config: ResultsConfig) -> List[FetchResult]:
    """Open one session with the configured headers and fetch *urls* in order."""
    async with ClientSession(headers=config.headers) as session:
        return await Fetcher(session).fetch_many(urls)


__all__ = ["Fetcher", "fetch_all"]
