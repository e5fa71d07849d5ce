import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from .data_models import BankModel

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=3.0)
# Wall-clock limit for one source, covering connect, headers and the whole body.
DEFAULT_DEADLINE = 10.0
DEFAULT_MAX_CONCURRENCY = 4

# Statuses whose body is parsed as a bank record; anything else is skipped.
SUCCESS_STATUSES = frozenset({200, 201, 202})


@dataclass(frozen=True)
class RemoteSource:
    """A named remote endpoint serving a single bank record."""

    name: str
    url: str


class RemoteSourceError(Exception):
    """A remote source could not be fetched or its body could not be parsed."""

    def __init__(self, source: RemoteSource, reason: str):
        super().__init__(f"Remote source '{source.name}' ({source.url}) failed: {reason}")
        self.source = source
        self.reason = reason


class RemoteBankClient:
    """Fetches bank records from every configured remote source.

    Calls run concurrently up to ``max_concurrency``. Each call is bounded by
    ``timeout`` per network operation and by ``deadline`` seconds overall.
    The whole fan-out fails if any single source fails, but only after every
    call has settled so no request is left dangling.
    """

    def __init__(
        self,
        sources: Sequence[RemoteSource],
        timeout: httpx.Timeout = DEFAULT_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        deadline: float = DEFAULT_DEADLINE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1.")
        if deadline <= 0:
            raise ValueError("deadline must be positive.")
        self.deadline = deadline
        self.sources = tuple(sources)
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "RemoteBankClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._client.aclose()

    async def fetch_source(self, source: RemoteSource) -> Optional[BankModel]:
        """Return the source's bank record, or None when it answers with a non-success status."""
        async with self._semaphore:
            try:
                response = await asyncio.wait_for(self._client.get(source.url), self.deadline)
            except asyncio.TimeoutError as exc:
                raise RemoteSourceError(source, f"no complete response within {self.deadline:g}s") from exc
            except httpx.HTTPError as exc:
                raise RemoteSourceError(source, str(exc) or type(exc).__name__) from exc

        if response.status_code not in SUCCESS_STATUSES:
            logger.info("Skipping source %s: HTTP %s from %s", source.name, response.status_code, source.url)
            return None

        try:
            return BankModel.model_validate_json(response.content)
        except ValidationError as exc:
            raise RemoteSourceError(source, "response body is not a bank record") from exc

    async def fetch_all(self) -> List[BankModel]:
        """Fetch every source and return the records in configuration order."""
        results = await asyncio.gather(
            *(self.fetch_source(source) for source in self.sources),
            return_exceptions=True,
        )

        banks: List[BankModel] = []
        failures: List[BaseException] = []
        for source, result in zip(self.sources, results):
            if isinstance(result, BaseException):
                logger.error("Error fetching bank data from %s: %s", source.url, result)
                failures.append(result)
            elif result is not None:
                banks.append(result)

        if failures:
            raise failures[0]
        return banks
