from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from bankbridge.core.bank_cache import BankCache
from bankbridge.core.data_models import BankModelList
from bankbridge.core.filters import DEFAULT_PAGE_SIZE
from bankbridge.core.remote_client import DEFAULT_DEADLINE, DEFAULT_MAX_CONCURRENCY, DEFAULT_TIMEOUT, RemoteSource

from .config import Settings

logger = logging.getLogger("bankbridge.backend.state")


class DatasetLoadError(RuntimeError):
    """Raised when a startup dataset or remote setting is unusable."""


@dataclass(frozen=True)
class BankDirectory:
    """Everything the handlers read, built once at startup and never mutated."""

    cache: BankCache
    sources: Tuple[RemoteSource, ...]
    default_page_size: int = DEFAULT_PAGE_SIZE
    remote_timeout: httpx.Timeout = field(default_factory=lambda: DEFAULT_TIMEOUT)
    remote_deadline: float = DEFAULT_DEADLINE
    remote_max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    # Outbound transport override, used to point the remote path at an in-process app.
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, compare=False, repr=False)


def load_bank_cache(path: Path, maxsize: int = 20) -> BankCache:
    try:
        models = BankModelList.model_validate_json(Path(path).read_bytes())
    except (OSError, ValidationError) as exc:
        logger.error("Error loading cache data from %s", path, exc_info=True)
        raise DatasetLoadError(f"Could not load bank dataset from {path}") from exc
    return BankCache.from_banks(models.banks, maxsize=maxsize)


def load_remote_sources(path: Path) -> Tuple[RemoteSource, ...]:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.error("Error loading remote source map from %s", path, exc_info=True)
        raise DatasetLoadError(f"Could not load remote source map from {path}") from exc
    if not isinstance(raw, dict) or not all(isinstance(url, str) for url in raw.values()):
        raise DatasetLoadError(f"Remote source map in {path} must be an object of name -> URL.")
    return tuple(RemoteSource(name=name, url=url) for name, url in raw.items())


def check_remote_settings(settings: Settings) -> None:
    problems = []
    if settings.remote_max_concurrency < 1:
        problems.append(f"REMOTE_MAX_CONCURRENCY must be at least 1 (got {settings.remote_max_concurrency})")
    for label, value in (
        ("REMOTE_TIMEOUT", settings.remote_timeout),
        ("REMOTE_CONNECT_TIMEOUT", settings.remote_connect_timeout),
        ("REMOTE_DEADLINE", settings.remote_deadline),
    ):
        if value <= 0:
            problems.append(f"{label} must be positive (got {value})")
    if problems:
        logger.error("Invalid remote settings: %s", "; ".join(problems))
        raise DatasetLoadError("Invalid remote settings: " + "; ".join(problems))


def load_directory(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> BankDirectory:
    """Read both startup datasets and assemble the immutable directory."""
    check_remote_settings(settings)
    cache = load_bank_cache(settings.banks_v1_path, maxsize=settings.bank_cache_size)
    sources = load_remote_sources(settings.banks_v2_path)
    logger.info("Loaded %d cached banks and %d remote sources", len(cache), len(sources))
    return BankDirectory(
        cache=cache,
        sources=sources,
        default_page_size=settings.default_page_size,
        remote_timeout=httpx.Timeout(settings.remote_timeout, connect=settings.remote_connect_timeout),
        remote_deadline=settings.remote_deadline,
        remote_max_concurrency=settings.remote_max_concurrency,
        transport=transport,
    )
