"""Read-only in-memory store of bank records keyed by BIC."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from cachetools import Cache

from .data_models import BankModel

logger = logging.getLogger(__name__)


class CacheFrozenError(RuntimeError):
    """Raised when a record is written after the cache was frozen."""


class BankCache:
    """Wraps a ``cachetools.Cache`` that is filled once and then only read.

    Iteration follows insertion order, i.e. the order of the loaded dataset.
    """

    def __init__(self, maxsize: int = 20):
        self._cache: Cache[str, BankModel] = Cache(maxsize=maxsize)
        self._frozen = False

    @classmethod
    def from_banks(cls, banks: Iterable[BankModel], maxsize: int = 20) -> "BankCache":
        records = list(banks)
        if len(records) > maxsize:
            logger.warning(
                "Bank dataset has %d records but cache size is %d; growing the cache to fit.",
                len(records),
                maxsize,
            )
            maxsize = len(records)
        cache = cls(maxsize=maxsize)
        for bank in records:
            cache.put(bank.bic, bank)
        cache.freeze()
        return cache

    @property
    def frozen(self) -> bool:
        return self._frozen

    def put(self, bic: str, bank: BankModel) -> None:
        if self._frozen:
            raise CacheFrozenError("Bank cache is read-only after startup.")
        self._cache[bic] = bank

    def get(self, bic: str) -> Optional[BankModel]:
        return self._cache.get(bic)

    def freeze(self) -> None:
        self._frozen = True

    def __iter__(self) -> Iterator[BankModel]:
        return iter(list(self._cache.values()))

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, bic: object) -> bool:
        return bic in self._cache
