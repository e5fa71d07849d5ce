"""Filtering and pagination helpers for bank listings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from .data_models import BankModel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 5


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class BankFilter:
    """Optional query constraints; blank values do not constrain anything."""

    country_code: Optional[str] = None
    name: Optional[str] = None
    bic: Optional[str] = None
    product: Optional[str] = None
    auth: Optional[str] = None

    def matches(self, bank: BankModel) -> bool:
        if not is_blank(self.country_code) and self.country_code != bank.countryCode:
            return False
        if not is_blank(self.bic) and self.bic != bank.bic:
            return False
        if not is_blank(self.auth) and self.auth != bank.auth:
            return False
        # Records without products never match a product constraint.
        if not is_blank(self.product) and self.product not in (bank.products or ()):
            return False
        if not is_blank(self.name) and self.name not in bank.name:
            return False
        return True

    def apply(self, banks: Iterable[BankModel]) -> List[BankModel]:
        return [bank for bank in banks if self.matches(bank)]


def parse_page_params(
    page: Optional[str],
    size: Optional[str],
    default_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[int, int]:
    """Turn raw query values into integers.

    A blank page means "no pagination" (page 0) and a blank size falls back to
    ``default_size``. Non-numeric values raise ``ValueError``.
    """
    page_number = int(page) if not is_blank(page) else 0
    page_size = int(size) if not is_blank(size) else default_size
    return page_number, page_size


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Return the ``page``-th window of ``page_size`` items (1-based pages).

    The window is only applied when it starts at a non-negative index and has a
    positive end; otherwise the whole sequence is returned. The end is clamped
    to the sequence length and a start past the end yields an empty list.
    """
    from_index = (page - 1) * page_size
    to_index = page * page_size
    if from_index < 0 or to_index <= 0:
        return list(items)
    total = len(items)
    if from_index >= total:
        return []
    return list(items[from_index:min(to_index, total)])
