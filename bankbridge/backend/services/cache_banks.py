from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from bankbridge.core.data_models import BankModel, CacheBankView
from bankbridge.core.filters import BankFilter, paginate, parse_page_params

from ..schemas import MSG_INTERNAL_SERVER
from ..state import BankDirectory

logger = logging.getLogger("bankbridge.backend.cache_banks")


def filter_banks(directory: BankDirectory, bank_filter: BankFilter) -> List[BankModel]:
    """Walk the preloaded cache in dataset order and keep matching records."""
    return bank_filter.apply(directory.cache)


def list_cached_banks(
    directory: BankDirectory,
    bank_filter: BankFilter,
    page: Optional[str] = None,
    size: Optional[str] = None,
) -> List[Dict[str, Any]]:
    page_number, page_size = parse_page_params(page, size, directory.default_page_size)
    banks = paginate(filter_banks(directory, bank_filter), page_number, page_size)
    return [CacheBankView.from_bank(bank).to_payload() for bank in banks]


def handle(
    directory: BankDirectory,
    bank_filter: BankFilter,
    page: Optional[str] = None,
    size: Optional[str] = None,
) -> JSONResponse:
    try:
        payload = list_cached_banks(directory, bank_filter, page=page, size=size)
    except Exception:  # noqa: BLE001
        logger.exception("Error processing request")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": MSG_INTERNAL_SERVER},
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=payload)
