from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from bankbridge.core.data_models import BankModel, RemoteBankView
from bankbridge.core.filters import BankFilter, paginate, parse_page_params
from bankbridge.core.remote_client import RemoteBankClient

from ..schemas import MSG_INTERNAL_SERVER, MSG_NO_RESULTS
from ..state import BankDirectory

logger = logging.getLogger("bankbridge.backend.remote_banks")


def remote_client(directory: BankDirectory) -> RemoteBankClient:
    return RemoteBankClient(
        directory.sources,
        timeout=directory.remote_timeout,
        max_concurrency=directory.remote_max_concurrency,
        deadline=directory.remote_deadline,
        transport=directory.transport,
    )


async def fetch_banks(directory: BankDirectory, bank_filter: BankFilter) -> List[BankModel]:
    """Fetch every configured source and keep the matching records in source order."""
    async with remote_client(directory) as client:
        banks = await client.fetch_all()
    return bank_filter.apply(banks)


async def list_remote_banks(
    directory: BankDirectory,
    bank_filter: BankFilter,
    page: Optional[str] = None,
    size: Optional[str] = None,
) -> List[Dict[str, Any]]:
    # Parse paging first so malformed values fail before any outbound call.
    page_number, page_size = parse_page_params(page, size, directory.default_page_size)
    banks = paginate(await fetch_banks(directory, bank_filter), page_number, page_size)
    return [RemoteBankView.from_bank(bank).to_payload() for bank in banks]


async def handle(
    directory: BankDirectory,
    bank_filter: BankFilter,
    page: Optional[str] = None,
    size: Optional[str] = None,
) -> JSONResponse:
    try:
        payload = await list_remote_banks(directory, bank_filter, page=page, size=size)
    except Exception:  # noqa: BLE001
        logger.exception("Error aggregating remote bank data")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": MSG_INTERNAL_SERVER},
        )

    if not payload:
        # Only in-process clients see this body; h11-based servers (uvicorn default) reject a body on 204.
        return JSONResponse(status_code=status.HTTP_204_NO_CONTENT, content={"message": MSG_NO_RESULTS})
    return JSONResponse(status_code=status.HTTP_200_OK, content=payload)
