from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, Request

from bankbridge.core.filters import BankFilter

from ..schemas import (
    QUERY_PARAM_AUTH,
    QUERY_PARAM_BIC,
    QUERY_PARAM_COUNTRYCODE,
    QUERY_PARAM_NAME,
    QUERY_PARAM_PAGE,
    QUERY_PARAM_PAGESIZE,
    QUERY_PARAM_PRODUCT,
    CacheBankResponse,
    MessageResponse,
    RemoteBankResponse,
)
from ..services import cache_banks, remote_banks
from ..state import BankDirectory

router = APIRouter(tags=["banks"])


def get_directory(request: Request) -> BankDirectory:
    return request.app.state.directory


# page and size stay raw strings; parsing failures are answered by the handlers.
@router.get(
    "/v1/banks/all",
    responses={
        200: {"model": List[CacheBankResponse]},
        500: {"model": MessageResponse},
    },
)
async def list_banks_v1(
    country_code: str | None = Query(None, alias=QUERY_PARAM_COUNTRYCODE),
    name: str | None = Query(None, alias=QUERY_PARAM_NAME),
    bic: str | None = Query(None, alias=QUERY_PARAM_BIC),
    product: str | None = Query(None, alias=QUERY_PARAM_PRODUCT),
    page: str | None = Query(None, alias=QUERY_PARAM_PAGE),
    size: str | None = Query(None, alias=QUERY_PARAM_PAGESIZE),
    directory: BankDirectory = Depends(get_directory),
):
    bank_filter = BankFilter(country_code=country_code, name=name, bic=bic, product=product)
    return cache_banks.handle(directory, bank_filter, page=page, size=size)


@router.get(
    "/v2/banks/all",
    responses={
        200: {"model": List[RemoteBankResponse]},
        204: {"description": "No Results Found."},
        500: {"model": MessageResponse},
    },
)
async def list_banks_v2(
    country_code: str | None = Query(None, alias=QUERY_PARAM_COUNTRYCODE),
    name: str | None = Query(None, alias=QUERY_PARAM_NAME),
    bic: str | None = Query(None, alias=QUERY_PARAM_BIC),
    auth: str | None = Query(None, alias=QUERY_PARAM_AUTH),
    page: str | None = Query(None, alias=QUERY_PARAM_PAGE),
    size: str | None = Query(None, alias=QUERY_PARAM_PAGESIZE),
    directory: BankDirectory = Depends(get_directory),
):
    bank_filter = BankFilter(country_code=country_code, name=name, bic=bic, auth=auth)
    return await remote_banks.handle(directory, bank_filter, page=page, size=size)
