from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

QUERY_PARAM_COUNTRYCODE = "countryCode"
QUERY_PARAM_NAME = "name"
QUERY_PARAM_BIC = "bic"
QUERY_PARAM_PRODUCT = "product"
QUERY_PARAM_AUTH = "auth"
QUERY_PARAM_PAGE = "page"
QUERY_PARAM_PAGESIZE = "size"

MSG_INTERNAL_SERVER = "Internal Server Error."
MSG_NO_RESULTS = "No Results Found."


class MessageResponse(BaseModel):
    message: str


# Response documentation models; handlers build payloads from core views.
class CacheBankResponse(BaseModel):
    bic: str
    name: str
    countryCode: str
    products: Optional[List[str]] = None


class RemoteBankResponse(BaseModel):
    bic: str
    name: str
    countryCode: str
    auth: Optional[str] = None
