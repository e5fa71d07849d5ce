"""Data models shared by the cache-backed and remote-backed bank listings."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BankModel(BaseModel):
    """A single bank record as stored in the cache or returned by a remote source."""

    model_config = ConfigDict(extra="ignore")

    bic: str
    name: str
    countryCode: str
    auth: Optional[str] = None
    products: Optional[List[str]] = None


class BankModelList(BaseModel):
    """Static dataset wrapper, matches the `{"banks": [...]}` resource layout."""

    banks: List[BankModel] = Field(default_factory=list)


class CacheBankView(BaseModel):
    """Fields exposed by the cache-backed listing."""

    bic: str
    name: str
    countryCode: str
    products: Optional[List[str]] = None

    @classmethod
    def from_bank(cls, bank: BankModel) -> "CacheBankView":
        return cls(bic=bank.bic, name=bank.name, countryCode=bank.countryCode, products=bank.products)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RemoteBankView(BaseModel):
    """Fields exposed by the remote-aggregated listing."""

    bic: str
    name: str
    countryCode: str
    auth: Optional[str] = None

    @classmethod
    def from_bank(cls, bank: BankModel) -> "RemoteBankView":
        return cls(bic=bank.bic, name=bank.name, countryCode=bank.countryCode, auth=bank.auth)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
