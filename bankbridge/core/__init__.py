"""Core package exposing the bank record model, cache and remote client."""

from .bank_cache import BankCache, CacheFrozenError
from .data_models import BankModel, BankModelList, CacheBankView, RemoteBankView
from .filters import BankFilter, paginate, parse_page_params
from .remote_client import RemoteBankClient, RemoteSource, RemoteSourceError

__all__ = [
    "BankCache",
    "BankFilter",
    "BankModel",
    "BankModelList",
    "CacheBankView",
    "CacheFrozenError",
    "RemoteBankClient",
    "RemoteBankView",
    "RemoteSource",
    "RemoteSourceError",
    "paginate",
    "parse_page_params",
]
