from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
RESOURCES_DIR = BASE_DIR / "resources"
load_dotenv(BASE_DIR / ".env")


class Settings:
    """Runtime settings shared across the backend application."""

    def __init__(self) -> None:
        self.title: str = "BankBridge API"
        self.version: str = "1.0.0"
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: List[str] = [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
        self.banks_v1_path: Path = Path(os.getenv("BANKS_V1_PATH", str(RESOURCES_DIR / "banks-v1.json")))
        self.banks_v2_path: Path = Path(os.getenv("BANKS_V2_PATH", str(RESOURCES_DIR / "banks-v2.json")))
        self.bank_cache_size: int = int(os.getenv("BANK_CACHE_SIZE", "20"))
        self.default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "5"))
        self.remote_timeout: float = float(os.getenv("REMOTE_TIMEOUT", "10.0"))
        self.remote_connect_timeout: float = float(os.getenv("REMOTE_CONNECT_TIMEOUT", "3.0"))
        self.remote_deadline: float = float(os.getenv("REMOTE_DEADLINE", "10.0"))
        self.remote_max_concurrency: int = int(os.getenv("REMOTE_MAX_CONCURRENCY", "4"))


settings = Settings()
