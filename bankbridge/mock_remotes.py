"""Stand-in remote bank sources for local development and tests.

Each configured path answers with a single bank record, mirroring what the
real partner endpoints listed in ``banks-v2.json`` return. Run it with::

    python -m bankbridge.mock_remotes
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException

RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
MOCK_REMOTES_PATH = Path(os.getenv("MOCK_REMOTES_PATH", str(RESOURCES_DIR / "mock-remotes.json")))

logger = logging.getLogger("bankbridge.mock_remotes")


def load_records(path: Path = MOCK_REMOTES_PATH) -> Dict[str, Dict[str, Any]]:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def create_mock_app(records: Optional[Dict[str, Dict[str, Any]]] = None) -> FastAPI:
    records = load_records() if records is None else records
    app = FastAPI(title="BankBridge Mock Remotes", version="1.0.0")

    @app.get("/health")
    def health():
        return {"status": "ok", "sources": len(records)}

    @app.get("/{source}")
    def get_bank(source: str):
        record = records.get(source)
        if record is None:
            raise HTTPException(status_code=404, detail=f"Unknown source '{source}'")
        return record

    return app


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(create_mock_app(), host="127.0.0.1", port=int(os.getenv("MOCK_REMOTES_PORT", "1234")))
