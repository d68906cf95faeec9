# sst/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

from sst.application.services.multa_service import FATOR_CORRECAO_MONETARIA

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    rate_limit_per_minute: int
    debug: bool
    fator_correcao: Decimal


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        fator_correcao=Decimal(
            os.environ.get("FATOR_CORRECAO_MONETARIA", str(FATOR_CORRECAO_MONETARIA))
        ),
    )
