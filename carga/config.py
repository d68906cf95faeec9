# carga/config.py
#
# Loader configuration loaded from environment variables.
#
# Design decisions:
#   - Frozen dataclass (not pydantic Settings): pydantic is reserved for the
#     API layer, the loader is a standalone offline process.
#   - The official penalty table ships with the repository under carga/dados
#     so a fresh checkout can build a usable database without network access.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_CARGA_DIR = Path(__file__).parent


@dataclass(frozen=True)
class CargaConfig:
    """Immutable loader configuration.

    Invariants:
      - data_dir and duckdb_output_path are Path objects.
      - tabela_multas_csv points to a CSV with the columns in
        carga.tabela_multas.COLUNAS.
    """

    data_dir: Path
    duckdb_output_path: Path
    tabela_multas_csv: Path

    @property
    def staging_dir(self) -> Path:
        """Directory for Parquet exports consumed by build_duckdb."""
        return self.data_dir / "staging"


def load_config() -> CargaConfig:
    data_dir = Path(os.environ.get("CARGA_DATA_DIR", str(_CARGA_DIR / "data")))
    return CargaConfig(
        data_dir=data_dir,
        duckdb_output_path=Path(
            os.environ.get("DUCKDB_OUTPUT_PATH", str(data_dir / "output" / "sst.duckdb"))
        ),
        tabela_multas_csv=Path(
            os.environ.get("CARGA_TABELA_MULTAS_CSV", str(_CARGA_DIR / "dados" / "tabela_multas.csv"))
        ),
    )
