# sst/infrastructure/duckdb_connection.py
from __future__ import annotations

from pathlib import Path

import duckdb

from .config import get_settings

_connection: duckdb.DuckDBPyConnection | None = None


class BaseNaoEncontradaError(RuntimeError):
    pass


def get_connection() -> duckdb.DuckDBPyConnection:
    """Conexao unica do processo. Arquivo gerado pela carga abre somente leitura."""
    global _connection  # noqa: PLW0603
    if _connection is None:
        path = get_settings().duckdb_path
        if path == ":memory:":
            _connection = duckdb.connect(path)
        elif not Path(path).is_file():
            raise BaseNaoEncontradaError(
                f"Base DuckDB nao encontrada em {path}. Rode `python -m carga.main` antes."
            )
        else:
            _connection = duckdb.connect(path, read_only=True)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection | None) -> None:
    """Injeta a conexao (testes usam DuckDB in-memory). None forca reabrir."""
    global _connection  # noqa: PLW0603
    _connection = conn
