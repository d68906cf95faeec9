from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import duckdb
import pytest

from sst.infrastructure import duckdb_connection
from sst.infrastructure.config import get_settings


@pytest.fixture()
def sem_conexao(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Zera a conexao global; monkeypatch devolve a do client ao final."""
    monkeypatch.setattr(duckdb_connection, "_connection", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_base_inexistente_falha_com_mensagem_da_carga(
    sem_conexao: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DUCKDB_PATH", str(tmp_path / "nao_existe.duckdb"))
    with pytest.raises(duckdb_connection.BaseNaoEncontradaError, match="carga"):
        duckdb_connection.get_connection()
    assert not (tmp_path / "nao_existe.duckdb").exists()


def test_base_gerada_abre_somente_leitura(
    sem_conexao: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "sst.duckdb"
    criada = duckdb.connect(str(path))
    criada.execute("CREATE TABLE t (x INTEGER)")
    criada.close()
    monkeypatch.setenv("DUCKDB_PATH", str(path))

    conn = duckdb_connection.get_connection()
    try:
        assert duckdb_connection.get_connection() is conn
        with pytest.raises(duckdb.Error):
            conn.execute("INSERT INTO t VALUES (1)")
    finally:
        conn.close()
