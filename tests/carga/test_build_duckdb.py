# tests/carga/test_build_duckdb.py
#
# Tests for the atomic DuckDB build and the loader entry point.
# Each test runs in tmp_path; the API reads the result through its repository.
from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import duckdb
import polars as pl
import pytest

from carga.build_duckdb import build_duckdb, contar_linhas
from carga.config import CargaConfig
from carga.main import run_carga
from carga.tabela_multas import CargaError
from sst.application.services.multa_service import estimar_multa
from sst.domain.avaliacao.entities import Avaliacao, Resposta
from sst.domain.avaliacao.enums import RespostaValor, StatusAvaliacao, TipoAvaliacao
from sst.infrastructure.repositories.duckdb_tabela_multa_repo import DuckDBTabelaMultaRepo

_OFICIAL = Path(__file__).parent.parent.parent / "carga" / "dados" / "tabela_multas.csv"


def _config(tmp_path: Path, csv: Path = _OFICIAL) -> CargaConfig:
    return CargaConfig(
        data_dir=tmp_path / "data",
        duckdb_output_path=tmp_path / "out" / "sst.duckdb",
        tabela_multas_csv=csv,
    )


def test_run_carga_gera_banco_com_tabela_oficial(tmp_path: Path) -> None:
    output = run_carga(_config(tmp_path))
    assert output.exists()
    assert not output.with_suffix(".tmp.duckdb").exists()

    counts = contar_linhas(output)
    assert counts["dim_tabela_multa"] == 32
    assert counts["fato_avaliacao"] == 0


def test_tabela_carregada_alimenta_estimativa(tmp_path: Path) -> None:
    """50 colaboradores, 1x NAO peso 4 -> faixa 26-50 (7565.23 / 11347.83)."""
    output = run_carga(_config(tmp_path))
    conn = duckdb.connect(str(output), read_only=True)
    try:
        tabela = DuckDBTabelaMultaRepo(conn).listar()
    finally:
        conn.close()

    avaliacao = Avaliacao(
        id="av-1",
        obra_id="obra-1",
        tipo=TipoAvaliacao.OBRA,
        status=StatusAvaliacao.COMPLETED,
        qtd_colaboradores=50,
        respostas=(Resposta(questao_id="q1", valor=RespostaValor.NAO_CONFORME, peso=4),),
    )
    faixa = estimar_multa(avaliacao, tabela, fator=Decimal("1"))
    assert faixa.minimo == Decimal("7565.23")
    assert faixa.maximo == Decimal("11347.83")


def test_csv_invalido_nao_substitui_banco_existente(tmp_path: Path) -> None:
    output = run_carga(_config(tmp_path))
    antes = output.stat().st_mtime_ns

    ruim = tmp_path / "ruim.csv"
    ruim.write_text(
        "peso,colaboradores_min,colaboradores_max,valor_min,valor_max\n1,1,10,9.00,1.00\n",
        encoding="utf-8",
    )
    with pytest.raises(CargaError):
        run_carga(_config(tmp_path, csv=ruim))

    assert output.stat().st_mtime_ns == antes
    assert contar_linhas(output)["dim_tabela_multa"] == 32


def test_build_carrega_exportacoes_opcionais(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    staging.mkdir()
    pl.DataFrame(
        {"obra_id": ["obra-1"], "nome": ["Edificio Aurora"], "numero": ["001"], "extra": [1]}
    ).write_parquet(staging / "obras.parquet")

    output = build_duckdb(staging, tmp_path / "sst.duckdb")

    counts = contar_linhas(output)
    assert counts["dim_obra"] == 1
    assert counts["dim_tabela_multa"] == 0


def test_build_falho_remove_tmp(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    staging.mkdir()
    # fato_avaliacao referencia dim_obra inexistente -> violacao de FK
    pl.DataFrame(
        {
            "avaliacao_id": ["av-1"],
            "obra_id": ["obra-x"],
            "tipo": ["obra"],
            "status": ["completed"],
            "qtd_colaboradores": [10],
        }
    ).write_parquet(staging / "avaliacoes.parquet")

    output = tmp_path / "sst.duckdb"
    with pytest.raises(duckdb.Error):
        build_duckdb(staging, output)

    assert not output.exists()
    assert not output.with_suffix(".tmp.duckdb").exists()
