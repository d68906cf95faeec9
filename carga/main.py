# carga/main.py
#
# Loader orchestrator: official penalty table CSV -> staging Parquet -> DuckDB.
#
# Invariant: the DuckDB file is never replaced unless the penalty table passed
# validation and the build completed.
from __future__ import annotations

from pathlib import Path

import polars as pl

from carga.build_duckdb import build_duckdb, contar_linhas
from carga.config import CargaConfig, load_config
from carga.log import etapa, log
from carga.tabela_multas import parse_tabela_multas, validate_tabela_multas


def run_carga(config: CargaConfig) -> Path:
    """Execute the load and return the path of the built database.

    Raises:
        carga.tabela_multas.CargaError: if the penalty table CSV is missing or
            invalid. Nothing is written to the output path in that case.
    """
    staging_dir = config.staging_dir
    staging_dir.mkdir(parents=True, exist_ok=True)

    with etapa(f"Penalty table {config.tabela_multas_csv}"):
        tabela = validate_tabela_multas(parse_tabela_multas(config.tabela_multas_csv))
        log(f"  {len(tabela):,} brackets, weights {_pesos(tabela)}")
        tabela.write_parquet(staging_dir / "tabela_multas.parquet")

    with etapa("Building DuckDB"):
        output = build_duckdb(staging_dir, config.duckdb_output_path)
        for tabela_nome, qtd in sorted(contar_linhas(output).items()):
            log(f"  {tabela_nome}: {qtd:,} rows")
    log(f"Done: {output}")
    return output


def _pesos(tabela: pl.DataFrame) -> str:
    return ", ".join(str(p) for p in sorted(tabela["peso"].unique().to_list()))


if __name__ == "__main__":
    run_carga(load_config())
