from __future__ import annotations

from decimal import Decimal

import duckdb

from sst.domain.avaliacao.value_objects import FaixaTabelaMulta


class DuckDBTabelaMultaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[FaixaTabelaMulta]:
        """Ordem estavel: define qual faixa vence em tabelas sobrepostas."""
        rows = self._conn.execute(
            """SELECT peso, colaboradores_min, colaboradores_max, valor_min, valor_max
               FROM dim_tabela_multa
               ORDER BY peso, colaboradores_min, pk_faixa"""
        ).fetchall()
        return [
            FaixaTabelaMulta(
                peso=int(r[0]),
                colaboradores_min=int(r[1]),
                colaboradores_max=int(r[2]),
                valor_min=Decimal(str(r[3])),
                valor_max=Decimal(str(r[4])),
            )
            for r in rows
        ]
