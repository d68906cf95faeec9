from __future__ import annotations

from collections import defaultdict

import duckdb

from sst.domain.avaliacao.entities import PESO_PADRAO, Avaliacao, Obra, Resposta
from sst.domain.avaliacao.enums import RespostaValor, StatusAvaliacao, TipoAvaliacao

_SELECT_AVALIACAO = """
    SELECT a.avaliacao_id, a.obra_id, a.tipo, a.status, a.qtd_colaboradores,
           o.nome, o.numero, a.data
    FROM fato_avaliacao a
    LEFT JOIN dim_obra o ON o.obra_id = a.obra_id
"""

_SELECT_RESPOSTAS = """
    SELECT r.avaliacao_id, r.questao_id, r.resposta, q.peso
    FROM fato_resposta r
    LEFT JOIN dim_questao q ON q.questao_id = r.questao_id
"""


class DuckDBAvaliacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, avaliacao_id: str) -> Avaliacao | None:
        row = self._conn.execute(
            _SELECT_AVALIACAO + " WHERE a.avaliacao_id = ?",
            [avaliacao_id],
        ).fetchone()
        if row is None:
            return None
        respostas = self._conn.execute(
            _SELECT_RESPOSTAS + " WHERE r.avaliacao_id = ? ORDER BY r.questao_id",
            [avaliacao_id],
        ).fetchall()
        return self._hidratar(row, [self._resposta(r) for r in respostas])

    def listar_finalizadas(self) -> list[Avaliacao]:
        rows = self._conn.execute(
            _SELECT_AVALIACAO + " WHERE a.status = ? ORDER BY a.avaliacao_id",
            [StatusAvaliacao.COMPLETED.value],
        ).fetchall()
        respostas_rows = self._conn.execute(
            _SELECT_RESPOSTAS
            + """ JOIN fato_avaliacao a ON a.avaliacao_id = r.avaliacao_id
                  WHERE a.status = ? ORDER BY r.avaliacao_id, r.questao_id""",
            [StatusAvaliacao.COMPLETED.value],
        ).fetchall()

        por_avaliacao: dict[str, list[Resposta]] = defaultdict(list)
        for r in respostas_rows:
            por_avaliacao[str(r[0])].append(self._resposta(r))
        return [self._hidratar(row, por_avaliacao[str(row[0])]) for row in rows]

    @staticmethod
    def _resposta(row: tuple) -> Resposta:  # type: ignore[type-arg]
        """Colunas: avaliacao_id(0), questao_id(1), resposta(2), peso(3)."""
        return Resposta(
            questao_id=str(row[1]),
            valor=RespostaValor(str(row[2])),
            peso=int(row[3]) if row[3] else PESO_PADRAO,
        )

    @staticmethod
    def _hidratar(row: tuple, respostas: list[Resposta]) -> Avaliacao:  # type: ignore[type-arg]
        """Mapeia row do DuckDB para entidade de dominio.
        Colunas: avaliacao_id(0), obra_id(1), tipo(2), status(3),
        qtd_colaboradores(4), obra_nome(5), obra_numero(6), data(7)"""
        obra_id = str(row[1])
        return Avaliacao(
            id=str(row[0]),
            obra_id=obra_id,
            tipo=TipoAvaliacao(str(row[2])),
            status=StatusAvaliacao(str(row[3])),
            qtd_colaboradores=int(row[4]) if row[4] is not None else None,
            respostas=tuple(respostas),
            obra=Obra(id=obra_id, nome=str(row[5]), numero=str(row[6] or "")) if row[5] else None,
            data=row[7],
        )
