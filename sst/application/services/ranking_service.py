"""Ranking de conformidade por obra. classificar_obras e funcao pura. Zero IO.

ADR: So avaliacoes finalizadas do tipo obra entram no ranking. Avaliacoes de
alojamento e rascunhos nunca contribuem, nem indiretamente.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fractions import Fraction

from sst.domain.avaliacao.entities import Avaliacao
from sst.domain.avaliacao.enums import TipoAvaliacao
from sst.domain.avaliacao.repository import AvaliacaoRepository
from sst.domain.ranking.entities import (
    LIMIAR_ATENCAO,
    PosicaoRanking,
    ResumoRanking,
)

from ..dtos.ranking_dto import PosicaoRankingDTO, ResumoRankingDTO
from .conformidade_service import calcular_conformidade

CAMPOS_ORDENACAO = ("posicao", "obra_numero", "obra_nome", "taxa_conformidade", "total_avaliacoes")


@dataclass
class _Acumulado:
    """Estado mutavel local a uma chamada de classificar_obras."""

    obra_id: str
    obra_nome: str
    obra_numero: str
    taxa: Fraction = Fraction(0)
    total_avaliacoes: int = 0
    total_conforme: int = 0
    total_nao_conforme: int = 0

    def incorporar(self, conforme: int, nao_conforme: int) -> None:
        # Media incremental em aritmetica exata: o resultado nao depende da
        # ordem de entrada. Conversao para float so na saida.
        taxa = Fraction(100 * conforme, conforme + nao_conforme)
        self.taxa = (self.taxa * self.total_avaliacoes + taxa) / (self.total_avaliacoes + 1)
        self.total_avaliacoes += 1
        self.total_conforme += conforme
        self.total_nao_conforme += nao_conforme


def _elegivel(avaliacao: Avaliacao) -> bool:
    return avaliacao.finalizada and avaliacao.tipo is TipoAvaliacao.OBRA


def classificar_obras(avaliacoes: Iterable[Avaliacao]) -> list[PosicaoRanking]:
    """Funcao pura. Ordena obras por taxa media desc, empate por numero da obra.

    Posicao = 1 + quantidade de obras com taxa estritamente maior (empates
    dividem a mesma posicao).
    """
    acumulados: dict[str, _Acumulado] = {}

    for avaliacao in avaliacoes:
        if not _elegivel(avaliacao):
            continue
        resumo = calcular_conformidade(avaliacao)
        if resumo.total_aplicavel == 0:
            continue

        acc = acumulados.get(avaliacao.obra_id)
        if acc is None:
            obra = avaliacao.obra
            acc = _Acumulado(
                obra_id=avaliacao.obra_id,
                obra_nome=obra.nome if obra else "Obra",
                obra_numero=obra.numero if obra else "",
            )
            acumulados[avaliacao.obra_id] = acc
        acc.incorporar(resumo.conforme, resumo.nao_conforme)

    ordenados = sorted(
        acumulados.values(),
        key=lambda a: (-a.taxa, a.obra_numero, a.obra_id),
    )

    posicoes: list[PosicaoRanking] = []
    anterior: Fraction | None = None
    for indice, acc in enumerate(ordenados):
        if anterior is not None and anterior == acc.taxa:
            posicao = posicoes[-1].posicao
        else:
            posicao = indice + 1
        anterior = acc.taxa
        posicoes.append(
            PosicaoRanking(
                obra_id=acc.obra_id,
                obra_nome=acc.obra_nome,
                obra_numero=acc.obra_numero,
                taxa_conformidade=float(acc.taxa),
                total_avaliacoes=acc.total_avaliacoes,
                posicao=posicao,
                total_conforme=acc.total_conforme,
                total_nao_conforme=acc.total_nao_conforme,
            )
        )
    return posicoes


def resumir_ranking(posicoes: Sequence[PosicaoRanking]) -> ResumoRanking:
    if not posicoes:
        return ResumoRanking(total_obras=0, media_conformidade=None, obras_criticas=0)
    return ResumoRanking(
        total_obras=len(posicoes),
        media_conformidade=sum(p.taxa_conformidade for p in posicoes) / len(posicoes),
        obras_criticas=sum(1 for p in posicoes if p.taxa_conformidade < LIMIAR_ATENCAO),
    )


def filtrar_ranking(posicoes: Sequence[PosicaoRanking], termo: str | None) -> list[PosicaoRanking]:
    """Busca case-insensitive por nome ou numero da obra. Posicoes sao mantidas."""
    if not termo:
        return list(posicoes)
    termo = termo.lower()
    return [
        p for p in posicoes
        if termo in p.obra_nome.lower() or termo in p.obra_numero.lower()
    ]


def ordenar_ranking(
    posicoes: Sequence[PosicaoRanking],
    campo: str = "posicao",
    ordem: str = "asc",
) -> list[PosicaoRanking]:
    if campo not in CAMPOS_ORDENACAO:
        raise ValueError(f"Campo de ordenacao invalido: {campo}")
    if campo in ("obra_nome", "obra_numero"):
        chave = lambda p: getattr(p, campo).lower()  # noqa: E731
    else:
        chave = lambda p: getattr(p, campo)  # noqa: E731
    return sorted(posicoes, key=chave, reverse=(ordem == "desc"))


def _to_dto(p: PosicaoRanking) -> PosicaoRankingDTO:
    return PosicaoRankingDTO(
        posicao=p.posicao,
        obra_id=p.obra_id,
        obra_nome=p.obra_nome,
        obra_numero=p.obra_numero,
        taxa_conformidade=round(p.taxa_conformidade, 2),
        faixa_conformidade=p.faixa.value,
        total_avaliacoes=p.total_avaliacoes,
        total_conforme=p.total_conforme,
        total_nao_conforme=p.total_nao_conforme,
    )


class RankingService:
    def __init__(self, avaliacao_repo: AvaliacaoRepository) -> None:
        self._avaliacao_repo = avaliacao_repo

    def ranking(
        self,
        termo: str | None = None,
        ordenar_por: str = "posicao",
        ordem: str = "asc",
    ) -> list[PosicaoRankingDTO]:
        posicoes = classificar_obras(self._avaliacao_repo.listar_finalizadas())
        posicoes = ordenar_ranking(filtrar_ranking(posicoes, termo), ordenar_por, ordem)
        return [_to_dto(p) for p in posicoes]

    def resumo(self) -> ResumoRankingDTO:
        resumo = resumir_ranking(classificar_obras(self._avaliacao_repo.listar_finalizadas()))
        return ResumoRankingDTO(
            total_obras=resumo.total_obras,
            media_conformidade=(
                round(resumo.media_conformidade, 2)
                if resumo.media_conformidade is not None else None
            ),
            obras_criticas=resumo.obras_criticas,
        )
