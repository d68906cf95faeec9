"""Resumo de conformidade de avaliacoes. Funcoes puras; o servico so carrega.

ADR: Agregados somam as respostas de todas as avaliacoes (media ponderada por
quantidade de respostas aplicaveis). E diferente do ranking, que faz a media
simples das taxas de cada avaliacao.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from sst.domain.avaliacao.conformidade import ResumoConformidade
from sst.domain.avaliacao.entities import Avaliacao
from sst.domain.avaliacao.enums import RespostaValor, TipoAvaliacao
from sst.domain.avaliacao.repository import AvaliacaoRepository

from ..dtos.conformidade_dto import (
    ConformidadeAgregadaDTO,
    ConformidadeAvaliacaoDTO,
    ConformidadeDTO,
    UltimasAvaliacoesDTO,
)
from .multa_service import distribuicao_por_peso

# Quantidade de avaliacoes recentes no comparativo.
LIMITE_ULTIMAS = 3


def calcular_conformidade(avaliacao: Avaliacao) -> ResumoConformidade:
    return ResumoConformidade(
        conforme=avaliacao.contar(RespostaValor.CONFORME),
        nao_conforme=avaliacao.contar(RespostaValor.NAO_CONFORME),
        nao_aplica=avaliacao.contar(RespostaValor.NAO_APLICA),
    )


def filtrar_finalizadas(
    avaliacoes: Iterable[Avaliacao],
    obra_id: str | None = None,
    tipo: TipoAvaliacao | None = None,
) -> list[Avaliacao]:
    """Rascunhos nunca entram. Filtros None nao restringem."""
    return [
        a for a in avaliacoes
        if a.finalizada
        and (obra_id is None or a.obra_id == obra_id)
        and (tipo is None or a.tipo is tipo)
    ]


def somar_conformidade(avaliacoes: Iterable[Avaliacao]) -> ResumoConformidade:
    conforme = nao_conforme = nao_aplica = 0
    for avaliacao in avaliacoes:
        resumo = calcular_conformidade(avaliacao)
        conforme += resumo.conforme
        nao_conforme += resumo.nao_conforme
        nao_aplica += resumo.nao_aplica
    return ResumoConformidade(conforme=conforme, nao_conforme=nao_conforme, nao_aplica=nao_aplica)


def agregar_conformidade(
    avaliacoes: Iterable[Avaliacao],
    obra_id: str | None = None,
    tipo: TipoAvaliacao | None = None,
) -> ResumoConformidade:
    """Funcao pura. Soma as respostas das avaliacoes finalizadas filtradas."""
    return somar_conformidade(filtrar_finalizadas(avaliacoes, obra_id, tipo))


def ultimas_avaliacoes(
    avaliacoes: Iterable[Avaliacao],
    limite: int = LIMITE_ULTIMAS,
    obra_id: str | None = None,
    tipo: TipoAvaliacao | None = None,
) -> list[Avaliacao]:
    """As `limite` avaliacoes finalizadas mais recentes, da mais nova para a mais antiga.

    Mesma data desempata pelo id (maior primeiro); sem data vai para o fim.
    """
    elegiveis = filtrar_finalizadas(avaliacoes, obra_id, tipo)
    elegiveis.sort(key=lambda a: (a.data or date.min, a.id), reverse=True)
    return elegiveis[:limite]


def _arredondar(taxa: float | None) -> float | None:
    return round(taxa, 2) if taxa is not None else None


def _agregado_dto(resumo: ResumoConformidade, total_avaliacoes: int) -> ConformidadeAgregadaDTO:
    return ConformidadeAgregadaDTO(
        total_avaliacoes=total_avaliacoes,
        conforme=resumo.conforme,
        nao_conforme=resumo.nao_conforme,
        nao_aplica=resumo.nao_aplica,
        total_aplicavel=resumo.total_aplicavel,
        taxa_conformidade=_arredondar(resumo.taxa_conformidade),
        taxa_nao_conformidade=_arredondar(resumo.taxa_nao_conformidade),
    )


def _linha_dto(avaliacao: Avaliacao) -> ConformidadeAvaliacaoDTO:
    resumo = calcular_conformidade(avaliacao)
    return ConformidadeAvaliacaoDTO(
        avaliacao_id=avaliacao.id,
        data=avaliacao.data.isoformat() if avaliacao.data else None,
        obra_nome=avaliacao.obra.nome if avaliacao.obra else "Obra",
        conforme=resumo.conforme,
        nao_conforme=resumo.nao_conforme,
        total_aplicavel=resumo.total_aplicavel,
        taxa_conformidade=_arredondar(resumo.taxa_conformidade),
        taxa_nao_conformidade=_arredondar(resumo.taxa_nao_conformidade),
    )


class ConformidadeService:
    def __init__(self, avaliacao_repo: AvaliacaoRepository) -> None:
        self._avaliacao_repo = avaliacao_repo

    def obter(self, avaliacao_id: str) -> ConformidadeDTO | None:
        avaliacao = self._avaliacao_repo.buscar_por_id(avaliacao_id)
        if avaliacao is None:
            return None

        resumo = calcular_conformidade(avaliacao)
        return ConformidadeDTO(
            avaliacao_id=avaliacao.id,
            conforme=resumo.conforme,
            nao_conforme=resumo.nao_conforme,
            nao_aplica=resumo.nao_aplica,
            taxa_conformidade=_arredondar(resumo.taxa_conformidade),
            taxa_nao_conformidade=_arredondar(resumo.taxa_nao_conformidade),
            nao_conformidades_por_peso={
                str(peso): qtd for peso, qtd in distribuicao_por_peso(avaliacao).items()
            },
        )

    def agregado(
        self,
        obra_id: str | None = None,
        tipo: TipoAvaliacao | None = None,
    ) -> ConformidadeAgregadaDTO:
        avaliacoes = filtrar_finalizadas(self._avaliacao_repo.listar_finalizadas(), obra_id, tipo)
        return _agregado_dto(somar_conformidade(avaliacoes), len(avaliacoes))

    def ultimas(
        self,
        limite: int = LIMITE_ULTIMAS,
        obra_id: str | None = None,
        tipo: TipoAvaliacao | None = None,
    ) -> UltimasAvaliacoesDTO:
        recentes = ultimas_avaliacoes(
            self._avaliacao_repo.listar_finalizadas(), limite, obra_id, tipo
        )
        return UltimasAvaliacoesDTO(
            avaliacoes=[_linha_dto(a) for a in recentes],
            total=_agregado_dto(somar_conformidade(recentes), len(recentes)),
        )
