from __future__ import annotations

from decimal import Decimal

from sst.domain.avaliacao.entities import PESO_PADRAO, Avaliacao, Resposta
from sst.domain.avaliacao.enums import RespostaValor, StatusAvaliacao, TipoAvaliacao
from sst.domain.avaliacao.repository import AvaliacaoRepository, TabelaMultaRepository
from sst.domain.avaliacao.value_objects import FaixaTabelaMulta

from ..dtos.multa_dto import AvaliacaoPayload, EstimativaMultaDTO, FaixaTabelaMultaDTO
from .multa_service import (
    FATOR_CORRECAO_MONETARIA,
    distribuicao_por_peso,
    estimar_multa,
    penalidade_total,
    quantidade_colaboradores,
)


def _moeda(valor: Decimal) -> str:
    return f"{valor:.2f}"


def avaliacao_de_payload(payload: AvaliacaoPayload) -> Avaliacao:
    """Converte o formato de entrada da API em entidade de dominio."""
    respostas = tuple(
        Resposta(
            questao_id=r.question_id,
            valor=RespostaValor(r.answer),
            peso=(r.question.weight if r.question and r.question.weight else PESO_PADRAO),
        )
        for r in payload.answers
    )
    return Avaliacao(
        id="previa",
        obra_id=payload.work_id or "",
        tipo=TipoAvaliacao(payload.type),
        status=StatusAvaliacao(payload.status),
        qtd_colaboradores=payload.employees_count,
        respostas=respostas,
    )


class EstimativaService:
    def __init__(
        self,
        avaliacao_repo: AvaliacaoRepository,
        tabela_repo: TabelaMultaRepository,
        fator: Decimal = FATOR_CORRECAO_MONETARIA,
    ) -> None:
        self._avaliacao_repo = avaliacao_repo
        self._tabela_repo = tabela_repo
        self._fator = fator

    def estimar(self, avaliacao_id: str) -> EstimativaMultaDTO | None:
        avaliacao = self._avaliacao_repo.buscar_por_id(avaliacao_id)
        if avaliacao is None:
            return None
        return self._estimar(avaliacao, self._tabela_repo.listar(), avaliacao_id=avaliacao.id)

    def estimar_previa(self, payload: AvaliacaoPayload) -> EstimativaMultaDTO:
        """Previa para avaliacao ainda nao salva (rascunho incluso)."""
        return self._estimar(avaliacao_de_payload(payload), self._tabela_repo.listar(), avaliacao_id=None)

    def tabela(self) -> list[FaixaTabelaMultaDTO]:
        return [
            FaixaTabelaMultaDTO(
                peso=f.peso,
                colaboradores_min=f.colaboradores_min,
                colaboradores_max=f.colaboradores_max,
                valor_min=_moeda(f.valor_min),
                valor_max=_moeda(f.valor_max),
            )
            for f in self._tabela_repo.listar()
        ]

    def _estimar(
        self,
        avaliacao: Avaliacao,
        tabela: list[FaixaTabelaMulta],
        avaliacao_id: str | None,
    ) -> EstimativaMultaDTO:
        faixa = estimar_multa(avaliacao, tabela, fator=self._fator)
        return EstimativaMultaDTO(
            avaliacao_id=avaliacao_id,
            qtd_colaboradores=quantidade_colaboradores(avaliacao),
            fator_correcao=str(self._fator),
            minimo=_moeda(faixa.minimo),
            maximo=_moeda(faixa.maximo),
            medio=_moeda(faixa.medio),
            penalidade_total=_moeda(penalidade_total(avaliacao, tabela)),
            nao_conformidades_por_peso={
                str(peso): qtd for peso, qtd in distribuicao_por_peso(avaliacao).items()
            },
        )
