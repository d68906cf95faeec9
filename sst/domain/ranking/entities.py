# sst/domain/ranking/entities.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FaixaConformidade(Enum):
    ADEQUADA = "Adequada"
    ATENCAO = "Atencao"
    CRITICA = "Critica"


# ADR: Limiares como constante de modulo, iguais aos usados no painel.
LIMIAR_ADEQUADA = 80.0
LIMIAR_ATENCAO = 60.0


def classificar_faixa(taxa: float) -> FaixaConformidade:
    if taxa >= LIMIAR_ADEQUADA:
        return FaixaConformidade.ADEQUADA
    if taxa >= LIMIAR_ATENCAO:
        return FaixaConformidade.ATENCAO
    return FaixaConformidade.CRITICA


@dataclass(frozen=True)
class PosicaoRanking:
    """Uma obra no ranking. Calculada a cada requisicao, nunca persistida."""

    obra_id: str
    obra_nome: str
    obra_numero: str
    taxa_conformidade: float
    total_avaliacoes: int
    posicao: int
    total_conforme: int = 0
    total_nao_conforme: int = 0

    @property
    def faixa(self) -> FaixaConformidade:
        return classificar_faixa(self.taxa_conformidade)


@dataclass(frozen=True)
class ResumoRanking:
    total_obras: int
    media_conformidade: float | None
    obras_criticas: int
