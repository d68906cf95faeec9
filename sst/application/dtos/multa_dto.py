from typing import Literal

from pydantic import BaseModel, Field


class FaixaTabelaMultaDTO(BaseModel):
    peso: int
    colaboradores_min: int
    colaboradores_max: int
    valor_min: str
    valor_max: str


class EstimativaMultaDTO(BaseModel):
    avaliacao_id: str | None
    qtd_colaboradores: int
    fator_correcao: str
    minimo: str
    maximo: str
    medio: str
    # Ponto medio antes do fator de correcao.
    penalidade_total: str
    nao_conformidades_por_peso: dict[str, int]


# Formato de entrada da previa: mesmo formato devolvido pela API de avaliacoes.
class QuestaoPayload(BaseModel):
    weight: int | None = Field(default=None, ge=1)


class RespostaPayload(BaseModel):
    question_id: str
    answer: Literal["sim", "nao", "na"]
    question: QuestaoPayload | None = None


class AvaliacaoPayload(BaseModel):
    employees_count: int | None = None
    status: Literal["draft", "completed"] = "draft"
    type: Literal["obra", "alojamento"] = "obra"
    work_id: str | None = None
    answers: list[RespostaPayload] = Field(default_factory=list, max_length=2000)
