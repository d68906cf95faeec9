from pydantic import BaseModel


class ConformidadeDTO(BaseModel):
    avaliacao_id: str
    conforme: int
    nao_conforme: int
    nao_aplica: int
    taxa_conformidade: float | None
    taxa_nao_conformidade: float | None
    nao_conformidades_por_peso: dict[str, int]


class ConformidadeAgregadaDTO(BaseModel):
    """Contagens somadas de varias avaliacoes finalizadas."""

    total_avaliacoes: int
    conforme: int
    nao_conforme: int
    nao_aplica: int
    total_aplicavel: int
    taxa_conformidade: float | None
    taxa_nao_conformidade: float | None


class ConformidadeAvaliacaoDTO(BaseModel):
    avaliacao_id: str
    data: str | None
    obra_nome: str
    conforme: int
    nao_conforme: int
    total_aplicavel: int
    taxa_conformidade: float | None
    taxa_nao_conformidade: float | None


class UltimasAvaliacoesDTO(BaseModel):
    avaliacoes: list[ConformidadeAvaliacaoDTO]
    total: ConformidadeAgregadaDTO
