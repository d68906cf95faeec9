from pydantic import BaseModel


class PosicaoRankingDTO(BaseModel):
    posicao: int
    obra_id: str
    obra_nome: str
    obra_numero: str
    taxa_conformidade: float
    faixa_conformidade: str
    total_avaliacoes: int
    total_conforme: int
    total_nao_conforme: int


class ResumoRankingDTO(BaseModel):
    total_obras: int
    media_conformidade: float | None
    obras_criticas: int
