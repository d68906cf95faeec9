from typing import Literal

from fastapi import APIRouter, Depends, Query

from sst.application.dtos.ranking_dto import PosicaoRankingDTO, ResumoRankingDTO
from sst.application.services.ranking_service import RankingService
from sst.interfaces.api.dependencies import get_ranking_service

router = APIRouter()

CampoOrdenacao = Literal["posicao", "obra_numero", "obra_nome", "taxa_conformidade", "total_avaliacoes"]


@router.get("/obras/ranking", response_model=list[PosicaoRankingDTO])
def get_ranking(
    q: str | None = Query(default=None, max_length=200),
    ordenar_por: CampoOrdenacao = Query(default="posicao"),
    ordem: Literal["asc", "desc"] = Query(default="asc"),
    service: RankingService = Depends(get_ranking_service),  # noqa: B008
) -> list[PosicaoRankingDTO]:
    return service.ranking(termo=q, ordenar_por=ordenar_por, ordem=ordem)


@router.get("/obras/ranking/resumo", response_model=ResumoRankingDTO)
def get_resumo_ranking(
    service: RankingService = Depends(get_ranking_service),  # noqa: B008
) -> ResumoRankingDTO:
    return service.resumo()
