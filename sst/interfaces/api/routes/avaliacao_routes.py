from fastapi import APIRouter, Depends, HTTPException, Path

from sst.application.dtos.conformidade_dto import ConformidadeDTO
from sst.application.dtos.multa_dto import EstimativaMultaDTO
from sst.application.services.conformidade_service import ConformidadeService
from sst.application.services.estimativa_service import EstimativaService
from sst.interfaces.api.dependencies import get_conformidade_service, get_estimativa_service

router = APIRouter()


@router.get("/avaliacoes/{avaliacao_id}/multa", response_model=EstimativaMultaDTO)
def get_multa(
    avaliacao_id: str = Path(..., min_length=1, max_length=64),
    service: EstimativaService = Depends(get_estimativa_service),  # noqa: B008
) -> EstimativaMultaDTO:
    estimativa = service.estimar(avaliacao_id)
    if estimativa is None:
        raise HTTPException(status_code=404, detail="Avaliacao nao encontrada")
    return estimativa

@router.get("/avaliacoes/{avaliacao_id}/conformidade", response_model=ConformidadeDTO)
def get_conformidade(
    avaliacao_id: str = Path(..., min_length=1, max_length=64),
    service: ConformidadeService = Depends(get_conformidade_service),  # noqa: B008
) -> ConformidadeDTO:
    resumo = service.obter(avaliacao_id)
    if resumo is None:
        raise HTTPException(status_code=404, detail="Avaliacao nao encontrada")
    return resumo
