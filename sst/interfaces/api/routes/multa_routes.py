from fastapi import APIRouter, Depends

from sst.application.dtos.multa_dto import AvaliacaoPayload, EstimativaMultaDTO, FaixaTabelaMultaDTO
from sst.application.services.estimativa_service import EstimativaService
from sst.interfaces.api.dependencies import get_estimativa_service

router = APIRouter()


@router.get("/tabela-multas", response_model=list[FaixaTabelaMultaDTO])
def get_tabela_multas(
    service: EstimativaService = Depends(get_estimativa_service),  # noqa: B008
) -> list[FaixaTabelaMultaDTO]:
    return service.tabela()


@router.post("/multas/estimativa", response_model=EstimativaMultaDTO)
def post_estimativa(
    payload: AvaliacaoPayload,
    service: EstimativaService = Depends(get_estimativa_service),  # noqa: B008
) -> EstimativaMultaDTO:
    return service.estimar_previa(payload)
