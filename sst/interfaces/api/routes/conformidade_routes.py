from typing import Literal

from fastapi import APIRouter, Depends, Query

from sst.application.dtos.conformidade_dto import ConformidadeAgregadaDTO, UltimasAvaliacoesDTO
from sst.application.services.conformidade_service import LIMITE_ULTIMAS, ConformidadeService
from sst.domain.avaliacao.enums import TipoAvaliacao
from sst.interfaces.api.dependencies import get_conformidade_service

router = APIRouter()

Tipo = Literal["obra", "alojamento"]


def _tipo(tipo: Tipo | None) -> TipoAvaliacao | None:
    return TipoAvaliacao(tipo) if tipo else None


@router.get("/conformidade", response_model=ConformidadeAgregadaDTO)
def get_conformidade_agregada(
    obra_id: str | None = Query(default=None, min_length=1, max_length=64),
    tipo: Tipo | None = Query(default=None),
    service: ConformidadeService = Depends(get_conformidade_service),  # noqa: B008
) -> ConformidadeAgregadaDTO:
    return service.agregado(obra_id=obra_id, tipo=_tipo(tipo))


@router.get("/conformidade/ultimas", response_model=UltimasAvaliacoesDTO)
def get_conformidade_ultimas(
    obra_id: str | None = Query(default=None, min_length=1, max_length=64),
    tipo: Tipo | None = Query(default=None),
    limite: int = Query(default=LIMITE_ULTIMAS, ge=1, le=50),
    service: ConformidadeService = Depends(get_conformidade_service),  # noqa: B008
) -> UltimasAvaliacoesDTO:
    return service.ultimas(limite=limite, obra_id=obra_id, tipo=_tipo(tipo))
