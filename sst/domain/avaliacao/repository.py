# sst/domain/avaliacao/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Avaliacao
from .value_objects import FaixaTabelaMulta


class AvaliacaoRepository(Protocol):
    def buscar_por_id(self, avaliacao_id: str) -> Avaliacao | None: ...
    def listar_finalizadas(self) -> list[Avaliacao]: ...


class TabelaMultaRepository(Protocol):
    def listar(self) -> list[FaixaTabelaMulta]: ...
