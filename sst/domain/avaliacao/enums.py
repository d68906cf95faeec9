# sst/domain/avaliacao/enums.py
from __future__ import annotations

from enum import Enum


class RespostaValor(Enum):
    """Tri-estado de uma resposta de checklist. Valores batem com o banco."""

    CONFORME = "sim"
    NAO_CONFORME = "nao"
    NAO_APLICA = "na"


class StatusAvaliacao(Enum):
    DRAFT = "draft"
    COMPLETED = "completed"


class TipoAvaliacao(Enum):
    OBRA = "obra"
    ALOJAMENTO = "alojamento"
