# sst/domain/avaliacao/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .enums import RespostaValor, StatusAvaliacao, TipoAvaliacao

# Peso assumido quando a resposta chega sem questao vinculada.
PESO_PADRAO = 1


@dataclass(frozen=True)
class Resposta:
    """Resposta a uma questao. O peso da questao e desnormalizado aqui."""

    questao_id: str
    valor: RespostaValor
    peso: int = PESO_PADRAO

    def __post_init__(self) -> None:
        inteiro = isinstance(self.peso, int) and not isinstance(self.peso, bool)
        if not inteiro or self.peso < 1:
            raise ValueError(f"Peso da questao deve ser inteiro positivo, recebido {self.peso!r}")


@dataclass(frozen=True)
class Obra:
    id: str
    nome: str = "Obra"
    numero: str = ""


@dataclass(frozen=True)
class Avaliacao:
    """Aggregate Root. Imutavel: conformidade, multa e ranking sao calculados
    por funcoes puras a partir dela (Functional Core pattern)."""

    id: str
    obra_id: str
    tipo: TipoAvaliacao
    status: StatusAvaliacao
    qtd_colaboradores: int | None = None
    respostas: tuple[Resposta, ...] = ()
    obra: Obra | None = None
    data: date | None = None

    @property
    def finalizada(self) -> bool:
        return self.status is StatusAvaliacao.COMPLETED

    def contar(self, valor: RespostaValor) -> int:
        return sum(1 for r in self.respostas if r.valor is valor)
