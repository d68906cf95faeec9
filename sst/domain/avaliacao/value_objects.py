# sst/domain/avaliacao/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class FaixaTabelaMulta:
    """Linha da tabela de multas: (peso, faixa de colaboradores) -> (min, max).

    Limites de colaboradores sao inclusivos. Sobreposicao entre linhas do mesmo
    peso NAO e validada aqui (ver ADR em multa_service).
    """

    peso: int
    colaboradores_min: int
    colaboradores_max: int
    valor_min: Decimal
    valor_max: Decimal

    def __post_init__(self) -> None:
        if self.valor_min < _ZERO or self.valor_max < _ZERO:
            raise ValueError("Valores da tabela de multas nao podem ser negativos")
        if self.valor_min > self.valor_max:
            raise ValueError(
                f"Faixa invalida: valor_min {self.valor_min} > valor_max {self.valor_max}"
            )

    def aplica_a(self, peso: int, qtd_colaboradores: int) -> bool:
        return (
            self.peso == peso
            and self.colaboradores_min <= qtd_colaboradores <= self.colaboradores_max
        )


@dataclass(frozen=True)
class FaixaMulta:
    """Faixa de exposicao monetaria estimada. Decimal, nunca float."""

    minimo: Decimal = _ZERO
    maximo: Decimal = _ZERO

    def __post_init__(self) -> None:
        if self.minimo < _ZERO:
            raise ValueError("Multa minima nao pode ser negativa")
        if self.minimo > self.maximo:
            raise ValueError("Multa minima maior que a maxima")

    @property
    def medio(self) -> Decimal:
        """Ponto medio da faixa, na mesma base (corrigida ou nao) de minimo e maximo."""
        return (self.minimo + self.maximo) / 2

    @property
    def zerada(self) -> bool:
        return self.maximo == _ZERO
