# sst/domain/avaliacao/conformidade.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResumoConformidade:
    """Contagens de uma avaliacao. N/A fica fora das taxas."""

    conforme: int
    nao_conforme: int
    nao_aplica: int

    @property
    def total_aplicavel(self) -> int:
        return self.conforme + self.nao_conforme

    @property
    def taxa_conformidade(self) -> float | None:
        """Percentual 0..100. None quando nao ha resposta aplicavel."""
        if self.total_aplicavel == 0:
            return None
        return self.conforme / self.total_aplicavel * 100

    @property
    def taxa_nao_conformidade(self) -> float | None:
        if self.total_aplicavel == 0:
            return None
        return self.nao_conforme / self.total_aplicavel * 100
