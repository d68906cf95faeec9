"""Estimativa de multa por nao conformidades. Funcao pura. Zero IO.

ADR: Estimativa e permissiva (previa, nao calculo juridico). Tabela vazia,
peso sem faixa correspondente ou quantidade de colaboradores ausente degradam
para contribuicao zero, nunca para excecao.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from decimal import Decimal

from sst.domain.avaliacao.entities import Avaliacao
from sst.domain.avaliacao.enums import RespostaValor
from sst.domain.avaliacao.value_objects import FaixaMulta, FaixaTabelaMulta

# Fator de correcao monetaria aplicado sobre os valores da tabela.
FATOR_CORRECAO_MONETARIA = Decimal("1.0641")

# Colaboradores assumidos quando a avaliacao ainda nao informa o efetivo.
QTD_COLABORADORES_PADRAO = 100


def quantidade_colaboradores(avaliacao: Avaliacao) -> int:
    """Efetivo usado na busca de faixa. None ou <= 0 cai no padrao."""
    qtd = avaliacao.qtd_colaboradores
    if qtd is None or qtd <= 0:
        return QTD_COLABORADORES_PADRAO
    return qtd


def distribuicao_por_peso(avaliacao: Avaliacao) -> dict[int, int]:
    """Quantidade de nao conformidades agrupadas por peso, ordenadas por peso."""
    contagem = Counter(
        r.peso for r in avaliacao.respostas if r.valor is RespostaValor.NAO_CONFORME
    )
    return dict(sorted(contagem.items()))


def buscar_faixa(
    tabela: Iterable[FaixaTabelaMulta],
    peso: int,
    qtd_colaboradores: int,
) -> FaixaTabelaMulta | None:
    """Primeira linha da tabela que cobre (peso, colaboradores).

    ADR: Tabelas com faixas sobrepostas nao sao rejeitadas; vence a primeira
    na ordem de iteracao.
    """
    return next((f for f in tabela if f.aplica_a(peso, qtd_colaboradores)), None)


def estimar_multa(
    avaliacao: Avaliacao,
    tabela: Sequence[FaixaTabelaMulta],
    *,
    fator: Decimal = FATOR_CORRECAO_MONETARIA,
) -> FaixaMulta:
    """Funcao pura. Mesma entrada (e mesma ordem da tabela) = mesma saida."""
    qtd = quantidade_colaboradores(avaliacao)

    minimo = Decimal("0")
    maximo = Decimal("0")
    for peso, quantidade in distribuicao_por_peso(avaliacao).items():
        faixa = buscar_faixa(tabela, peso, qtd)
        if faixa is None:
            continue
        minimo += faixa.valor_min * quantidade
        maximo += faixa.valor_max * quantidade

    return FaixaMulta(minimo=minimo * fator, maximo=maximo * fator)


def penalidade_total(avaliacao: Avaliacao, tabela: Sequence[FaixaTabelaMulta]) -> Decimal:
    """Ponto medio da faixa SEM o fator de correcao.

    E o valor registrado como penalidade total da avaliacao; o `medio` da
    estimativa ja vem corrigido.
    """
    return estimar_multa(avaliacao, tabela, fator=Decimal("1")).medio
