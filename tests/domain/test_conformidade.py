from datetime import date

import pytest

from sst.application.services.conformidade_service import (
    agregar_conformidade,
    calcular_conformidade,
    ultimas_avaliacoes,
)
from sst.domain.avaliacao.entities import PESO_PADRAO, Avaliacao, Resposta
from sst.domain.avaliacao.enums import RespostaValor, StatusAvaliacao, TipoAvaliacao


def _avaliacao(*valores: RespostaValor) -> Avaliacao:
    return Avaliacao(
        id="av-1",
        obra_id="obra-1",
        tipo=TipoAvaliacao.OBRA,
        status=StatusAvaliacao.COMPLETED,
        respostas=tuple(Resposta(questao_id=f"q{i}", valor=v) for i, v in enumerate(valores)),
    )


def test_contagens_por_valor():
    resumo = calcular_conformidade(
        _avaliacao(
            RespostaValor.CONFORME,
            RespostaValor.CONFORME,
            RespostaValor.NAO_CONFORME,
            RespostaValor.NAO_APLICA,
        )
    )
    assert (resumo.conforme, resumo.nao_conforme, resumo.nao_aplica) == (2, 1, 1)
    assert resumo.total_aplicavel == 3


def test_na_fica_fora_da_taxa():
    """3 conforme + 1 nao conforme + 10 N/A -> 75%, nao 3/14."""
    valores = [RespostaValor.CONFORME] * 3 + [RespostaValor.NAO_CONFORME] + [RespostaValor.NAO_APLICA] * 10
    resumo = calcular_conformidade(_avaliacao(*valores))
    assert resumo.taxa_conformidade == pytest.approx(75.0)
    assert resumo.taxa_nao_conformidade == pytest.approx(25.0)


def test_somente_na_nao_tem_taxa():
    resumo = calcular_conformidade(_avaliacao(RespostaValor.NAO_APLICA, RespostaValor.NAO_APLICA))
    assert resumo.taxa_conformidade is None
    assert resumo.taxa_nao_conformidade is None


def test_sem_respostas_nao_tem_taxa():
    assert calcular_conformidade(_avaliacao()).taxa_conformidade is None


def test_resposta_sem_peso_assume_peso_padrao():
    assert Resposta(questao_id="q1", valor=RespostaValor.NAO_CONFORME).peso == PESO_PADRAO == 1


# ---------- Agregado de varias avaliacoes ----------


def _contagens(
    avaliacao_id: str,
    conforme: int,
    nao_conforme: int,
    nao_aplica: int = 0,
    obra_id: str = "obra-1",
    tipo: TipoAvaliacao = TipoAvaliacao.OBRA,
    status: StatusAvaliacao = StatusAvaliacao.COMPLETED,
    data: date | None = None,
) -> Avaliacao:
    valores = (
        [RespostaValor.CONFORME] * conforme
        + [RespostaValor.NAO_CONFORME] * nao_conforme
        + [RespostaValor.NAO_APLICA] * nao_aplica
    )
    return Avaliacao(
        id=avaliacao_id,
        obra_id=obra_id,
        tipo=tipo,
        status=status,
        respostas=tuple(Resposta(questao_id=f"q{i}", valor=v) for i, v in enumerate(valores)),
        data=data,
    )


AVALIACOES = [
    _contagens("av-1", 1, 0, data=date(2025, 1, 10)),
    _contagens("av-2", 1, 9, nao_aplica=2, data=date(2025, 2, 10)),
    _contagens("av-3", 3, 1, obra_id="obra-2", data=date(2025, 3, 10)),
    _contagens("av-4", 0, 2, tipo=TipoAvaliacao.ALOJAMENTO, data=date(2025, 4, 10)),
    _contagens("av-5", 0, 5, status=StatusAvaliacao.DRAFT, data=date(2025, 5, 10)),
]


def test_agregado_soma_respostas_nao_faz_media_das_taxas():
    """av-1 (100%) + av-2 (10%): 2/11, nao (100+10)/2."""
    resumo = agregar_conformidade(AVALIACOES, obra_id="obra-1", tipo=TipoAvaliacao.OBRA)
    assert (resumo.conforme, resumo.nao_conforme, resumo.nao_aplica) == (2, 9, 2)
    assert resumo.taxa_conformidade == pytest.approx(200 / 11)


def test_agregado_ignora_rascunho():
    resumo = agregar_conformidade(AVALIACOES)
    assert (resumo.conforme, resumo.nao_conforme) == (5, 12)


def test_agregado_filtra_por_tipo():
    resumo = agregar_conformidade(AVALIACOES, tipo=TipoAvaliacao.ALOJAMENTO)
    assert (resumo.conforme, resumo.nao_conforme) == (0, 2)
    assert resumo.taxa_conformidade == pytest.approx(0.0)


def test_agregado_sem_avaliacoes_nao_tem_taxa():
    resumo = agregar_conformidade(AVALIACOES, obra_id="inexistente")
    assert resumo.total_aplicavel == 0
    assert resumo.taxa_conformidade is None


def test_ultimas_avaliacoes_mais_recentes_primeiro_sem_rascunho():
    assert [a.id for a in ultimas_avaliacoes(AVALIACOES)] == ["av-4", "av-3", "av-2"]


def test_ultimas_avaliacoes_respeitam_filtro_e_limite():
    recentes = ultimas_avaliacoes(AVALIACOES, limite=1, obra_id="obra-1", tipo=TipoAvaliacao.OBRA)
    assert [a.id for a in recentes] == ["av-2"]


def test_ultimas_avaliacoes_sem_data_vao_para_o_fim():
    avaliacoes = [
        _contagens("av-b", 1, 0),
        _contagens("av-a", 1, 0, data=date(2024, 1, 1)),
        _contagens("av-c", 1, 0, data=date(2024, 1, 1)),
    ]
    assert [a.id for a in ultimas_avaliacoes(avaliacoes)] == ["av-c", "av-a", "av-b"]
