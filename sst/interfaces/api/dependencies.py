from sst.application.services.conformidade_service import ConformidadeService
from sst.application.services.estimativa_service import EstimativaService
from sst.application.services.ranking_service import RankingService
from sst.infrastructure.config import get_settings
from sst.infrastructure.duckdb_connection import get_connection
from sst.infrastructure.repositories.duckdb_avaliacao_repo import DuckDBAvaliacaoRepo
from sst.infrastructure.repositories.duckdb_tabela_multa_repo import DuckDBTabelaMultaRepo


def get_estimativa_service() -> EstimativaService:
    conn = get_connection()
    return EstimativaService(
        avaliacao_repo=DuckDBAvaliacaoRepo(conn),
        tabela_repo=DuckDBTabelaMultaRepo(conn),
        fator=get_settings().fator_correcao,
    )


def get_conformidade_service() -> ConformidadeService:
    return ConformidadeService(avaliacao_repo=DuckDBAvaliacaoRepo(get_connection()))


def get_ranking_service() -> RankingService:
    return RankingService(avaliacao_repo=DuckDBAvaliacaoRepo(get_connection()))
