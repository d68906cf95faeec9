from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import duckdb
import pytest
from fastapi.testclient import TestClient

SCHEMA_PATH = Path(__file__).parent.parent.parent / "carga" / "schema.sql"

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Cria DuckDB in-memory com schema e dados deterministicos."""
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))

    # --- Obras ---
    conn.execute("""
        INSERT INTO dim_obra VALUES
        ('obra-1', 'Edificio Aurora - Torre A', '001'),
        ('obra-2', 'Residencial Ipe', '002'),
        ('obra-3', 'Galpao Norte', '003')
    """)

    # --- Questoes (peso = severidade) ---
    conn.execute("""
        INSERT INTO dim_questao VALUES
        ('q1', 'Guarda-corpo instalado', 1),
        ('q2', 'EPI em uso', 1),
        ('q3', 'Andaime inspecionado', 3),
        ('q4', 'Treinamento NR-35', 4),
        ('q5', 'Extintor sinalizado', 2)
    """)

    # --- Tabela de multas (subconjunto) ---
    conn.execute("""
        INSERT INTO dim_tabela_multa VALUES
        (1, 1, 1, 100, 100.00, 500.00),
        (2, 1, 101, 999999, 200.00, 800.00),
        (3, 3, 1, 100, 300.00, 900.00),
        (4, 4, 1, 999999, 1000.00, 2000.00)
    """)

    # --- Avaliacoes ---
    # av-1/av-2: obra-1 finalizadas (33.33% e 75%)
    # av-3: obra-2 finalizada 100%, sem colaboradores informados
    # av-4: alojamento (fora do ranking)
    # av-5: rascunho (fora do ranking), colaboradores = 0
    # av-6: obra-3 finalizada, somente N/A (fora do ranking)
    conn.execute("""
        INSERT INTO fato_avaliacao VALUES
        ('av-1', 'obra-1', 'obra', 'completed', 50, '2025-03-10'),
        ('av-2', 'obra-1', 'obra', 'completed', 50, '2025-04-10'),
        ('av-3', 'obra-2', 'obra', 'completed', NULL, '2025-04-12'),
        ('av-4', 'obra-2', 'alojamento', 'completed', 20, '2025-04-12'),
        ('av-5', 'obra-3', 'obra', 'draft', 0, '2025-05-01'),
        ('av-6', 'obra-3', 'obra', 'completed', 30, '2025-05-02')
    """)

    conn.execute("""
        INSERT INTO fato_resposta VALUES
        ('av-1', 'q1', 'nao'), ('av-1', 'q2', 'nao'), ('av-1', 'q3', 'sim'), ('av-1', 'q4', 'na'),
        ('av-2', 'q1', 'sim'), ('av-2', 'q2', 'sim'), ('av-2', 'q3', 'sim'), ('av-2', 'q4', 'nao'),
        ('av-3', 'q1', 'sim'), ('av-3', 'q2', 'sim'), ('av-3', 'q3', 'sim'), ('av-3', 'q5', 'sim'),
        ('av-4', 'q1', 'nao'), ('av-4', 'q2', 'nao'),
        ('av-5', 'q1', 'nao'),
        ('av-6', 'q1', 'na'), ('av-6', 'q2', 'na')
    """)

    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from sst.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from sst.infrastructure.config import get_settings
    get_settings.cache_clear()

    from sst.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
