# carga/build_duckdb.py
#
# Atomic DuckDB build: staging Parquet files -> final .duckdb artifact.
#
# Design decisions:
#   - Written to a .tmp.duckdb first and renamed only on success. The API never
#     opens a half-built database.
#   - schema.sql is the single source of truth for table structure.
#   - Staging files are loaded with DuckDB's read_parquet(); Parquet files that
#     do not exist are skipped. Only tabela_multas is produced by this loader;
#     obras/questoes/avaliacoes/respostas are exports from the CRUD system and
#     are optional.
from __future__ import annotations

from pathlib import Path

import duckdb

from carga.log import log

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Order matters: dimension tables before the facts that reference them.
STAGING_TO_TABLE: dict[str, str] = {
    "tabela_multas": "dim_tabela_multa",
    "obras": "dim_obra",
    "questoes": "dim_questao",
    "avaliacoes": "fato_avaliacao",
    "respostas": "fato_resposta",
}


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Build the DuckDB database atomically from staging Parquet files.

    If any step raises, the tmp file is deleted and output_path is untouched.

    Returns:
        The final output_path after a successful atomic rename.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            _load_staging_data(conn, staging_dir)
        finally:
            conn.close()

        if output_path.exists():
            output_path.unlink()
        tmp_path.rename(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    loaded = 0
    for file_stem, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_dir / f"{file_stem}.parquet"
        if not parquet_path.exists():
            continue

        log(f"  Loading {file_stem} -> {table_name}...")

        table_cols = [
            row[0]
            for row in conn.execute(
                "SELECT column_name FROM information_schema.columns "
                "WHERE table_name = ? ORDER BY ordinal_position",
                [table_name],
            ).fetchall()
        ]
        # S608 noqa: table_name comes from STAGING_TO_TABLE and the path is a
        # local staging file; neither is user input.
        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(
                f"SELECT name FROM parquet_schema('{posix_path}')"  # noqa: S608
            ).fetchall()
        }

        shared_cols = [c for c in table_cols if c in parquet_cols]
        if not shared_cols:
            continue

        cols_sql = ", ".join(shared_cols)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {cols_sql} FROM read_parquet('{posix_path}')"
        )
        loaded += 1

    log(f"  DuckDB: {loaded} tables loaded")


def contar_linhas(output_path: Path) -> dict[str, int]:
    """Row count per table of a finished database (smoke test)."""
    conn = duckdb.connect(str(output_path), read_only=True)
    try:
        counts: dict[str, int] = {}
        for (table_name,) in conn.execute("SHOW TABLES").fetchall():
            row = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()  # noqa: S608
            counts[table_name] = int(row[0]) if row else 0
        return counts
    finally:
        conn.close()
