# carga/tabela_multas.py
#
# Parse and validate the regulatory penalty table CSV.
#
# Design decisions:
#   - Monetary columns are read as strings and cast to Decimal(10, 2) by
#     polars so no value ever passes through float.
#   - Validation is strict: a single bad row aborts the load. A partially
#     loaded table would silently under-estimate penalties.
#   - Overlapping headcount ranges are NOT rejected here. The estimator takes
#     the first matching row, so pk_faixa preserves the CSV order.
#
# Invariants on the returned DataFrame:
#   - peso >= 1, 0 <= colaboradores_min <= colaboradores_max.
#   - 0 <= valor_min <= valor_max.
#   - pk_faixa is 1..n in CSV order.
from __future__ import annotations

from pathlib import Path

import polars as pl

COLUNAS: tuple[str, ...] = (
    "peso",
    "colaboradores_min",
    "colaboradores_max",
    "valor_min",
    "valor_max",
)


class CargaError(Exception):
    """Raised when the penalty table source is missing or invalid.

    The message names the offending column or row so the operator can fix the
    CSV without reading the loader code.
    """


def parse_tabela_multas(path: Path) -> pl.DataFrame:
    """Read the CSV into typed columns. Raises CargaError on missing file/columns."""
    if not path.exists():
        raise CargaError(f"Tabela de multas nao encontrada: {path}")

    df = pl.read_csv(path, infer_schema=False)
    faltando = [c for c in COLUNAS if c not in df.columns]
    if faltando:
        raise CargaError(f"Colunas ausentes na tabela de multas: {', '.join(faltando)}")

    try:
        return df.select(
            pl.col("peso").str.strip_chars().cast(pl.Int32),
            pl.col("colaboradores_min").str.strip_chars().cast(pl.Int32),
            pl.col("colaboradores_max").str.strip_chars().cast(pl.Int32),
            pl.col("valor_min").str.strip_chars().cast(pl.Decimal(10, 2)),
            pl.col("valor_max").str.strip_chars().cast(pl.Decimal(10, 2)),
        )
    except pl.exceptions.InvalidOperationError as err:
        raise CargaError(f"Valor nao numerico na tabela de multas: {err}") from err


def _valor(coluna: str) -> pl.Expr:
    # Comparacao apenas; o valor persistido continua Decimal.
    return pl.col(coluna).cast(pl.Float64)


def validate_tabela_multas(df: pl.DataFrame) -> pl.DataFrame:
    """Check row invariants and add pk_faixa.

    Raises:
        CargaError: if the table is empty or any row breaks an invariant. The
            message lists the 1-based CSV line numbers of the offending rows.
    """
    if df.is_empty():
        raise CargaError("Tabela de multas vazia")

    df = df.with_row_index("pk_faixa", offset=1)

    invalidas = df.filter(
        pl.any_horizontal([pl.col(c).is_null() for c in COLUNAS])
        | (pl.col("peso") < 1)
        | (pl.col("colaboradores_min") < 0)
        | (pl.col("colaboradores_min") > pl.col("colaboradores_max"))
        | (_valor("valor_min") < 0)
        | (_valor("valor_min") > _valor("valor_max"))
    )
    if not invalidas.is_empty():
        # +1 for the CSV header line.
        linhas = [str(pk + 1) for pk in invalidas["pk_faixa"].to_list()]
        raise CargaError(f"Linhas invalidas na tabela de multas: {', '.join(linhas)}")

    return df.select("pk_faixa", *COLUNAS).with_columns(pl.col("pk_faixa").cast(pl.Int32))
