# carga/log.py
#
# Loader output: one line per event on stdout, prefixed with the time elapsed
# since the loader started. `etapa` wraps a step and reports its duration.
from __future__ import annotations

import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

_start = time.monotonic()


def _relogio(segundos: float) -> str:
    minutes, seconds = divmod(int(segundos), 60)
    return f"{minutes:02d}:{seconds:02d}"


def log(message: str) -> None:
    sys.stdout.write(f"[carga {_relogio(time.monotonic() - _start)}] {message}\n")
    sys.stdout.flush()


@contextmanager
def etapa(nome: str) -> Iterator[None]:
    """Log start and end of a loader step. A failing step logs and re-raises."""
    inicio = time.monotonic()
    log(f"{nome}...")
    try:
        yield
    except Exception:
        log(f"{nome}: FALHOU")
        raise
    log(f"{nome}: ok ({time.monotonic() - inicio:.1f}s)")
