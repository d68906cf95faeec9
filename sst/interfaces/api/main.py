from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from sst.infrastructure.config import get_settings
from sst.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from sst.infrastructure.duckdb_connection import get_connection
    get_connection()  # falha no startup se a base da carga nao existir
    yield


app = FastAPI(
    title="SST Conformidade API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Rotas: ranking de obras, conformidade e multas
from sst.interfaces.api.routes.avaliacao_routes import router as avaliacao_router  # noqa: E402
from sst.interfaces.api.routes.conformidade_routes import router as conformidade_router  # noqa: E402
from sst.interfaces.api.routes.multa_routes import router as multa_router  # noqa: E402
from sst.interfaces.api.routes.ranking_routes import router as ranking_router  # noqa: E402

app.include_router(ranking_router, prefix="/api")
app.include_router(avaliacao_router, prefix="/api")
app.include_router(conformidade_router, prefix="/api")
app.include_router(multa_router, prefix="/api")
