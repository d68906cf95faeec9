from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from sst.infrastructure.config import get_settings

_JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 1 minuto por IP. Estado em memoria, por processo."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()

        self._requests[client_ip] = [
            t for t in self._requests[client_ip] if now - t < _JANELA_SEGUNDOS
        ]

        if len(self._requests[client_ip]) >= limite:
            return Response(
                content='{"detail": "Limite de requisicoes excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(int(_JANELA_SEGUNDOS))},
            )

        self._requests[client_ip].append(now)
        return await call_next(request)
