"""Cliente HTTP base para a API xRocket Pay."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP simples para chamadas externas (sem retry).

    Args:
        config: Configuração base
        http_client: AsyncClient externo opcional; quando ausente, um
            cliente é aberto e fechado a cada requisição
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        kwargs: dict[str, Any] = {
            "json": json,
            "params": params or None,
            "headers": merged_headers,
            "timeout": self._config.timeout_seconds,
        }
        url = self._url(path)
        try:
            if self._http_client is not None:
                response = await self._http_client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                    response = await client.request(method, url, **kwargs)
        except (httpx.TimeoutException, httpx.ConnectError) as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error", is_retryable=True) from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_transport_error") from exc
        return response

