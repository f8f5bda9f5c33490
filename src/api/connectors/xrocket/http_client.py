"""Cliente da API xRocket Pay.

Estende HttpClient genérico com comportamentos específicos da xRocket:
- Header Rocket-Pay-Key quando há API key configurada
- Validação de API key antes de endpoints autenticados
- Tratamento de erros da API ({"success": false, "message": ...})
- Respostas convertidas para DTOs tipados
- Logging estruturado sem API key nem payloads
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from config.settings.xrocket import (
    XROCKET_API_BASE_URL,
    XROCKET_API_KEY_HEADER,
    get_xrocket_settings,
)

from .api_errors import parse_api_error
from .api_logging import log_api_error, log_success
from .http_base import HttpClient, HttpClientConfig, HttpError
from .models import (
    ApiResponse,
    AppInfo,
    Cheque,
    Coin,
    CreateChequeRequest,
    CreateInvoiceRequest,
    CreateTransferRequest,
    CreateWithdrawalRequest,
    DeleteResponse,
    FullInvoice,
    Invoice,
    Page,
    PaginationParams,
    ShortCheque,
    Transfer,
    UpdateChequeRequest,
    Version,
    Withdrawal,
    WithdrawalCoin,
    parse_coins,
)

if TYPE_CHECKING:
    import httpx

    from config.settings.xrocket import XRocketSettings

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class XRocketPayConfig:
    """Configuração pública do cliente."""

    base_url: str = XROCKET_API_BASE_URL
    api_key: str = ""
    timeout_seconds: float = 30.0


class XRocketPayClient:
    """Cliente assíncrono da API xRocket Pay.

    Args:
        config: Configuração (base_url, api_key, timeout)
        http_client: AsyncClient httpx opcional (testes ou pool compartilhado)
    """

    def __init__(
        self,
        config: XRocketPayConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or XRocketPayConfig()
        self._http_client = http_client
        self._http = self._build_http()

    def _build_http(self) -> HttpClient:
        headers = {"Content-Type": "application/json"}
        if self._config.api_key:
            headers[XROCKET_API_KEY_HEADER] = self._config.api_key
        return HttpClient(
            HttpClientConfig(
                base_url=self._config.base_url,
                timeout_seconds=self._config.timeout_seconds,
                default_headers=headers,
            ),
            http_client=self._http_client,
        )

    def set_api_key(self, api_key: str) -> None:
        """Atualiza a API key usada nas chamadas autenticadas."""
        self._config = XRocketPayConfig(
            base_url=self._config.base_url,
            api_key=api_key,
            timeout_seconds=self._config.timeout_seconds,
        )
        self._http = self._build_http()

    def get_config(self) -> XRocketPayConfig:
        return self._config

    def _require_api_key(self, operation: str) -> None:
        if not self._config.api_key or not self._config.api_key.strip():
            logger.error("xrocket_api_key_missing", extra={"operation": operation})
            raise ValueError(
                f"API key é obrigatória para {operation}. "
                "Use set_api_key() ou configure XROCKET_PAY_API_KEY."
            )

    def _process_response(self, response: httpx.Response, method: str, path: str) -> dict[str, Any]:
        try:
            response_data = response.json()
        except ValueError:
            # JSON inválido ou corpo não UTF-8 (ex: página HTML de proxy)
            response_data = None

        api_error = parse_api_error(response.status_code, response_data)
        if api_error:
            log_api_error(api_error, method, path)
            raise HttpError(
                f"xRocket API error: {api_error.message}",
                status_code=api_error.status_code,
                is_retryable=not api_error.is_permanent,
            )

        if not isinstance(response_data, dict):
            logger.error("xrocket_response_invalid", extra={"method": method, "path": path})
            raise HttpError("Response JSON inválido", status_code=response.status_code)

        log_success(method, path, response.status_code)
        return response_data

    async def _call(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        response = await self._http.request(method, path, json=json_body, params=params)
        return self._process_response(response, method, path)

    async def _call_data(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        *,
        json_body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> ApiResponse[T]:
        payload = await self._call(method, path, json_body=json_body, params=params)
        return ApiResponse.from_dict(payload, parse)

    async def get_version(self) -> Version:
        """Versão da API. Não exige autenticação; serve como healthcheck."""
        return Version.from_dict(await self._call("GET", "/version"))

    async def get_available_currencies(self) -> ApiResponse[list[Coin]]:
        """Moedas disponíveis. Não exige autenticação."""
        return await self._call_data("GET", "/currencies/available", parse_coins)

    # Invoices

    async def create_invoice(self, request: CreateInvoiceRequest) -> ApiResponse[Invoice]:
        self._require_api_key("create_invoice")
        return await self._call_data(
            "POST", "/tg-invoices", Invoice.from_dict, json_body=request.to_payload()
        )

    async def get_invoices(
        self,
        params: PaginationParams | None = None,
    ) -> ApiResponse[Page[Invoice]]:
        """Lista invoices paginadas."""
        self._require_api_key("get_invoices")
        query = (params or PaginationParams()).to_query()
        return await self._call_data(
            "GET",
            "/tg-invoices",
            lambda data: Page.from_dict(data, Invoice.from_dict),
            params=query,
        )

    async def get_invoice(self, invoice_id: int | str) -> ApiResponse[FullInvoice]:
        """Invoice com estatísticas de pagamento."""
        self._require_api_key("get_invoice")
        return await self._call_data("GET", f"/tg-invoices/{invoice_id}", FullInvoice.from_dict)

    async def delete_invoice(self, invoice_id: int | str) -> DeleteResponse:
        self._require_api_key("delete_invoice")
        return DeleteResponse.from_dict(await self._call("DELETE", f"/tg-invoices/{invoice_id}"))

    # App

    async def get_app_info(self) -> ApiResponse[AppInfo]:
        self._require_api_key("get_app_info")
        return await self._call_data("GET", "/app/info", AppInfo.from_dict)

    async def create_transfer(self, request: CreateTransferRequest) -> ApiResponse[Transfer]:
        """Transfere fundos para outro usuário Telegram."""
        self._require_api_key("create_transfer")
        return await self._call_data(
            "POST", "/app/transfer", Transfer.from_dict, json_body=request.to_payload()
        )

    async def get_withdrawal_fees(
        self,
        currency: str | None = None,
    ) -> ApiResponse[list[WithdrawalCoin]]:
        """Taxas de saque, de todas as moedas ou de uma específica."""
        self._require_api_key("get_withdrawal_fees")
        return await self._call_data(
            "GET",
            "/app/withdrawal/fees",
            lambda data: [WithdrawalCoin.from_dict(item) for item in data],
            params={"currency": currency} if currency else None,
        )

    async def create_withdrawal(self, request: CreateWithdrawalRequest) -> ApiResponse[Withdrawal]:
        self._require_api_key("create_withdrawal")
        return await self._call_data(
            "POST", "/app/withdrawal", Withdrawal.from_dict, json_body=request.to_payload()
        )

    async def get_withdrawal_status(self, withdrawal_id: str) -> ApiResponse[Withdrawal]:
        self._require_api_key("get_withdrawal_status")
        return await self._call_data(
            "GET", f"/app/withdrawal/status/{withdrawal_id}", Withdrawal.from_dict
        )

    # Multi-cheques

    async def create_multicheque(self, request: CreateChequeRequest) -> ApiResponse[Cheque]:
        self._require_api_key("create_multicheque")
        return await self._call_data(
            "POST", "/multi-cheque", Cheque.from_dict, json_body=request.to_payload()
        )

    async def get_multicheque(self, cheque_id: int) -> ApiResponse[Cheque]:
        self._require_api_key("get_multicheque")
        return await self._call_data("GET", f"/multi-cheque/{cheque_id}", Cheque.from_dict)

    async def get_multicheques(
        self,
        params: PaginationParams | None = None,
    ) -> ApiResponse[Page[ShortCheque]]:
        self._require_api_key("get_multicheques")
        query = (params or PaginationParams()).to_query()
        return await self._call_data(
            "GET",
            "/multi-cheque",
            lambda data: Page.from_dict(data, ShortCheque.from_dict),
            params=query,
        )

    async def update_multicheque(
        self,
        cheque_id: int,
        request: UpdateChequeRequest,
    ) -> ApiResponse[Cheque]:
        self._require_api_key("update_multicheque")
        return await self._call_data(
            "PUT", f"/multi-cheque/{cheque_id}", Cheque.from_dict, json_body=request.to_payload()
        )

    async def delete_multicheque(self, cheque_id: int) -> DeleteResponse:
        self._require_api_key("delete_multicheque")
        return DeleteResponse.from_dict(await self._call("DELETE", f"/multi-cheque/{cheque_id}"))


def create_xrocket_client(
    settings: XRocketSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> XRocketPayClient:
    """Factory para criar cliente xRocket com config padrão.

    Args:
        settings: XRocketSettings opcional. Se None, carrega do ambiente.
        http_client: AsyncClient httpx opcional

    Returns:
        Cliente configurado.
    """
    xrocket = settings or get_xrocket_settings()
    config = XRocketPayConfig(
        base_url=xrocket.base_url,
        api_key=xrocket.api_key,
        timeout_seconds=xrocket.request_timeout_seconds,
    )
    return XRocketPayClient(config=config, http_client=http_client)
