"""Contratos (DTOs) da API xRocket Pay."""

from ..webhook.models import PaymentRecord
from .app import (
    AppBalance,
    AppInfo,
    CreateTransferRequest,
    CreateWithdrawalRequest,
    Network,
    Transfer,
    Withdrawal,
    WithdrawalCoin,
    WithdrawalNetworkFee,
    WithdrawalStatus,
)
from .cheque import (
    Cheque,
    ChequeState,
    CreateChequeRequest,
    ShortCheque,
    TgResource,
    UpdateChequeRequest,
)
from .common import ApiResponse, DeleteResponse, Page, PaginationParams, Version
from .currencies import Coin, CoinWithdrawFee, parse_coins
from .invoice import CreateInvoiceRequest, FullInvoice, Invoice

__all__ = [
    "ApiResponse",
    "AppBalance",
    "AppInfo",
    "Cheque",
    "ChequeState",
    "Coin",
    "CoinWithdrawFee",
    "CreateChequeRequest",
    "CreateInvoiceRequest",
    "CreateTransferRequest",
    "CreateWithdrawalRequest",
    "DeleteResponse",
    "FullInvoice",
    "Invoice",
    "Network",
    "Page",
    "PaginationParams",
    "PaymentRecord",
    "ShortCheque",
    "TgResource",
    "Transfer",
    "UpdateChequeRequest",
    "Version",
    "Withdrawal",
    "WithdrawalCoin",
    "WithdrawalNetworkFee",
    "WithdrawalStatus",
    "parse_coins",
]
