"""Connectors: adapters de borda para APIs externas.

Estrutura:
- xrocket/: xRocket Pay API (invoices, cheques, transferências, saques, webhook)
"""

__all__: list[str] = []
