"""API: camada de borda com a xRocket Pay.

Responsabilidades:
- Chamar a API xRocket Pay (connectors/xrocket)
- Receber webhooks, validar assinaturas e payloads
- Expor endpoints HTTP (routes/)

NÃO PODE conter: persistência, regras de negócio do host.
"""
