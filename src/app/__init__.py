"""App: receptor de webhooks xRocket Pay (host de referência).

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config apoia.
"""
