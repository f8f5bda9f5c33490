"""Router principal da xRocket Pay: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.xrocket.webhook import router as webhook_router

router = APIRouter()

# POST /webhook/xrocket (sem barra final)
router.include_router(webhook_router, prefix="/webhook/xrocket")
