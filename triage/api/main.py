from __future__ import annotations

import logging

from fastapi import FastAPI

from triage.api.routes.predictions import router as predictions_router
from triage.api.routes.risk import router as risk_router
from triage.api.settings import cfg

logging.basicConfig(
    level=getattr(logging, str(cfg.get("logging", {}).get("level", "INFO")).upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

api_cfg = cfg.get("api", {}) or {}

app = FastAPI(
    title=api_cfg.get("title", "Maternal Risk Triage API"),
    version=str(api_cfg.get("version", "0.1.0")),
)

app.include_router(risk_router)
app.include_router(predictions_router)


@app.get("/health")
def health():
    return {"status": "ok"}
