from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, HTTPException

from triage.api.settings import cfg
from triage.ml.risk.config import MODEL_VERSION
from triage.ml.risk.errors import MalformedInputError, NumericDomainError
from triage.schemas.risk import PredictionRequest, PredictionResponse
from triage.services.assessment import assess, to_plan_out, to_risk_out
from triage.services.demo import DEMO_PREGNANCY
from triage.utils.time import now_utc_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/predictions", tags=["predictions"])


@router.post("", response_model=PredictionResponse)
def predict(req: PredictionRequest) -> PredictionResponse:
    """Score a pregnancy record and build its care plan.

    Records are not stored here, so a request carrying only a pregnancy_id
    (or nothing at all) is answered with the demo record.
    """
    demo_fallback = req.pregnancy is None
    pregnancy = DEMO_PREGNANCY if demo_fallback else req.pregnancy
    if demo_fallback:
        logger.info("No pregnancy record supplied (id=%s); scoring demo record", req.pregnancy_id)

    try:
        risk, plan = assess(pregnancy)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=f"Malformed pregnancy record: {e}")
    except NumericDomainError as e:
        logger.error("Prediction failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Prediction failed: {e}")

    risk_settings = cfg.get("risk", {}) or {}
    return PredictionResponse(
        prediction_id=str(uuid.uuid4()),
        pregnancy_id=req.pregnancy_id,
        risk=to_risk_out(risk),
        action_plan=to_plan_out(plan),
        model_version=risk_settings.get("model_version", MODEL_VERSION),
        ai_service=risk_settings.get("ai_service", "local-ensemble"),
        demo_fallback=demo_fallback,
        created_at=now_utc_iso(),
    )
