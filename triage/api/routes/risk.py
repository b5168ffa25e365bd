from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from triage.ml.risk.errors import MalformedInputError, NumericDomainError
from triage.schemas.pregnancy import PregnancyRecord
from triage.schemas.risk import ActionPlanOut, ActionPlanRequest, RiskOut
from triage.services.assessment import from_risk_out, plan_for, score_pregnancy, to_plan_out, to_risk_out

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/risk", tags=["risk"])


@router.post("/evaluate", response_model=RiskOut)
def evaluate(pregnancy: PregnancyRecord) -> RiskOut:
    try:
        return to_risk_out(score_pregnancy(pregnancy))
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=f"Malformed pregnancy record: {e}")
    except NumericDomainError as e:
        logger.error("Risk scoring failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Risk scoring failed: {e}")


@router.post("/action-plan", response_model=ActionPlanOut)
def action_plan(req: ActionPlanRequest) -> ActionPlanOut:
    try:
        plan = plan_for(from_risk_out(req.risk), req.pregnancy)
        return to_plan_out(plan)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=f"Action plan failed: {e}")
