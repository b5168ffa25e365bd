from __future__ import annotations

import logging
from typing import Tuple

from triage.ml.plans.engine import ActionPlan
from triage.ml.risk.pipeline import build_action_plan, evaluate_risk
from triage.ml.risk.results import Contribution, RiskResult
from triage.schemas.pregnancy import PregnancyRecord
from triage.schemas.risk import ActionPlanOut, RiskOut

logger = logging.getLogger(__name__)


def to_risk_out(result: RiskResult) -> RiskOut:
    return RiskOut(**result.to_dict())


def from_risk_out(risk: RiskOut) -> RiskResult:
    """Rebuild the core result from a client-supplied risk payload."""
    data = risk.model_dump()
    data["contributions"] = [Contribution(**c) for c in data["contributions"]]
    return RiskResult(**data)


def to_plan_out(plan: ActionPlan) -> ActionPlanOut:
    return ActionPlanOut(**plan.to_dict())


def score_pregnancy(pregnancy: PregnancyRecord) -> RiskResult:
    result = evaluate_risk(pregnancy.model_dump())
    logger.info(
        "Risk scored | score=%.3f category=%s confidence=%.2f",
        result.ensemble_score,
        result.category,
        result.confidence,
    )
    return result


def plan_for(risk: RiskResult, pregnancy: PregnancyRecord) -> ActionPlan:
    plan = build_action_plan(risk, pregnancy.model_dump())
    logger.info("Action plan built for %s risk", plan.risk_category)
    return plan


def assess(pregnancy: PregnancyRecord) -> Tuple[RiskResult, ActionPlan]:
    risk = score_pregnancy(pregnancy)
    return risk, plan_for(risk, pregnancy)
