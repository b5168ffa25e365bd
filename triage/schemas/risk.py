from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from triage.schemas.pregnancy import PregnancyRecord


class ContributionOut(BaseModel):
    feature: str
    label: str
    impact: float
    direction: Literal["increase", "decrease"]
    rationale: str


class RiskOut(BaseModel):
    logistic: float
    rule_ensemble: float
    ensemble_score: float = Field(..., ge=0, le=1)
    category: Literal["low", "medium", "high"]
    confidence: float = Field(..., ge=0.3, le=0.95)
    contributions: List[ContributionOut] = Field(default_factory=list, max_length=5)


class ActionPlanOut(BaseModel):
    risk_category: Literal["low", "medium", "high"]
    summary: str
    priority_actions: List[str]
    anc_schedule: List[str]
    nutrition: List[str]
    medications: List[str]
    follow_up: List[str]
    counselling: List[str]
    tts: str


class ActionPlanRequest(BaseModel):
    risk: RiskOut
    pregnancy: PregnancyRecord


class PredictionRequest(BaseModel):
    pregnancy_id: Optional[str] = None
    pregnancy: Optional[PregnancyRecord] = None


class PredictionResponse(BaseModel):
    prediction_id: str
    pregnancy_id: Optional[str]
    risk: RiskOut
    action_plan: ActionPlanOut
    model_version: str
    ai_service: str
    demo_fallback: bool
    created_at: str
