from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from triage.ml.plans.catalog import IFA_CONTINUE, IFA_RESTART, NUTRITION_TAIL, PLAN_CATALOG
from triage.ml.risk.errors import MalformedInputError
from triage.ml.risk.features import iron_adherence, record_group, require_number
from triage.ml.risk.results import RiskResult


@dataclass(frozen=True)
class ActionPlan:
    risk_category: str
    summary: str
    priority_actions: List[str]
    anc_schedule: List[str]
    nutrition: List[str]
    medications: List[str]
    follow_up: List[str]
    counselling: List[str]
    tts: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def format_score_pct(score: float) -> int:
    """Percentage rounded half-up (0.615 -> 62), not banker's rounding."""
    return int(math.floor(score * 100 + 0.5))


def format_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def nutrition_for(record: Any) -> List[str]:
    first = IFA_CONTINUE if iron_adherence(record) == "regular" else IFA_RESTART
    return [first] + list(NUTRITION_TAIL)


def plan_summary(risk: RiskResult, record: Any) -> str:
    health = record_group(record, "health")
    hb = format_number(require_number(health, "health", "hemoglobin"))
    bp = "{}/{}".format(
        format_number(require_number(health, "health", "bp_systolic")),
        format_number(require_number(health, "health", "bp_diastolic")),
    )
    return (
        f"Risk score {format_score_pct(risk.ensemble_score)} with {risk.category.upper()} risk profile. "
        f"Hemoglobin {hb} g/dL, BP {bp}."
    )


def build_plan(risk: RiskResult, record: Any) -> ActionPlan:
    """Pick the care-plan template for ``risk.category``.

    Only the category selects the template. The record feeds the summary
    sentence and the first nutrition line (continue vs restart IFA).
    """
    template = PLAN_CATALOG.get(risk.category)
    if template is None:
        raise MalformedInputError(f"unknown risk category: {risk.category!r}")

    return ActionPlan(
        risk_category=risk.category,
        summary=plan_summary(risk, record),
        priority_actions=list(template["priority_actions"]),
        anc_schedule=list(template["anc_schedule"]),
        nutrition=nutrition_for(record),
        medications=list(template["medications"]),
        follow_up=list(template["follow_up"]),
        counselling=list(template["counselling"]),
        tts=template["tts"],
    )
