"""Entry points: pregnancy record -> RiskResult -> ActionPlan.

Both calls are pure. The same record always yields the same result, so a
client scoring offline and the server scoring on reconnect agree.
"""
from __future__ import annotations

from typing import Any, Optional

from triage.ml.plans.engine import ActionPlan, build_plan
from triage.ml.risk.features import extract_features
from triage.ml.risk.results import RiskResult
from triage.ml.risk.scorer import RiskScorer

_default_scorer = RiskScorer()


def evaluate_risk(record: Any, scorer: Optional[RiskScorer] = None) -> RiskResult:
    features = extract_features(record)
    return (scorer or _default_scorer).score(features)


def build_action_plan(risk: RiskResult, record: Any) -> ActionPlan:
    return build_plan(risk, record)
