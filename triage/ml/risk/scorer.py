from __future__ import annotations

import math
from typing import List, Optional

from .config import DEFAULT_SCORING_CONFIG, HIGH_RISK, MEDIUM_RISK, ScoringConfig
from .errors import NumericDomainError
from .estimators import LogisticEstimator, RiskEstimator, RuleVoteEstimator, clamp
from .features import FeatureVector
from .results import Contribution, RiskCategory, RiskResult


def determine_risk_category(
    score: float,
    medium_threshold: float = MEDIUM_RISK,
    high_threshold: float = HIGH_RISK,
) -> RiskCategory:
    if score < medium_threshold:
        return "low"
    if score < high_threshold:
        return "medium"
    return "high"


def rank_contributions(contributions: List[Contribution], top_n: int) -> List[Contribution]:
    """Largest absolute impact first; ties keep feature order."""
    return sorted(contributions, key=lambda c: abs(c.impact), reverse=True)[:top_n]


class RiskScorer:
    """Average a logistic arm and a rule-vote arm into one explainable score.

    Confidence measures how closely the two arms agree, it is not a calibrated
    probability. Contributions are taken from the logistic arm only; an arm
    without a ``contributions`` method yields none.
    """

    def __init__(
        self,
        config: ScoringConfig = DEFAULT_SCORING_CONFIG,
        *,
        logistic: Optional[RiskEstimator] = None,
        rule_vote: Optional[RiskEstimator] = None,
    ) -> None:
        self.config = config
        self.logistic = logistic if logistic is not None else LogisticEstimator(config)
        self.rule_vote = rule_vote if rule_vote is not None else RuleVoteEstimator()

    def score(self, features: FeatureVector) -> RiskResult:
        cfg = self.config
        p_logistic = _checked(self.logistic.estimate(features), "logistic")
        p_rules = _checked(self.rule_vote.estimate(features), "rule_ensemble")

        ensemble = clamp((p_logistic + p_rules) / 2, 0.0, 1.0)
        confidence = clamp(1 - abs(p_logistic - p_rules), cfg.min_confidence, cfg.max_confidence)

        explain = getattr(self.logistic, "contributions", None)
        contributions = explain(features) if explain is not None else []

        return RiskResult(
            logistic=p_logistic,
            rule_ensemble=p_rules,
            ensemble_score=ensemble,
            category=determine_risk_category(ensemble, cfg.medium_threshold, cfg.high_threshold),
            confidence=confidence,
            contributions=rank_contributions(contributions, cfg.top_n),
        )


def _checked(p: float, arm: str) -> float:
    p = float(p)
    if not math.isfinite(p):
        raise NumericDomainError(f"{arm} arm returned a non-finite probability: {p}")
    return p
