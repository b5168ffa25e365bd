"""The two arms of the risk ensemble: a weighted logistic model and a rule vote."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

import numpy as np

from .config import DEFAULT_SCORING_CONFIG, FEATURE_KEYS, ScoringConfig
from .errors import NumericDomainError
from .features import FeatureVector
from .results import Contribution
from .rules import VOTE_RULES


class RiskEstimator(Protocol):
    def estimate(self, features: FeatureVector) -> float:
        ...


def _sigmoid(x: float) -> float:
    with np.errstate(over="ignore"):
        return float(1.0 / (1.0 + np.exp(-x)))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


class LogisticEstimator:
    """z-score each feature against population priors, weight, sum and squash."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> None:
        self.config = config
        self._means = np.array([config.norms[k].mean for k in FEATURE_KEYS], dtype=float)
        self._stds = np.array([config.norms[k].std for k in FEATURE_KEYS], dtype=float)
        self._weights = np.array([config.weights[k] for k in FEATURE_KEYS], dtype=float)

    def impacts(self, features: FeatureVector) -> np.ndarray:
        values = np.array([getattr(features, k) for k in FEATURE_KEYS], dtype=float)
        _ensure_finite(values, "feature value")

        with np.errstate(divide="ignore", invalid="ignore"):
            z = (values - self._means) / self._stds
        _ensure_finite(z, "z-score")
        return self._weights * z

    def estimate(self, features: FeatureVector) -> float:
        # accumulate in feature order, starting from the intercept
        logit = self.config.intercept
        for impact in self.impacts(features).tolist():
            logit += impact
        if not np.isfinite(logit):
            raise NumericDomainError(f"logistic score is not finite: {logit}")
        return _sigmoid(logit)

    def contributions(self, features: FeatureVector) -> List[Contribution]:
        out: List[Contribution] = []
        for key, impact in zip(FEATURE_KEYS, self.impacts(features)):
            impact = float(impact)
            out.append(
                Contribution(
                    feature=key,
                    label=self.config.labels[key],
                    impact=impact,
                    direction="increase" if impact >= 0 else "decrease",
                    rationale=self.config.rationales.get(key, ""),
                )
            )
        return out


class RuleVoteEstimator:
    """Share of vote weight carried by the rules that fire."""

    def __init__(self, rules: Optional[List[Dict[str, Any]]] = None) -> None:
        self.rules = VOTE_RULES if rules is None else rules

    def fired(self, features: FeatureVector) -> List[str]:
        return [r["id"] for r in self.rules if r["when"](features)]

    def estimate(self, features: FeatureVector) -> float:
        _ensure_finite(np.array(list(features.as_dict().values()), dtype=float), "feature value")

        vote_sum = 0.0
        vote_count = 0.0
        for rule in self.rules:
            vote_count += rule["weight"]
            if rule["when"](features):
                vote_sum += rule["weight"]
        return clamp(vote_sum / max(vote_count, 1.0), 0.0, 1.0)


def _ensure_finite(arr: np.ndarray, what: str) -> None:
    bad = ~np.isfinite(arr)
    if bad.any():
        names = [k for k, b in zip(FEATURE_KEYS, bad) if b]
        raise NumericDomainError(f"non-finite {what} for: {', '.join(names)}")
