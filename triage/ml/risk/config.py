from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

MODEL_VERSION = "ensemble-v1"

FEATURE_KEYS = (
    "age",
    "bmi",
    "hemoglobin",
    "bp_systolic",
    "bp_diastolic",
    "blood_sugar",
    "anc_visits",
    "iron_intake",
    "previous_complications",
)

# Category cut-offs on the ensemble score (closed-open intervals)
MEDIUM_RISK = 0.40
HIGH_RISK = 0.70

MIN_CONFIDENCE = 0.30
MAX_CONFIDENCE = 0.95

TOP_CONTRIBUTIONS_N = 5


@dataclass(frozen=True)
class FeatureNorm:
    mean: float
    std: float


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class ScoringConfig:
    """Fixed population priors and weights for the scorer.

    These are hand-curated domain constants, not fitted values. Pass an
    alternate instance to RiskScorer to exercise the combination logic with
    other tables.
    """

    norms: Mapping[str, FeatureNorm]
    weights: Mapping[str, float]
    intercept: float
    labels: Mapping[str, str]
    rationales: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    medium_threshold: float = MEDIUM_RISK
    high_threshold: float = HIGH_RISK
    min_confidence: float = MIN_CONFIDENCE
    max_confidence: float = MAX_CONFIDENCE
    top_n: int = TOP_CONTRIBUTIONS_N

    def __post_init__(self) -> None:
        for name in ("norms", "weights", "labels", "rationales"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _frozen(value))


DEFAULT_SCORING_CONFIG = ScoringConfig(
    norms={
        "age": FeatureNorm(mean=26, std=5.3),
        "bmi": FeatureNorm(mean=22.5, std=3.1),
        "hemoglobin": FeatureNorm(mean=11.2, std=1.2),
        "bp_systolic": FeatureNorm(mean=115, std=12),
        "bp_diastolic": FeatureNorm(mean=74, std=8),
        "blood_sugar": FeatureNorm(mean=94, std=15),
        "anc_visits": FeatureNorm(mean=3.2, std=1.1),
        "iron_intake": FeatureNorm(mean=0.6, std=0.35),
        "previous_complications": FeatureNorm(mean=0.18, std=0.4),
    },
    weights={
        "age": 0.45,
        "bmi": 0.62,
        "hemoglobin": -0.88,
        "bp_systolic": 0.54,
        "bp_diastolic": 0.32,
        "blood_sugar": 0.41,
        "anc_visits": -0.58,
        "iron_intake": -0.73,
        "previous_complications": 0.95,
    },
    intercept=-0.35,
    labels={
        "age": "Maternal age",
        "bmi": "Body mass index",
        "hemoglobin": "Hemoglobin",
        "bp_systolic": "Systolic BP",
        "bp_diastolic": "Diastolic BP",
        "blood_sugar": "Blood sugar",
        "anc_visits": "ANC visits",
        "iron_intake": "Iron & folic intake",
        "previous_complications": "Previous complications",
    },
    # Only three features carry a rationale; the rest stay empty.
    rationales={
        "hemoglobin": "Lower haemoglobin raises anemia-related risk.",
        "iron_intake": "Regular IFA consumption protects from anemia.",
        "anc_visits": "More ANC visits reduce preventable risk.",
    },
)
