from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Literal

Direction = Literal["increase", "decrease"]
RiskCategory = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class Contribution:
    feature: str
    label: str
    impact: float
    direction: Direction
    rationale: str


@dataclass(frozen=True)
class RiskResult:
    logistic: float
    rule_ensemble: float
    ensemble_score: float
    category: RiskCategory
    confidence: float
    contributions: List[Contribution]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
