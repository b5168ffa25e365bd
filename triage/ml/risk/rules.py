from __future__ import annotations

from typing import Any, Dict, List


# Fixed-weight vote rules approximating a small tree ensemble.
# Every rule's weight counts toward the denominator whether or not it fires.
VOTE_RULES: List[Dict[str, Any]] = [
    {
        "id": "low_hemoglobin",
        "weight": 2.0,
        "when": lambda f: f.hemoglobin < 10,
    },
    {
        "id": "high_blood_pressure",
        "weight": 1.5,
        "when": lambda f: f.bp_systolic > 135 or f.bp_diastolic > 85,
    },
    {
        "id": "abnormal_bmi",
        "weight": 1.0,
        "when": lambda f: f.bmi > 28 or f.bmi < 18.5,
    },
    {
        "id": "high_blood_sugar",
        "weight": 1.0,
        "when": lambda f: f.blood_sugar > 130,
    },
    {
        "id": "poor_iron_intake",
        "weight": 1.0,
        "when": lambda f: f.iron_intake < 0.5,
    },
    {
        "id": "previous_complications",
        "weight": 2.5,
        "when": lambda f: f.previous_complications > 0.1,
    },
    {
        "id": "few_anc_visits",
        "weight": 1.0,
        "when": lambda f: f.anc_visits < 2,
    },
    {
        "id": "age_extremes",
        "weight": 1.0,
        "when": lambda f: f.age > 34 or f.age < 19,
    },
]
