from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import MalformedInputError


IRON_INTAKE_SCORES = {
    "regular": 1.0,
    "irregular": 0.5,
    "not-started": 0.0,
}


@dataclass(frozen=True)
class FeatureVector:
    age: float
    bmi: float
    hemoglobin: float
    bp_systolic: float
    bp_diastolic: float
    blood_sugar: float
    anc_visits: float
    iron_intake: float
    previous_complications: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def record_group(record: Any, group: str) -> Mapping[str, Any]:
    """Return one nested section (personal, health, ...) of a pregnancy record.

    Accepts plain mappings and pydantic models of the same shape.
    """
    if hasattr(record, "model_dump"):
        record = record.model_dump()
    if not isinstance(record, Mapping):
        raise MalformedInputError(f"pregnancy record must be a mapping, got {type(record).__name__}")
    section = record.get(group)
    if hasattr(section, "model_dump"):
        section = section.model_dump()
    if not isinstance(section, Mapping):
        raise MalformedInputError(f"record section '{group}' is missing")
    return section


def require_number(section: Mapping[str, Any], group: str, key: str) -> float:
    if key not in section or section[key] is None:
        raise MalformedInputError(f"{group}.{key} is required")
    value = section[key]
    # bool is an int subclass; a flag is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInputError(f"{group}.{key} must be a number, got {type(value).__name__}")
    return float(value)


def require_flag(section: Mapping[str, Any], group: str, key: str) -> bool:
    value = section.get(key)
    if not isinstance(value, bool):
        raise MalformedInputError(f"{group}.{key} must be a boolean")
    return value


def optional_text(section: Mapping[str, Any], group: str, key: str) -> Optional[str]:
    value = section.get(key)
    if value is not None and not isinstance(value, str):
        raise MalformedInputError(f"{group}.{key} must be text")
    return value


def iron_adherence(record: Any) -> str:
    current = record_group(record, "current")
    value = current.get("iron_folic_intake")
    if value not in IRON_INTAKE_SCORES:
        raise MalformedInputError(
            f"current.iron_folic_intake must be one of {sorted(IRON_INTAKE_SCORES)}, got {value!r}"
        )
    return value


def complication_score(obstetric: Mapping[str, Any]) -> float:
    """Severity proxy for the obstetric history, one of 0.6, 1.0, 1.6 or 2.0.

    A recorded complication adds 1; the c-section term is 1 when a previous
    cesarean is recorded and 0.6 otherwise.
    """
    text = optional_text(obstetric, "obstetric", "previous_complications")
    had_c_section = require_flag(obstetric, "obstetric", "previous_c_section")
    penalty = 1.0 if text else 0.0
    c_section_penalty = 1.0 if had_c_section else 0.6
    return penalty + c_section_penalty


def extract_features(record: Any) -> FeatureVector:
    personal = record_group(record, "personal")
    health = record_group(record, "health")
    current = record_group(record, "current")
    obstetric = record_group(record, "obstetric")

    return FeatureVector(
        age=require_number(personal, "personal", "age"),
        bmi=require_number(health, "health", "bmi"),
        hemoglobin=require_number(health, "health", "hemoglobin"),
        bp_systolic=require_number(health, "health", "bp_systolic"),
        bp_diastolic=require_number(health, "health", "bp_diastolic"),
        blood_sugar=require_number(health, "health", "blood_sugar"),
        anc_visits=require_number(current, "current", "anc_visits"),
        iron_intake=IRON_INTAKE_SCORES[iron_adherence(record)],
        previous_complications=complication_score(obstetric),
    )
