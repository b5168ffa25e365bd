from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from triage.utils.time import parse_date


class Personal(BaseModel):
    name: Optional[str] = None
    age: float = Field(..., ge=15, le=55)
    village: str = Field(..., min_length=2)
    phone: str = Field(..., min_length=10, max_length=14)
    education: str = Field(..., min_length=2)


class Family(BaseModel):
    income_range: str = Field(..., min_length=1)
    diet_type: Literal["veg", "non-veg"]
    household_size: float = Field(..., ge=1)
    clean_water: bool
    sanitation: bool
    phc_distance_km: float = Field(..., ge=0)
    partner_occupation: str = Field(..., min_length=2)


class Obstetric(BaseModel):
    gravida: float = Field(..., ge=0)
    para: float = Field(..., ge=0)
    abortions: float = Field(..., ge=0)
    previous_complications: Optional[str] = None
    previous_c_section: bool
    birth_spacing_months: float = Field(..., ge=0)


class Current(BaseModel):
    lmp: str = Field(..., min_length=1)
    edd: Optional[str] = None
    trimester: str = Field(..., min_length=1)
    anc_visits: float = Field(..., ge=0)
    tt_doses: float = Field(..., ge=0)
    iron_folic_intake: Literal["regular", "irregular", "not-started"]

    @field_validator("lmp", "edd")
    @classmethod
    def _iso_date(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            parse_date(v)
        return v


class Health(BaseModel):
    height_cm: float = Field(..., ge=120, le=200)
    weight_kg: float = Field(..., ge=30, le=180)
    bmi: float = Field(..., ge=10, le=45)
    bp_systolic: float = Field(..., ge=80, le=200)
    bp_diastolic: float = Field(..., ge=40, le=130)
    hemoglobin: float = Field(..., ge=4, le=18)
    blood_sugar: float = Field(..., ge=60, le=400)
    thyroid_tsh: Optional[float] = Field(None, ge=0, le=20)
    edema: bool


class PregnancyRecord(BaseModel):
    """Validated pregnancy record; the scoring core assumes these bounds hold."""

    personal: Personal
    family: Family
    obstetric: Obstetric
    current: Current
    health: Health
