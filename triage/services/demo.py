from __future__ import annotations

from triage.schemas.pregnancy import PregnancyRecord

# Scored when a prediction request carries no pregnancy record.
DEMO_PREGNANCY = PregnancyRecord(
    personal={
        "name": "Demo Beneficiary",
        "age": 30,
        "village": "Demo Village",
        "phone": "+919900000000",
        "education": "Secondary",
    },
    family={
        "income_range": "5000-10000",
        "diet_type": "veg",
        "household_size": 4,
        "clean_water": True,
        "sanitation": True,
        "phc_distance_km": 5,
        "partner_occupation": "Farmer",
    },
    obstetric={
        "gravida": 2,
        "para": 1,
        "abortions": 0,
        "previous_complications": "Anemia",
        "previous_c_section": False,
        "birth_spacing_months": 28,
    },
    current={
        "lmp": "2025-02-01",
        "edd": "2025-11-08",
        "trimester": "Trimester 2",
        "anc_visits": 3,
        "tt_doses": 1,
        "iron_folic_intake": "irregular",
    },
    health={
        "height_cm": 160,
        "weight_kg": 58,
        "bmi": 22.6,
        "bp_systolic": 128,
        "bp_diastolic": 84,
        "hemoglobin": 10,
        "blood_sugar": 102,
        "thyroid_tsh": 2.5,
        "edema": True,
    },
)
