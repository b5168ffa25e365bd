import copy

import pytest


DEMO_RECORD = {
    "personal": {
        "name": "Demo Beneficiary",
        "age": 30,
        "village": "Demo Village",
        "phone": "+919900000000",
        "education": "Secondary",
    },
    "family": {
        "income_range": "5000-10000",
        "diet_type": "veg",
        "household_size": 4,
        "clean_water": True,
        "sanitation": True,
        "phc_distance_km": 5,
        "partner_occupation": "Farmer",
    },
    "obstetric": {
        "gravida": 2,
        "para": 1,
        "abortions": 0,
        "previous_complications": "Anemia",
        "previous_c_section": False,
        "birth_spacing_months": 28,
    },
    "current": {
        "lmp": "2025-02-01",
        "edd": "2025-11-08",
        "trimester": "Trimester 2",
        "anc_visits": 3,
        "tt_doses": 1,
        "iron_folic_intake": "irregular",
    },
    "health": {
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
}


def make_record(**overrides):
    """Copy of the demo record; overrides are keyed 'group.field'."""
    record = copy.deepcopy(DEMO_RECORD)
    for dotted, value in overrides.items():
        group, key = dotted.split(".")
        record[group][key] = value
    return record


@pytest.fixture
def demo_record():
    return make_record()


@pytest.fixture
def low_risk_record():
    return make_record(
        **{
            "personal.age": 26,
            "health.bmi": 22.5,
            "health.hemoglobin": 12.4,
            "health.bp_systolic": 115,
            "health.bp_diastolic": 74,
            "health.blood_sugar": 94,
            "current.anc_visits": 5,
            "current.iron_folic_intake": "regular",
            "obstetric.previous_complications": None,
            "obstetric.previous_c_section": False,
        }
    )


@pytest.fixture
def high_risk_record():
    return make_record(
        **{
            "personal.age": 38,
            "health.bmi": 30,
            "health.hemoglobin": 7,
            "health.bp_systolic": 150,
            "health.bp_diastolic": 95,
            "health.blood_sugar": 140,
            "current.anc_visits": 1,
            "current.iron_folic_intake": "not-started",
            "obstetric.previous_complications": "Pre-eclampsia",
            "obstetric.previous_c_section": True,
        }
    )
