from __future__ import annotations

from typing import Any, Dict, List


IFA_CONTINUE = "Continue daily IFA tablets with citrus juice for absorption."
IFA_RESTART = "Restart daily IFA tablets; give 100 tablets and supervise intake weekly."

NUTRITION_TAIL: List[str] = [
    "Add green leafy vegetables (saag, spinach), jaggery and roasted chana twice daily.",
    "Include protein: dal, eggs (if non-veg), curd or groundnut chikki to support fetal growth.",
]

BASE_MEDICATIONS: List[str] = [
    "IFA tablet once daily till 180 doses completed.",
    "Calcium 500 mg twice daily after meals, separate from IFA by 2 hours.",
]

BASE_FOLLOW_UP: List[str] = [
    "Home visit every 2 weeks to monitor BP, weight, fetal movements.",
    "Document ANC in Mother & Child Protection (MCP) card and sync to app.",
]


PLAN_CATALOG: Dict[str, Dict[str, Any]] = {
    "high": {
        "priority_actions": [
            "Refer to nearest FRU/CHC immediately for doctor review.",
            "Arrange transport, inform MOIC and family guardian.",
            "Prepare referral note with vitals, labs, complication history.",
        ],
        "anc_schedule": [
            "Doctor ANC within 48 hours, weekly follow-up thereafter.",
            "Lab: Hb, blood sugar, urine protein, thyroid, ultrasound as advised.",
        ],
        "medications": BASE_MEDICATIONS + [
            "If Hb < 8 g/dL, plan IV iron at facility (consult doctor).",
        ],
        "follow_up": BASE_FOLLOW_UP + [
            "Daily phone check-in for danger signs (bleeding, swelling, headaches).",
            "Trigger high-risk alert in app and assign to doctor.",
        ],
        "counselling": [
            "Explain danger signs in simple language; family must know when to rush.",
            "Encourage rest, reduce heavy workload, ensure sleep of 8 hours.",
            "Discuss birth preparedness: transport, blood donor, finance.",
        ],
        "tts": (
            "उच्च जोखिम मिला है। तुरंत डॉक्टर से मिलवाएं, आईएफ़ए नियमित कराएं और हर सप्ताह फॉलो-अप करें। "
            "परिवार को खतरे के लक्षण समझाएं और वाहन की व्यवस्था रखें।"
        ),
    },
    "medium": {
        "priority_actions": [
            "Reinforce IFA adherence; document weekly consumption.",
            "Schedule facility ANC within 7 days for medical review.",
            "Monitor BP, edema and fetal movements at every visit.",
        ],
        "anc_schedule": [
            "Facility ANC every 2 weeks till delivery.",
            "Repeat Hb test in 4 weeks; perform OGTT if blood sugar elevated.",
        ],
        "medications": BASE_MEDICATIONS,
        "follow_up": BASE_FOLLOW_UP + [
            "Add reminder for TT dose if pending.",
            "Use app alerts for lab follow-up and compliance tracking.",
        ],
        "counselling": [
            "Educate on balanced diet, portion control, iron absorption tips.",
            "Encourage moderate activity, pregnancy yoga or safe walks.",
            "Discuss rest, mental wellbeing, partner support.",
        ],
        "tts": (
            "मध्यम जोखिम दर्ज हुआ है। सात दिनों में सुविधा पर जाँच कराएं, "
            "आईएफ़ए और कैल्शियम नियमित लें और हर दो सप्ताह एएनसी करवाएं।"
        ),
    },
    "low": {
        "priority_actions": [
            "Continue routine ANC with focus on nutrition and rest.",
            "Review danger signs during every counselling session.",
        ],
        "anc_schedule": [
            "ANC monthly till 7 months, fortnightly till 9 months, weekly in last month.",
            "Ensure TT doses as per schedule, document in app.",
        ],
        "medications": BASE_MEDICATIONS,
        "follow_up": BASE_FOLLOW_UP,
        "counselling": [
            "Promote birth preparedness and institutional delivery.",
            "Encourage family support, stress-free environment.",
            "Discuss newborn care and breastfeeding preparation.",
        ],
        "tts": (
            "जोखिम कम है, फिर भी नियमित एएनसी, पौष्टिक आहार और आईएफ़ए टैबलेट जारी रखें। "
            "परिवार को खतरे के लक्षण याद दिलाएं।"
        ),
    },
}
