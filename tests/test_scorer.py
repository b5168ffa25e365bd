import dataclasses
import math

import pytest

from conftest import make_record
from triage.ml.risk.config import DEFAULT_SCORING_CONFIG, FeatureNorm, ScoringConfig
from triage.ml.risk.errors import NumericDomainError
from triage.ml.risk.estimators import LogisticEstimator, RuleVoteEstimator, _sigmoid
from triage.ml.risk.features import extract_features
from triage.ml.risk.pipeline import evaluate_risk
from triage.ml.risk.scorer import RiskScorer, determine_risk_category


class FixedArm:
    def __init__(self, p):
        self.p = p

    def estimate(self, features):
        return self.p


def _scorer(p_logistic, p_rules):
    return RiskScorer(logistic=FixedArm(p_logistic), rule_vote=FixedArm(p_rules))


def test_demo_record_scenario(demo_record):
    result = evaluate_risk(demo_record)

    # only the previous-complications rule fires: 2.5 / 11
    assert result.rule_ensemble == pytest.approx(2.5 / 11)
    assert result.logistic == pytest.approx(0.99692, abs=1e-4)
    assert result.ensemble_score == pytest.approx((result.logistic + result.rule_ensemble) / 2)
    assert result.ensemble_score == pytest.approx(0.6121, abs=1e-3)
    assert result.category == "medium"
    # the arms disagree by ~0.77 so confidence sits on the floor
    assert result.confidence == 0.30


def test_demo_contributions(demo_record):
    result = evaluate_risk(demo_record)
    assert [c.feature for c in result.contributions] == [
        "previous_complications",
        "hemoglobin",
        "bp_systolic",
        "bp_diastolic",
        "age",
    ]
    top = result.contributions[0]
    assert top.label == "Previous complications"
    assert top.impact == pytest.approx(0.95 * (1.6 - 0.18) / 0.4)
    assert top.direction == "increase"
    assert top.rationale == ""

    hb = result.contributions[1]
    assert hb.impact == pytest.approx(0.88)
    assert hb.rationale == "Lower haemoglobin raises anemia-related risk."


def test_low_risk_record(low_risk_record):
    result = evaluate_risk(low_risk_record)
    assert result.logistic == pytest.approx(0.11755, abs=1e-4)
    assert result.ensemble_score == pytest.approx(0.1724, abs=1e-3)
    assert result.category == "low"
    assert result.confidence == pytest.approx(0.8903, abs=1e-3)


def test_high_risk_record(high_risk_record):
    result = evaluate_risk(high_risk_record)
    assert result.rule_ensemble == 1.0
    assert result.category == "high"
    assert result.confidence == 0.95
    assert 0.0 <= result.ensemble_score <= 1.0


def test_rules_fired(high_risk_record, demo_record):
    arm = RuleVoteEstimator()
    assert arm.fired(extract_features(demo_record)) == ["previous_complications"]
    assert len(arm.fired(extract_features(high_risk_record))) == 8


def test_rule_vote_without_rules(demo_record):
    assert RuleVoteEstimator(rules=[]).estimate(extract_features(demo_record)) == 0.0


def test_logistic_contributions_cover_every_feature(demo_record):
    contribs = LogisticEstimator().contributions(extract_features(demo_record))
    assert len(contribs) == 9
    with_rationale = {c.feature for c in contribs if c.rationale}
    assert with_rationale == {"hemoglobin", "iron_intake", "anc_visits"}
    anc = next(c for c in contribs if c.feature == "anc_visits")
    # 3 visits is below the mean of 3.2 and the weight is negative
    assert anc.impact > 0
    assert anc.direction == "increase"


@pytest.mark.parametrize(
    "score, category",
    [
        (0.0, "low"),
        (0.39, "low"),
        (0.40, "medium"),
        (0.69, "medium"),
        (0.70, "high"),
        (1.0, "high"),
    ],
)
def test_category_thresholds(score, category):
    assert determine_risk_category(score) == category


@pytest.mark.parametrize("score, category", [(0.39, "low"), (0.40, "medium"), (0.69, "medium"), (0.70, "high")])
def test_boundary_scores_through_scorer(demo_record, score, category):
    result = _scorer(score, score).score(extract_features(demo_record))
    assert result.ensemble_score == score
    assert result.category == category
    assert result.contributions == []


@pytest.mark.parametrize(
    "p_logistic, p_rules, confidence",
    [
        (0.0, 1.0, 0.30),
        (0.5, 0.5, 0.95),
        (0.2, 0.6, 0.6),
    ],
)
def test_confidence_is_arm_agreement(demo_record, p_logistic, p_rules, confidence):
    result = _scorer(p_logistic, p_rules).score(extract_features(demo_record))
    assert result.confidence == pytest.approx(confidence)


def test_ensemble_is_clamped(demo_record):
    result = _scorer(1.4, 1.2).score(extract_features(demo_record))
    assert result.ensemble_score == 1.0


def test_determinism(demo_record):
    assert evaluate_risk(demo_record) == evaluate_risk(make_record())


def test_contribution_ordering(demo_record, low_risk_record, high_risk_record):
    for record in (demo_record, low_risk_record, high_risk_record):
        impacts = [abs(c.impact) for c in evaluate_risk(record).contributions]
        assert len(impacts) <= 5
        assert impacts == sorted(impacts, reverse=True)


def test_lower_hemoglobin_never_lowers_score():
    before = evaluate_risk(make_record(**{"health.hemoglobin": 11}))
    after = evaluate_risk(make_record(**{"health.hemoglobin": 7}))
    assert after.logistic > before.logistic
    assert after.rule_ensemble > before.rule_ensemble
    assert after.ensemble_score >= before.ensemble_score


def test_non_finite_feature_raises():
    with pytest.raises(NumericDomainError, match="hemoglobin"):
        evaluate_risk(make_record(**{"health.hemoglobin": math.nan}))


def test_zero_width_norm_raises(demo_record):
    norms = dict(DEFAULT_SCORING_CONFIG.norms)
    norms["age"] = FeatureNorm(mean=26, std=0)
    config = dataclasses.replace(DEFAULT_SCORING_CONFIG, norms=norms)
    with pytest.raises(NumericDomainError, match="age"):
        evaluate_risk(demo_record, scorer=RiskScorer(config))


def test_non_finite_arm_raises(demo_record):
    with pytest.raises(NumericDomainError):
        _scorer(math.nan, 0.5).score(extract_features(demo_record))


def test_config_is_immutable():
    with pytest.raises(TypeError):
        DEFAULT_SCORING_CONFIG.weights["age"] = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SCORING_CONFIG.intercept = 0.0


def test_custom_config_changes_intercept(demo_record):
    config = ScoringConfig(
        norms=DEFAULT_SCORING_CONFIG.norms,
        weights={k: 0.0 for k in DEFAULT_SCORING_CONFIG.weights},
        intercept=0.0,
        labels=DEFAULT_SCORING_CONFIG.labels,
    )
    result = evaluate_risk(demo_record, scorer=RiskScorer(config))
    assert result.logistic == pytest.approx(0.5)
    assert all(c.rationale == "" for c in result.contributions)


def test_logit_accumulates_in_feature_order(demo_record, low_risk_record, high_risk_record):
    arm = LogisticEstimator()
    for record in (
        demo_record,
        low_risk_record,
        high_risk_record,
        make_record(**{"health.bmi": 27.3, "health.blood_sugar": 117, "personal.age": 33}),
    ):
        features = extract_features(record)
        logit = DEFAULT_SCORING_CONFIG.intercept
        for c in arm.contributions(features):
            logit += c.impact
        assert arm.estimate(features) == _sigmoid(logit)
