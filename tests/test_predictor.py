import logging

import pytest

from diseasematch.catalog import DiseaseRecord, InMemoryCatalog, Severity
from diseasematch.errors import InvalidInput
from diseasematch.predictor import (
    DiseasePredictor,
    classify,
    compute_confidence,
    round_half_up,
    validate_symptoms,
)

FILLER = ["xylophone", "quantum"]


def _names(results):
    return [r.disease.name for r in results]


def test_exact_matches_rank_first(catalog):
    results = DiseasePredictor(catalog).predict(["fever", "chills", "muscle aches"])

    assert _names(results) == ["Influenza", "Pneumonia"]
    top = results[0]
    assert top.match_score == 30
    assert top.exact_matches == 3
    assert top.confidence == 95
    # catalog casing is kept
    assert set(top.matched_symptoms) == {"Fever", "Chills", "Muscle Aches"}

    second = results[1]
    assert second.match_score == 20
    assert second.confidence == pytest.approx(20 / 30 * 100 * 1.1)
    assert second.to_dict()["confidence"] == 73


def test_input_is_trimmed_and_lowercased(catalog):
    results = DiseasePredictor(catalog).predict(["  FEVER ", "Chills", "muscle ACHES"])
    assert results[0].disease.name == "Influenza"
    assert results[0].match_score == 30


def test_zero_signal_returns_empty_list(catalog):
    assert DiseasePredictor(catalog).predict(["zebra"] + FILLER) == []


def test_substring_tier_with_low_signal_penalty(catalog):
    results = DiseasePredictor(catalog).predict(["chest"] + FILLER)

    assert _names(results) == ["Pneumonia"]
    r = results[0]
    assert r.match_score == 5
    assert r.exact_matches == 0
    assert r.matched_symptoms == ("chest pain",)
    # base -> severity boost -> penalty
    assert r.confidence == pytest.approx(5 / 30 * 100 * 1.1 * 0.7)
    assert r.to_dict()["confidence"] == 13


def test_fuzzy_tier_and_confidence_tie_break(catalog):
    results = DiseasePredictor(catalog).predict(["fevr"] + FILLER)

    assert [r.match_score for r in results] == [3, 3]
    # same score, the boosted disease wins on confidence
    assert _names(results) == ["Pneumonia", "Influenza"]
    assert results[0].confidence == pytest.approx(10 * 1.1 * 0.7)
    assert results[1].confidence == pytest.approx(10 * 0.7)


@pytest.mark.parametrize(
    "query, candidate, weight",
    [
        ("fever", "fever", 10),
        ("chest", "chest pain", 5),
        ("severe chest pain", "chest pain", 5),
        ("hedache", "headache", 3),
        ("fever", "cough", 0),
    ],
)
def test_classify_tiers(query, candidate, weight):
    assert classify(query, candidate) == weight


def test_one_input_can_match_several_catalog_symptoms():
    catalog = InMemoryCatalog.from_mappings([
        {"name": "Back Trouble", "symptoms": ["chest pain", "back pain", "pain"], "severity": "low"},
    ])
    result = DiseasePredictor(catalog).predict(["pain"] + FILLER)[0]

    assert result.match_score == 5 + 5 + 10
    assert result.exact_matches == 1
    assert set(result.matched_symptoms) == {"chest pain", "back pain", "pain"}


def test_matched_symptoms_are_deduplicated():
    catalog = InMemoryCatalog.from_mappings([
        {"name": "Migraine", "symptoms": ["Headache"], "severity": "medium"},
    ])
    result = DiseasePredictor(catalog).predict(["headache", "head", "ache"])[0]

    assert result.match_score == 10 + 5 + 5
    assert result.matched_symptoms == ("Headache",)


def test_results_truncated_to_three_and_never_padded():
    catalog = InMemoryCatalog.from_mappings([
        {"name": "D1", "symptoms": ["fever", "cough", "rash"], "severity": "low"},
        {"name": "D2", "symptoms": ["fever", "cough"], "severity": "low"},
        {"name": "D3", "symptoms": ["fever"], "severity": "low"},
        {"name": "D4", "symptoms": ["cough"], "severity": "low"},
        {"name": "D5", "symptoms": ["rash"], "severity": "low"},
        {"name": "D6", "symptoms": ["xerostomia"], "severity": "low"},
    ])
    results = DiseasePredictor(catalog).predict(["fever", "cough", "rash"])

    assert len(results) == 3
    assert [r.match_score for r in results] == [30, 20, 10]

    two = DiseasePredictor(InMemoryCatalog(catalog.fetch_all()[:2])).predict(["fever", "cough", "rash"])
    assert _names(two) == ["D1", "D2"]


def test_sorted_by_score_then_confidence(catalog):
    for symptoms in (["fever", "chills", "muscle aches"], ["fevr"] + FILLER, ["fever", "sneezing", "chest"]):
        results = DiseasePredictor(catalog).predict(symptoms)
        keys = [(r.match_score, r.confidence) for r in results]
        assert keys == sorted(keys, reverse=True)
        assert len(results) <= 3


def test_matched_symptoms_come_from_own_record(catalog):
    for r in DiseasePredictor(catalog).predict(["fever", "sneezing", "chest"]):
        assert set(r.matched_symptoms) <= set(r.disease.symptoms)


def test_predict_is_idempotent(catalog):
    predictor = DiseasePredictor(catalog)
    symptoms = ["fever", "sneezing", "chest"]
    assert predictor.predict(symptoms) == predictor.predict(symptoms)


@pytest.mark.parametrize("severity", ["high", "critical"])
def test_severity_boost(severity):
    catalog = InMemoryCatalog.from_mappings([
        {"name": "Mild", "symptoms": ["cough"], "severity": "low"},
        {"name": "Moderate", "symptoms": ["cough"], "severity": "medium"},
        {"name": "Severe", "symptoms": ["cough"], "severity": severity},
    ])
    results = DiseasePredictor(catalog).predict(["cough"] + FILLER)

    assert results[0].disease.name == "Severe"
    assert results[0].confidence > results[1].confidence
    assert results[0].confidence == pytest.approx(10 / 30 * 100 * 1.1)
    assert results[1].confidence == results[2].confidence == pytest.approx(10 / 30 * 100)


def test_confidence_clamped_after_boost():
    assert compute_confidence(30, 3, boosted=True) == 95
    assert compute_confidence(30, 3, boosted=False) == 95
    assert compute_confidence(40, 4, boosted=False) == 95
    assert compute_confidence(25, 2, boosted=True) == pytest.approx(25 / 30 * 100 * 1.1)
    assert compute_confidence(25, 2, boosted=False) == pytest.approx(25 / 30 * 100)


def test_penalty_only_without_exact_match_and_weak_score():
    assert compute_confidence(10, 1, boosted=False) == pytest.approx(10 / 30 * 100)
    assert compute_confidence(14, 0, boosted=False) == pytest.approx(14 / 30 * 100 * 0.7)
    assert compute_confidence(15, 0, boosted=False) == pytest.approx(50)


def test_confidence_always_within_bounds(catalog):
    for symptoms in (["fever", "chills", "muscle aches"], ["fevr"] + FILLER, ["chest"] + FILLER):
        for r in DiseasePredictor(catalog).predict(symptoms):
            assert 0 <= r.confidence <= 95


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12
    assert round_half_up(94.99) == 95


def test_to_dict_shape(catalog):
    d = DiseasePredictor(catalog).predict(["fever", "chills", "muscle aches"])[0].to_dict()
    assert d["name"] == "Influenza"
    assert d["symptoms"] == ["Fever", "Chills", "Muscle Aches"]
    assert d["causes"] == ["Influenza A virus"]
    assert d["precautions"] == [] and d["medicines"] == []
    assert d["severity"] == "medium"
    assert d["category"] == "Respiratory"
    assert isinstance(d["confidence"], int)
    assert sorted(d["matchedSymptoms"]) == ["Chills", "Fever", "Muscle Aches"]


def test_malformed_records_are_skipped(catalog, caplog):
    records = catalog.fetch_all() + [
        DiseaseRecord(id=90, name="Broken", symptoms="fever", severity=Severity.LOW),
        DiseaseRecord(id=91, name="Numbers", symptoms=(1, 2), severity=Severity.LOW),
        DiseaseRecord(id=92, name="Odd Severity", symptoms=("fever",), severity="extreme"),
    ]
    with caplog.at_level(logging.WARNING, logger="diseasematch.predictor"):
        results = DiseasePredictor(InMemoryCatalog(records)).predict(["fever", "chills", "muscle aches"])

    assert _names(results) == ["Influenza", "Pneumonia"]
    assert "Broken" in caplog.text
    assert "Numbers" in caplog.text
    assert "Odd Severity" in caplog.text


def test_string_severity_is_normalized():
    record = DiseaseRecord(id=1, name="Gout", symptoms=("joint pain",), severity="High")
    result = DiseasePredictor(InMemoryCatalog([record])).predict(["joint pain"] + FILLER)[0]
    assert result.disease.severity is Severity.HIGH
    assert result.to_dict()["severity"] == "high"


@pytest.mark.parametrize(
    "symptoms",
    [
        None,
        "fever",
        ["fever", "cough"],
        ["fever", "cough", "rash", "nausea"],
        ["fever", "   ", "cough"],
        ["fever", "", "cough"],
        ["fever", 3, "cough"],
    ],
)
def test_invalid_input(catalog, symptoms):
    with pytest.raises(InvalidInput):
        DiseasePredictor(catalog).predict(symptoms)


def test_validate_symptoms_keeps_original_strings():
    assert validate_symptoms((" Fever", "cough ", "RASH")) == [" Fever", "cough ", "RASH"]
