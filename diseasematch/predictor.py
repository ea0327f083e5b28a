"""
Symptom-to-disease matching and ranking.

Every (input symptom, catalog symptom) pair lands in exactly one tier:
exact (10) > substring (5) > fuzzy (3). Diseases with no signal are dropped, the rest
are ranked by score then confidence and cut to the top 3.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from diseasematch.catalog import Catalog, DiseaseRecord, Severity, record_to_dict
from diseasematch.errors import InvalidInput, MalformedCatalogEntry
from diseasematch.similarity import are_similar

logger = logging.getLogger(__name__)

REQUIRED_SYMPTOMS = 3
TOP_K = 3

EXACT_WEIGHT = 10
SUBSTRING_WEIGHT = 5
FUZZY_WEIGHT = 3

SEVERITY_BOOST = 1.1
LOW_SIGNAL_PENALTY = 0.7
LOW_SIGNAL_SCORE = 15
CONFIDENCE_CEILING = 95


def normalize(text: str) -> str:
    return text.strip().lower()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_symptoms(symptoms) -> List[str]:
    """Return the symptoms as a list, or raise InvalidInput."""
    if isinstance(symptoms, str) or not isinstance(symptoms, Sequence):
        raise InvalidInput("Symptoms array is required")
    if len(symptoms) != REQUIRED_SYMPTOMS:
        raise InvalidInput(f"Exactly {REQUIRED_SYMPTOMS} symptoms are required")
    if not all(isinstance(s, str) and s.strip() for s in symptoms):
        raise InvalidInput(f"All {REQUIRED_SYMPTOMS} symptoms must be non-empty strings")
    return list(symptoms)


@dataclass(frozen=True)
class MatchResult:
    disease: DiseaseRecord
    match_score: int
    exact_matches: int
    matched_symptoms: Tuple[str, ...]
    confidence: float

    def to_dict(self) -> dict:
        out = record_to_dict(self.disease)
        out["confidence"] = round_half_up(self.confidence)
        out["matchedSymptoms"] = list(self.matched_symptoms)
        return out


def classify(query: str, candidate: str) -> int:
    """Weight contributed by one normalized (input, catalog) pair."""
    if query == candidate:
        return EXACT_WEIGHT
    if candidate in query or query in candidate:
        return SUBSTRING_WEIGHT
    if are_similar(query, candidate):
        return FUZZY_WEIGHT
    return 0


def compute_confidence(match_score: int, exact_matches: int, boosted: bool,
                       input_count: int = REQUIRED_SYMPTOMS) -> float:
    # order matters near the ceiling: base -> severity boost -> penalty -> clamp
    confidence = min(match_score / (input_count * EXACT_WEIGHT) * 100, 100)
    if boosted:
        confidence *= SEVERITY_BOOST
    if exact_matches == 0 and match_score < LOW_SIGNAL_SCORE:
        confidence *= LOW_SIGNAL_PENALTY
    return min(confidence, CONFIDENCE_CEILING)


def _catalog_symptoms(disease: DiseaseRecord):
    symptoms = disease.symptoms
    if isinstance(symptoms, str) or not isinstance(symptoms, Sequence):
        raise MalformedCatalogEntry(disease.name, "symptoms is not a list of strings")
    pairs = []
    for original in symptoms:
        if not isinstance(original, str):
            raise MalformedCatalogEntry(disease.name, "symptoms contains non-string entries")
        norm = normalize(original)
        if norm:
            pairs.append((original, norm))
    return pairs


def score_disease(queries: Sequence[str], disease: DiseaseRecord):
    """Score one disease against normalized queries. None when there is no signal."""
    match_score = 0
    exact_matches = 0
    matched = {}
    candidates = _catalog_symptoms(disease)
    for query in queries:
        for original, candidate in candidates:
            weight = classify(query, candidate)
            if not weight:
                continue
            match_score += weight
            if weight == EXACT_WEIGHT:
                exact_matches += 1
            matched.setdefault(original, None)

    if match_score == 0:
        return None
    try:
        severity = Severity.from_label(disease.severity)
    except ValueError as exc:
        raise MalformedCatalogEntry(disease.name, str(exc))
    if severity is not disease.severity:
        disease = replace(disease, severity=severity)
    confidence = compute_confidence(match_score, exact_matches, severity.boosted, len(queries))
    return MatchResult(
        disease=disease,
        match_score=match_score,
        exact_matches=exact_matches,
        matched_symptoms=tuple(matched),
        confidence=confidence,
    )


def rank(results: Sequence[MatchResult], limit: int = TOP_K) -> List[MatchResult]:
    ordered = sorted(results, key=lambda r: (r.match_score, r.confidence), reverse=True)
    return ordered[:limit]


class DiseasePredictor:
    def __init__(self, catalog: Catalog, limit: int = TOP_K):
        self.catalog = catalog
        self.limit = limit

    def predict(self, symptoms) -> List[MatchResult]:
        symptoms = validate_symptoms(symptoms)
        queries = [normalize(s) for s in symptoms]
        # single snapshot per request
        diseases = self.catalog.fetch_all()

        results = []
        for disease in diseases:
            try:
                result = score_disease(queries, disease)
            except MalformedCatalogEntry as exc:
                logger.warning("Skipping malformed catalog entry %s", exc)
                continue
            if result is not None:
                results.append(result)

        top = rank(results, self.limit)
        logger.info(
            "Scored %d diseases for %d symptoms: %d candidates, top=%s",
            len(diseases), len(queries), len(results), top[0].disease.name if top else None,
        )
        return top
