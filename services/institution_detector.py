import logging
import re
from typing import Optional

from models.ats_models import DetectedInstitution
from models.resume_models import ResumeData
from services.lexicon import (
    INSTITUTION_CONFIDENCE_FLOOR,
    INSTITUTION_PROFILES,
    InstitutionType,
)

logger = logging.getLogger(__name__)

PARTIAL_MATCH_WEIGHT = 0.8
KEYWORD_MATCH_CONFIDENCE = 0.6


def _partial_confidence(name: str, canonical: str) -> float:
    """Length ratio of the longer string to the shorter, scaled by 0.8 and capped at 1.0"""
    shorter, longer = sorted((len(name), len(canonical)))
    return min(1.0, longer / shorter * PARTIAL_MATCH_WEIGHT)


def _keyword_in(keyword: str, name: str) -> bool:
    return re.search(r'\b' + re.escape(keyword) + r'\b', name) is not None


def detect_institution(resume: ResumeData) -> Optional[DetectedInstitution]:
    """
    Find the best premium-institution match across all education entries.

    Exact canonical names score 1.0, containment in either direction scores
    at least 0.8, a keyword alias scores 0.6. Matches below
    the confidence floor are dropped.
    """
    best_type: Optional[InstitutionType] = None
    best_name = ""
    best_confidence = 0.0

    for education in resume.education:
        raw_name = education.institution.strip()
        if not raw_name:
            continue
        name = raw_name.lower()

        for inst_type, profile in INSTITUTION_PROFILES.items():
            for canonical in profile.names:
                canonical_lower = canonical.lower()

                if name == canonical_lower:
                    logger.debug(f"Exact institution match: {raw_name} -> {inst_type.value}")
                    return DetectedInstitution(type=inst_type.value, name=raw_name, confidence=1.0)

                if canonical_lower in name or name in canonical_lower:
                    confidence = _partial_confidence(name, canonical_lower)
                    if confidence > best_confidence:
                        best_type, best_name, best_confidence = inst_type, raw_name, confidence

            for keyword in profile.keywords:
                if _keyword_in(keyword, name) and KEYWORD_MATCH_CONFIDENCE > best_confidence:
                    best_type, best_name = inst_type, raw_name
                    best_confidence = KEYWORD_MATCH_CONFIDENCE

    if best_type is not None and best_confidence >= INSTITUTION_CONFIDENCE_FLOOR:
        logger.debug(f"Institution match: {best_name} -> {best_type.value} ({best_confidence:.2f})")
        return DetectedInstitution(type=best_type.value, name=best_name, confidence=best_confidence)

    return None


def detect_premium_institution(resume: ResumeData) -> DetectedInstitution:
    """Like detect_institution, but returns an empty result instead of None"""
    return detect_institution(resume) or DetectedInstitution()


def is_premium_institution(resume: ResumeData) -> bool:
    return detect_institution(resume) is not None
