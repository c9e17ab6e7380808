import logging
import re
from datetime import datetime, timezone
from typing import Callable, List, Optional

from models.ats_models import (
    ATSScore,
    AutoFixSet,
    CompetitorBenchmark,
    DetailedAnalysis,
    KeywordAnalysis,
    ScoreBreakdown,
    ScoringMode,
    Suggestion,
)
from models.resume_models import ResumeData
from services.auto_fixer import ActionVerbPicker, AutoFixGenerator
from services.institution_detector import detect_institution
from services.lexicon import (
    DEFAULT_INDUSTRY,
    INDUSTRY_BENCHMARKS,
    INDUSTRY_KEYWORDS,
    INSTITUTION_PROFILES,
    IndustryCategory,
    InstitutionType,
)
from services.text_extractor import (
    contains_action_verb,
    experience_lines,
    extract_resume_text,
    has_digit,
    starts_with_action_verb,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_PATTERN = re.compile(r'^[\+]?[\d\s\-\(\)]{8,}$')
QUANTIFIED_PATTERN = re.compile(r'\d+%|\$\d+|\d+\+|increased|decreased|improved|reduced', re.IGNORECASE)

MIN_FILLED_SECTIONS = 3


def _clamp(value: float, low: int, high: int) -> int:
    return int(min(high, max(low, value)))


class ATSScorer:
    """
    Scoring session for a single resume.

    Industry and institution are classified once, at construction, and reused
    by every score, suggestion and fix computed from this instance. Build a
    new scorer per document.
    """

    def __init__(self, resume: ResumeData, mode: ScoringMode = ScoringMode.FREE,
                 clock: Optional[Callable[[], datetime]] = None,
                 verb_picker: Optional[ActionVerbPicker] = None):
        self.resume = resume
        self.mode = mode
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.verb_picker = verb_picker

        self.text = extract_resume_text(resume)
        self._text_lower = self.text.lower()
        self.industry = self.detect_industry()
        self.institution = detect_institution(resume)

    @property
    def is_premium(self) -> bool:
        return self.mode is ScoringMode.PREMIUM

    @property
    def industry_keywords(self):
        return INDUSTRY_KEYWORDS[self.industry]

    def detect_industry(self) -> IndustryCategory:
        """Industry whose keyword list has the most hits; software when none hit"""
        detected = DEFAULT_INDUSTRY
        max_hits = 0
        for industry, keywords in INDUSTRY_KEYWORDS.items():
            hits = self._count_hits(keywords)
            if hits > max_hits:
                max_hits = hits
                detected = industry
        logger.debug(f"Detected industry: {detected.value} ({max_hits} keyword hits)")
        return detected

    def _count_hits(self, keywords) -> int:
        return sum(1 for keyword in keywords if keyword.lower() in self._text_lower)

    def has_minimum_content(self) -> bool:
        """At least three of the eight content buckets must be filled"""
        resume = self.resume
        personal = resume.personal_info
        buckets = [
            bool(personal.first_name and personal.email),
            len(resume.experience) > 0,
            len(resume.education) > 0,
            len(resume.skills) >= 3,
            bool(resume.projects),
            len(resume.custom_sections) > 0,
            bool(resume.certifications),
            len(personal.summary or "") > 30,
        ]
        return sum(buckets) >= MIN_FILLED_SECTIONS

    def calculate_ats_score(self) -> Optional[ATSScore]:
        """
        Score the resume, or return None when it is too sparse to score.
        """
        if not self.has_minimum_content():
            logger.info("Resume below minimum content, skipping ATS score")
            return None

        breakdown = ScoreBreakdown(
            formatting=self.formatting_score(),
            keywords=self.keyword_score(),
            sections=self.section_score(),
            readability=self.readability_score(),
            ats_compatibility=self.ats_compatibility_score(),
        )
        dimensions = breakdown.as_list()
        overall = round(sum(dimensions) / len(dimensions)) + self.institution_bonus()

        score = ATSScore(
            overall=min(100, overall),
            breakdown=breakdown,
            suggestions=self.generate_suggestions(breakdown),
            institution=self.institution.type if self.institution else None,
            industry=self.industry.value,
            last_updated=self.clock(),
        )
        logger.info(f"ATS score calculated: {score.overall} (industry={score.industry}, "
                    f"institution={score.institution})")
        return score

    def institution_bonus(self) -> int:
        """Bonus points for a premium user from an institution relevant to the industry"""
        if not (self.institution and self.is_premium):
            return 0
        profile = INSTITUTION_PROFILES[InstitutionType(self.institution.type)]
        if self.industry in profile.categories:
            return profile.bonus
        return 0

    def formatting_score(self) -> int:
        """Score contact information completeness and format"""
        personal = self.resume.personal_info
        score = 85

        if personal.first_name and personal.last_name:
            score += 5
        elif personal.first_name or personal.last_name:
            score += 2
        else:
            score -= 10

        if personal.email:
            score += 5
            if not EMAIL_PATTERN.match(personal.email):
                score -= 3
        else:
            score -= 15

        if personal.phone:
            score += 3
            if not PHONE_PATTERN.match(personal.phone):
                score -= 2
        else:
            score -= 5

        if personal.location:
            score += 2

        return _clamp(score, 70, 100)

    def keyword_score(self) -> int:
        """Score industry keyword coverage and action verb usage"""
        keyword_count = self._count_hits(self.industry_keywords)

        score = 60
        if keyword_count >= 8:
            score += 25
        elif keyword_count >= 5:
            score += 20
        elif keyword_count >= 3:
            score += 15
        elif keyword_count >= 1:
            score += 10

        lines = list(experience_lines(self.resume))
        if lines:
            verb_ratio = sum(1 for line in lines if contains_action_verb(line)) / len(lines)
            if verb_ratio >= 0.7:
                score += 15
            elif verb_ratio >= 0.5:
                score += 10
            elif verb_ratio >= 0.3:
                score += 5

        if self.is_premium:
            score += min(5, int(keyword_count * 0.5))

        return _clamp(score, 0, 100)

    def section_score(self) -> int:
        """Score presence of the expected resume sections"""
        resume = self.resume
        personal = resume.personal_info
        score = 0

        if personal.first_name and personal.email:
            score += 20
        if len(personal.summary or "") > 50:
            score += 20
        if resume.experience:
            score += 25
            # digits in a bullet count as quantified results
            if any(has_digit(line) for line in experience_lines(resume)):
                score += 10
        if resume.education:
            score += 15
        if len(resume.skills) >= 5:
            score += 10
        if resume.projects:
            score += 5
        if resume.certifications:
            score += 5

        return min(100, score)

    def readability_score(self) -> int:
        """Score summary length and bullet quality"""
        summary = self.resume.personal_info.summary or ""
        score = 75

        if 50 <= len(summary) <= 300:
            score += 15
        elif summary:
            score += 5

        lines = list(experience_lines(self.resume))
        good_lines = 0
        for line in lines:
            if 20 <= len(line) <= 250:
                good_lines += 1
            if starts_with_action_verb(line):
                score += 2
            if has_digit(line):
                score += 3

        if lines:
            good_ratio = good_lines / len(lines)
            if good_ratio >= 0.8:
                score += 10
            elif good_ratio >= 0.6:
                score += 5

        return _clamp(score, 60, 100)

    def ats_compatibility_score(self) -> int:
        """Score overall structure as parsed by applicant tracking systems"""
        resume = self.resume
        personal = resume.personal_info
        score = 80

        if personal.first_name and personal.email:
            score += 5
        if resume.experience:
            score += 10
        else:
            score -= 15
        if resume.education:
            score += 5
        if len(resume.skills) >= 5:
            score += 5
        if any(QUANTIFIED_PATTERN.search(line) for line in experience_lines(resume)):
            score += 10
        if len(personal.summary or "") > 30:
            score += 5

        return _clamp(score, 65, 100)

    def generate_suggestions(self, breakdown: ScoreBreakdown) -> List[Suggestion]:
        """Generate improvement suggestions"""
        resume = self.resume
        personal = resume.personal_info
        industry = self.industry.value
        suggestions = []

        if breakdown.formatting < 85:
            if not personal.phone:
                suggestions.append(Suggestion(
                    id="phone-missing",
                    type="warning",
                    category="formatting",
                    title="Add Phone Number",
                    description="Your resume is missing a phone number",
                    suggestion="Add a professional phone number to your contact information",
                    impact="medium",
                ))
            if not personal.location:
                suggestions.append(Suggestion(
                    id="location-missing",
                    type="info",
                    category="formatting",
                    title="Add Location",
                    description="Location information is missing",
                    suggestion="Add your city and state to help with location-based job matching",
                    impact="low",
                ))

        if breakdown.keywords < 75:
            critical = breakdown.keywords < 65
            suggestions.append(Suggestion(
                id="keywords-low",
                type="critical" if critical else "warning",
                category="keywords",
                title="Increase Relevant Keywords",
                description=f"Your resume could benefit from more {industry}-related keywords",
                suggestion=f"Add more relevant {industry} keywords and technologies to improve ATS matching",
                impact="high" if critical else "medium",
            ))

        if len(personal.summary or "") < 50:
            suggestions.append(Suggestion(
                id="summary-missing",
                type="critical",
                category="content",
                title="Add Professional Summary",
                description="Your resume lacks a compelling professional summary",
                suggestion="Add a 2-3 sentence summary highlighting your key qualifications and career objectives",
                impact="high",
            ))

        if len(resume.skills) < 3:
            suggestions.append(Suggestion(
                id="skills-insufficient",
                type="critical",
                category="keywords",
                title="Add Skills Section",
                description="Your resume needs more skills listed",
                suggestion="Add relevant technical and soft skills to improve keyword matching",
                impact="high",
            ))
        elif len(resume.skills) < 5:
            suggestions.append(Suggestion(
                id="skills-few",
                type="info",
                category="keywords",
                title="Consider Adding More Skills",
                description="Adding more skills could improve your ATS score",
                suggestion="Consider adding 2-3 more relevant skills to strengthen your profile",
                impact="low",
            ))

        lines = list(experience_lines(resume))
        if resume.experience:
            if not any(has_digit(line) for line in lines):
                suggestions.append(Suggestion(
                    id="quantify-achievements",
                    type="info",
                    category="content",
                    title="Consider Quantifying Achievements",
                    description="Adding numbers and metrics can strengthen your experience",
                    suggestion="Consider adding numbers, percentages, and metrics to demonstrate your impact",
                    impact="medium",
                ))

            if lines and sum(1 for line in lines if starts_with_action_verb(line)) / len(lines) < 0.5:
                suggestions.append(Suggestion(
                    id="action-verbs",
                    type="info",
                    category="content",
                    title="Consider Using More Action Verbs",
                    description="Starting bullet points with action verbs can improve readability",
                    suggestion='Consider beginning more bullet points with action verbs like '
                               '"Achieved", "Implemented", "Led"',
                    impact="low",
                ))

        if self.is_premium and self.institution:
            profile = INSTITUTION_PROFILES[InstitutionType(self.institution.type)]
            categories = ", ".join(category.value for category in profile.categories)
            suggestions.append(Suggestion(
                id="institution-optimization",
                type="info",
                category="keywords",
                title="Institution-Specific Optimization",
                description=f"Your resume lists {self.institution.type} education",
                suggestion=f"Consider adding more {categories} keywords to maximize your institution bonus",
                impact="medium",
            ))

        return suggestions

    def get_auto_fixes(self) -> AutoFixSet:
        generator = AutoFixGenerator(self.resume, self.industry, self.verb_picker)
        return generator.generate()

    # Premium features

    def get_detailed_analysis(self) -> Optional[DetailedAnalysis]:
        if not self.is_premium:
            return None

        bonus = 0
        if self.institution:
            bonus = INSTITUTION_PROFILES[InstitutionType(self.institution.type)].bonus

        return DetailedAnalysis(
            keyword_density=self.keyword_density(),
            industry_match=self.industry.value,
            institution_bonus=bonus,
            keyword_analysis=self.keyword_analysis(),
            competitor_benchmark=self.competitor_benchmark(),
        )

    def keyword_density(self) -> float:
        """Industry keyword occurrences per hundred words"""
        words = [word for word in self._text_lower.split(' ') if len(word) > 2]
        if not words:
            return 0.0
        occurrences = sum(
            len(re.findall(re.escape(keyword.lower()), self._text_lower))
            for keyword in self.industry_keywords
        )
        return occurrences / len(words) * 100

    def keyword_analysis(self) -> KeywordAnalysis:
        keywords = self.industry_keywords
        found = [k for k in keywords if k.lower() in self._text_lower]
        missing = [k for k in keywords if k.lower() not in self._text_lower]
        return KeywordAnalysis(
            found=found,
            missing=missing[:10],
            total=len(keywords),
            coverage=len(found) / len(keywords) * 100,
        )

    def competitor_benchmark(self) -> CompetitorBenchmark:
        score = self.calculate_ats_score()
        current = score.overall if score else 0
        benchmark = INDUSTRY_BENCHMARKS.get(self.industry, INDUSTRY_BENCHMARKS[DEFAULT_INDUSTRY])

        if current >= benchmark.top10:
            percentile = "Top 10%"
        elif current >= benchmark.top25:
            percentile = "Top 25%"
        elif current >= benchmark.average:
            percentile = "Above Average"
        else:
            percentile = "Below Average"

        return CompetitorBenchmark(
            current_score=current,
            industry_average=benchmark.average,
            top25_percentile=benchmark.top25,
            top10_percentile=benchmark.top10,
            percentile=percentile,
        )


def calculate_ats_score(resume: ResumeData, premium_mode: bool = False) -> Optional[ATSScore]:
    return ATSScorer(resume, ScoringMode.from_flag(premium_mode)).calculate_ats_score()


def get_auto_fixes(resume: ResumeData, premium_mode: bool = False,
                   verb_picker: Optional[ActionVerbPicker] = None) -> AutoFixSet:
    scorer = ATSScorer(resume, ScoringMode.from_flag(premium_mode), verb_picker=verb_picker)
    return scorer.get_auto_fixes()


def get_detailed_analysis(resume: ResumeData, premium_mode: bool = False) -> Optional[DetailedAnalysis]:
    return ATSScorer(resume, ScoringMode.from_flag(premium_mode)).get_detailed_analysis()
