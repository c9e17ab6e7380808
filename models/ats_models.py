from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field

from models.resume_models import CamelModel, Experience, Skill


class ScoringMode(str, Enum):
    FREE = "free"
    PREMIUM = "premium"

    @classmethod
    def from_flag(cls, premium: bool) -> "ScoringMode":
        return cls.PREMIUM if premium else cls.FREE


class Suggestion(CamelModel):
    id: str
    type: Literal["critical", "warning", "info"]
    category: Literal["formatting", "content", "keywords", "structure"]
    title: str
    description: str
    suggestion: str
    impact: Literal["high", "medium", "low"]


class ScoreBreakdown(CamelModel):
    formatting: int
    keywords: int
    sections: int
    readability: int
    ats_compatibility: int

    def as_list(self) -> List[int]:
        return [self.formatting, self.keywords, self.sections,
                self.readability, self.ats_compatibility]


class ATSScore(CamelModel):
    overall: int
    breakdown: ScoreBreakdown
    suggestions: List[Suggestion]
    institution: Optional[str] = None
    industry: Optional[str] = None
    last_updated: datetime


class DetectedInstitution(CamelModel):
    type: Optional[str] = None  # InstitutionType value, None when nothing matched
    name: str = ""
    confidence: float = 0.0


class AutoFixSet(CamelModel):
    """Sparse patch; only the fields that need fixing are set."""
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    skills: Optional[List[Skill]] = None
    experience: Optional[List[Experience]] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class KeywordAnalysis(CamelModel):
    found: List[str]
    missing: List[str]
    total: int
    coverage: float


class CompetitorBenchmark(CamelModel):
    current_score: int
    industry_average: int
    top25_percentile: int = Field(alias="top25Percentile")
    top10_percentile: int = Field(alias="top10Percentile")
    percentile: str


class DetailedAnalysis(CamelModel):
    keyword_density: float
    industry_match: str
    institution_bonus: int
    keyword_analysis: KeywordAnalysis
    competitor_benchmark: CompetitorBenchmark


class ATSScoreResponse(CamelModel):
    score: Optional[ATSScore] = None
    sufficient_content: bool = True
    message: str = ""
