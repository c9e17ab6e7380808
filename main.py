import logging
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from config import config
from models.ats_models import (
    ATSScore,
    ATSScoreResponse,
    AutoFixSet,
    DetailedAnalysis,
    DetectedInstitution,
    ScoreBreakdown,
    ScoringMode,
    Suggestion,
)
from models.resume_models import ResumeData
from services.ats_scorer import ATSScorer
from services.auto_fixer import make_verb_picker
from services.institution_detector import detect_premium_institution


app = FastAPI(title=config.APP_TITLE, version=config.APP_VERSION)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize services
verb_picker = make_verb_picker(config.AUTO_FIX_VERB_STRATEGY)


def fallback_score() -> ATSScore:
    """Degraded result shown when analysis fails unexpectedly"""
    return ATSScore(
        overall=50,
        breakdown=ScoreBreakdown(
            formatting=50,
            keywords=50,
            sections=50,
            readability=50,
            ats_compatibility=50,
        ),
        suggestions=[Suggestion(
            id="error",
            type="critical",
            category="content",
            title="Analysis Error",
            description="Unable to complete full analysis",
            suggestion="Please try refreshing the analysis",
            impact="high",
        )],
        last_updated=datetime.now(timezone.utc),
    )


def build_scorer(resume: ResumeData, premium: bool) -> ATSScorer:
    return ATSScorer(
        resume,
        ScoringMode.from_flag(premium),
        verb_picker=verb_picker,
    )


@app.get("/")
async def root():
    return {"message": "Resume ATS Scorer API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "ats_scorer": "running",
            "institution_detector": "running"
        }
    }


@app.post("/api/ats-score", response_model=ATSScoreResponse)
async def ats_score(resume: ResumeData, premium: bool = Query(False)):
    """
    Score a resume document for ATS compatibility
    """
    try:
        score = build_scorer(resume, premium).calculate_ats_score()
    except Exception as e:
        logger.error(f"Error calculating ATS score: {str(e)}", exc_info=True)
        return ATSScoreResponse(score=fallback_score(), sufficient_content=True,
                                message="Analysis failed, showing a fallback score")

    if score is None:
        return ATSScoreResponse(
            score=None,
            sufficient_content=False,
            message="Fill in at least three resume sections to get an ATS score",
        )
    return ATSScoreResponse(score=score)


@app.post("/api/auto-fixes", response_model=AutoFixSet, response_model_exclude_none=True)
async def auto_fixes(resume: ResumeData, premium: bool = Query(False)):
    """
    Suggest replacement values for weak resume fields
    """
    try:
        return build_scorer(resume, premium).get_auto_fixes()
    except Exception as e:
        logger.error(f"Error generating auto-fixes: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating auto-fixes: {str(e)}")


@app.post("/api/detailed-analysis", response_model=DetailedAnalysis)
async def detailed_analysis(resume: ResumeData, premium: bool = Query(False)):
    """
    Keyword coverage and benchmark report for premium users
    """
    try:
        analysis = build_scorer(resume, premium).get_detailed_analysis()
    except Exception as e:
        logger.error(f"Error building detailed analysis: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building detailed analysis: {str(e)}")

    if analysis is None:
        raise HTTPException(status_code=403, detail="Detailed analysis requires premium mode")
    return analysis


@app.post("/api/institution", response_model=DetectedInstitution)
async def institution(resume: ResumeData):
    """
    Detect a premium institution in the education section
    """
    detection = detect_premium_institution(resume)
    logger.info(f"Institution detection: {detection.type or 'none'} ({detection.confidence:.2f})")
    return detection


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
