import pytest

from models.resume_models import Experience, PersonalInfo, ResumeData, Skill
from services.ats_scorer import get_auto_fixes
from services.auto_fixer import (
    ActionVerbPicker,
    AutoFixGenerator,
    HashVerbPicker,
    RandomVerbPicker,
    make_verb_picker,
)
from services.lexicon import (
    ACTION_VERBS,
    MAX_SKILLS_AFTER_FIX,
    PLACEHOLDER_LOCATION,
    PLACEHOLDER_PHONE,
    SUMMARY_CLOSING,
    IndustryCategory,
)


class FixedVerbPicker(ActionVerbPicker):
    def pick(self, line, verbs):
        return "Built"


@pytest.fixture
def engineer_resume():
    return ResumeData(
        personal_info=PersonalInfo(first_name="Kiran", email="kiran@example.com",
                                   job_title="Backend Engineer"),
        experience=[Experience(
            company="Acme",
            position="Engineer",
            description=[
                "wrote internal tooling for deployments",
                "Led migration to Kubernetes",
                "on call",
            ],
        )],
        skills=[Skill(name="Python"), Skill(name="Go")],
    )


def test_empty_document_gets_no_fixes():
    assert get_auto_fixes(ResumeData()).is_empty()


def test_contact_placeholders(engineer_resume):
    fixes = get_auto_fixes(engineer_resume)
    assert fixes.phone == PLACEHOLDER_PHONE
    assert fixes.location == PLACEHOLDER_LOCATION


def test_existing_contact_details_are_left_alone(engineer_resume):
    engineer_resume.personal_info.phone = "+91 98765 43210"
    engineer_resume.personal_info.location = "Chennai"
    fixes = get_auto_fixes(engineer_resume)
    assert fixes.phone is None
    assert fixes.location is None


def test_summary_synthesized_from_title_experience_and_skills(engineer_resume):
    fixes = get_auto_fixes(engineer_resume)
    assert fixes.summary == (
        "Experienced Backend Engineer with 1+ years of expertise in Python, Go. " + SUMMARY_CLOSING
    )


def test_summary_from_title_and_skills_only():
    resume = ResumeData(
        personal_info=PersonalInfo(first_name="Kiran", job_title="Data Analyst"),
        skills=[Skill(name="SQL"), Skill(name="Tableau"), Skill(name="Excel"), Skill(name="R")],
    )
    fixes = get_auto_fixes(resume)
    assert fixes.summary.startswith("Data Analyst with expertise in SQL, Tableau, Excel. ")


def test_summary_not_invented_without_job_title(engineer_resume):
    engineer_resume.personal_info.job_title = ""
    assert get_auto_fixes(engineer_resume).summary is None


def test_long_summary_is_kept(engineer_resume):
    engineer_resume.personal_info.summary = "x" * 60
    assert get_auto_fixes(engineer_resume).summary is None


def test_skills_supplemented_from_industry_keywords(engineer_resume):
    fixes = get_auto_fixes(engineer_resume)
    names = [skill.name for skill in fixes.skills]
    assert names == ["Python", "Go", "JavaScript", "Java", "React"]
    assert all(skill.level.value == "Intermediate" for skill in fixes.skills[2:])
    assert fixes.skills[2].id == "auto-javascript"


def test_skills_total_capped():
    resume = ResumeData(
        personal_info=PersonalInfo(first_name="Kiran", job_title="Engineer"),
        skills=[Skill(name=name) for name in ("C", "Rust", "Zig", "Lua")],
    )
    fixes = get_auto_fixes(resume)
    assert len(fixes.skills) <= MAX_SKILLS_AFTER_FIX


def test_no_skills_fix_without_title_or_experience():
    resume = ResumeData(personal_info=PersonalInfo(first_name="Kiran"), skills=[Skill(name="C")])
    assert get_auto_fixes(resume).skills is None


def test_bullets_get_action_verb_prefix(engineer_resume):
    generator = AutoFixGenerator(engineer_resume, IndustryCategory.SOFTWARE, FixedVerbPicker())
    fixes = generator.generate()
    assert fixes.experience[0].description == [
        "Built wrote internal tooling for deployments",
        "Led migration to Kubernetes",
        "on call",
    ]
    # the input document is untouched
    assert engineer_resume.experience[0].description[0] == "wrote internal tooling for deployments"


def test_no_experience_patch_when_every_bullet_is_fine():
    resume = ResumeData(
        personal_info=PersonalInfo(first_name="Kiran"),
        experience=[Experience(description=["Delivered the billing rewrite", "short"])],
    )
    assert get_auto_fixes(resume).experience is None


def test_hash_picker_is_repeatable(engineer_resume):
    first = get_auto_fixes(engineer_resume)
    second = get_auto_fixes(engineer_resume)
    assert first.experience == second.experience
    line = "wrote internal tooling for deployments"
    assert HashVerbPicker().pick(line, ACTION_VERBS) in ACTION_VERBS


def test_random_picker_with_seed_is_repeatable():
    line = "wrote internal tooling"
    assert RandomVerbPicker(seed=7).pick(line, ACTION_VERBS) == RandomVerbPicker(seed=7).pick(line, ACTION_VERBS)


def test_make_verb_picker():
    assert isinstance(make_verb_picker("hash"), HashVerbPicker)
    assert isinstance(make_verb_picker("random"), RandomVerbPicker)
    with pytest.raises(ValueError):
        make_verb_picker("alphabetical")


def test_verb_picker_requires_pick():
    class Incomplete(ActionVerbPicker):
        pass

    with pytest.raises(TypeError):
        Incomplete()
