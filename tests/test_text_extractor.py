from models.resume_models import (
    AchievementItem,
    AchievementsSection,
    Education,
    Experience,
    ListSection,
    PersonalInfo,
    ResumeData,
    Skill,
    TextSection,
)
from services.text_extractor import (
    contains_action_verb,
    experience_lines,
    extract_resume_text,
    starts_with_action_verb,
)


def test_extracts_fields_in_order():
    resume = ResumeData(
        personal_info=PersonalInfo(summary="Summary text", job_title="Analyst"),
        experience=[Experience(company="Acme", position="Intern", description=["Line one", "Line two"])],
        education=[Education(degree="BSc", field="Physics", institution="MIT")],
        skills=[Skill(name="Excel"), Skill(name="SQL")],
        custom_sections=[
            TextSection(title="About", content="Free text"),
            ListSection(title="Hobbies", content=["Chess", "Running"]),
        ],
    )
    assert extract_resume_text(resume) == (
        "Summary text Analyst Acme Intern Line one Line two BSc Physics MIT "
        "Excel SQL Free text Chess Running"
    )


def test_achievement_sections_are_not_searched():
    resume = ResumeData(custom_sections=[
        AchievementsSection(content=[AchievementItem(title="Kaggle Grandmaster")]),
    ])
    assert "Kaggle" not in extract_resume_text(resume)


def test_empty_document_does_not_raise():
    assert extract_resume_text(ResumeData()).strip() == ""


def test_custom_sections_parse_from_tagged_json():
    resume = ResumeData.model_validate({
        "personalInfo": {"firstName": "Jane"},
        "customSections": [
            {"id": "1", "title": "Awards", "type": "list", "content": ["Dean's List"]},
            {"id": "2", "title": "Note", "type": "text", "content": "Open to relocation"},
        ],
    })
    assert isinstance(resume.custom_sections[0], ListSection)
    assert isinstance(resume.custom_sections[1], TextSection)
    assert "Dean's List" in extract_resume_text(resume)


def test_experience_lines_span_entries():
    resume = ResumeData(experience=[
        Experience(description=["a", "b"]),
        Experience(description=["c"]),
    ])
    assert list(experience_lines(resume)) == ["a", "b", "c"]


def test_action_verb_helpers():
    assert starts_with_action_verb("Led the platform team")
    assert not starts_with_action_verb("Platform team lead")
    assert contains_action_verb("Team that delivered the platform")


def test_structured_list_items_are_accepted_but_not_searched():
    resume = ResumeData.model_validate({
        "customSections": [{
            "id": "lang",
            "title": "Languages",
            "type": "list",
            "content": ["Sign language", {"name": "Hindi", "proficiency": "Native"}],
        }],
    })
    section = resume.custom_sections[0]
    assert isinstance(section, ListSection)
    assert section.content[1] == {"name": "Hindi", "proficiency": "Native"}
    text = extract_resume_text(resume)
    assert "Sign language" in text
    assert "Hindi" not in text
