import re
from typing import Iterator, List

from models.resume_models import ListSection, ResumeData, TextSection
from services.lexicon import ACTION_VERBS


def experience_lines(resume: ResumeData) -> Iterator[str]:
    """Yield every experience bullet in document order"""
    for exp in resume.experience:
        for desc in exp.description:
            yield desc


def extract_resume_text(resume: ResumeData) -> str:
    """
    Flatten the searchable parts of a resume into one blob.

    Order: summary, job title, experience (company, position, bullets),
    education as "degree field institution", skill names, then custom
    section text. Achievement-type custom sections are not searched.
    """
    personal = resume.personal_info
    texts: List[str] = [personal.summary or "", personal.job_title or ""]

    for exp in resume.experience:
        texts.append(exp.company)
        texts.append(exp.position)
        texts.extend(exp.description)

    for edu in resume.education:
        texts.append(f"{edu.degree} {edu.field} {edu.institution}")

    texts.extend(skill.name for skill in resume.skills)

    for section in resume.custom_sections:
        if isinstance(section, TextSection):
            texts.append(section.content)
        elif isinstance(section, ListSection):
            texts.extend(item for item in section.content if isinstance(item, str))

    return " ".join(texts)


def starts_with_action_verb(line: str) -> bool:
    lowered = line.lower()
    return any(lowered.startswith(verb.lower()) for verb in ACTION_VERBS)


def contains_action_verb(line: str) -> bool:
    lowered = line.lower()
    return any(verb.lower() in lowered for verb in ACTION_VERBS)


def has_digit(line: str) -> bool:
    return re.search(r'\d', line) is not None
