import hashlib
import logging
import random
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from models.ats_models import AutoFixSet
from models.resume_models import Experience, ResumeData, Skill, SkillLevel
from services.lexicon import (
    ACTION_VERBS,
    INDUSTRY_KEYWORDS,
    MAX_SKILLS_AFTER_FIX,
    PLACEHOLDER_LOCATION,
    PLACEHOLDER_PHONE,
    SUMMARY_CLOSING,
    IndustryCategory,
)
from services.text_extractor import starts_with_action_verb

logger = logging.getLogger(__name__)


class ActionVerbPicker(ABC):
    """Chooses the verb prepended to a bullet that lacks one."""

    @abstractmethod
    def pick(self, line: str, verbs: Sequence[str]) -> str:
        ...


class HashVerbPicker(ActionVerbPicker):
    """Same line, same verb; stable across processes."""

    def pick(self, line: str, verbs: Sequence[str]) -> str:
        digest = hashlib.md5(line.encode("utf-8")).hexdigest()
        return verbs[int(digest, 16) % len(verbs)]


class RandomVerbPicker(ActionVerbPicker):
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def pick(self, line: str, verbs: Sequence[str]) -> str:
        return self._rng.choice(list(verbs))


def make_verb_picker(strategy: str) -> ActionVerbPicker:
    if strategy == "hash":
        return HashVerbPicker()
    if strategy == "random":
        return RandomVerbPicker()
    raise ValueError(f"Unknown action verb strategy: {strategy!r}")


def _slug(text: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', text.lower()).strip('-')


class AutoFixGenerator:
    """Builds a sparse patch of replacement values for weak resume fields"""

    def __init__(self, resume: ResumeData, industry: IndustryCategory,
                 verb_picker: Optional[ActionVerbPicker] = None):
        self.resume = resume
        self.industry = industry
        self.verb_picker = verb_picker or HashVerbPicker()

    def has_any_data(self) -> bool:
        personal = self.resume.personal_info
        return bool(
            personal.first_name or personal.last_name or personal.email
            or self.resume.experience or self.resume.education or self.resume.skills
        )

    def generate(self) -> AutoFixSet:
        fixes = AutoFixSet()
        if not self.has_any_data():
            return fixes

        personal = self.resume.personal_info
        has_identity = bool(personal.first_name or personal.email)

        # Placeholders only, never invented contact details
        if not personal.phone and has_identity:
            fixes.phone = PLACEHOLDER_PHONE
        if not personal.location and has_identity:
            fixes.location = PLACEHOLDER_LOCATION

        if not personal.summary or len(personal.summary) < 50:
            fixes.summary = self._build_summary()

        fixes.skills = self._supplement_skills()
        fixes.experience = self._rewrite_experience()

        logger.info(f"Auto-fix generated for fields: {sorted(fixes.model_dump(exclude_none=True))}")
        return fixes

    def _build_summary(self) -> Optional[str]:
        job_title = self.resume.personal_info.job_title.strip()
        experience_count = len(self.resume.experience)
        skills = [s.name for s in self.resume.skills[:3] if s.name]

        if not job_title or not (experience_count > 0 or len(skills) >= 2):
            return None

        if experience_count > 0 and skills:
            opening = (f"Experienced {job_title} with {experience_count}+ years of "
                       f"expertise in {', '.join(skills)}")
        elif len(skills) >= 2:
            opening = f"{job_title} with expertise in {', '.join(skills)}"
        else:
            opening = (f"Experienced {job_title} with {experience_count}+ years of "
                       f"professional experience")

        return ". ".join([opening, SUMMARY_CLOSING])

    def _supplement_skills(self) -> Optional[List[Skill]]:
        current = self.resume.skills
        if len(current) >= 5:
            return None
        if not (self.resume.personal_info.job_title or self.resume.experience):
            return None

        known = {s.name.lower() for s in current}
        room = min(3, MAX_SKILLS_AFTER_FIX - len(current))
        additions = [
            Skill(id=f"auto-{_slug(name)}", name=name, level=SkillLevel.INTERMEDIATE)
            for name in INDUSTRY_KEYWORDS[self.industry]
            if name.lower() not in known
        ][:room]

        if not additions:
            return None
        return list(current) + additions

    def _rewrite_line(self, line: str) -> str:
        if starts_with_action_verb(line) or len(line) <= 10:
            return line
        verb = self.verb_picker.pick(line, ACTION_VERBS)
        return f"{verb} {line.lower()}"

    def _rewrite_experience(self) -> Optional[List[Experience]]:
        changed = False
        rewritten = []
        for exp in self.resume.experience:
            lines = [self._rewrite_line(line) for line in exp.description]
            if lines != exp.description:
                changed = True
            rewritten.append(exp.model_copy(update={"description": lines}))
        return rewritten if changed else None
