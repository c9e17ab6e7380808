from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the resume builder UI."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class PersonalInfo(CamelModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    job_title: str = ""
    summary: str = ""


class Experience(CamelModel):
    id: str = ""
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: List[str] = Field(default_factory=list)  # bullet lines


class Education(CamelModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""


class Skill(CamelModel):
    id: str = ""
    name: str = ""
    level: SkillLevel = SkillLevel.INTERMEDIATE


class Project(CamelModel):
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    url: str = ""


class Certification(CamelModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""


class Achievement(CamelModel):
    id: str = ""
    title: str = ""
    description: Union[List[str], str] = ""
    date: str = ""


class AchievementItem(CamelModel):
    title: str = ""
    description: str = ""


# Custom sections are tagged by ``type`` so the content shape is known up front
class TextSection(CamelModel):
    id: str = ""
    title: str = ""
    type: Literal["text"] = "text"
    content: str = ""


class ListSection(CamelModel):
    id: str = ""
    title: str = ""
    type: Literal["list"] = "list"
    # items are plain strings or structured entries such as {name, proficiency}
    content: List[Union[str, Dict[str, Any]]] = Field(default_factory=list)


class AchievementsSection(CamelModel):
    id: str = ""
    title: str = ""
    type: Literal["achievements"] = "achievements"
    content: List[AchievementItem] = Field(default_factory=list)


CustomSection = Annotated[
    Union[TextSection, ListSection, AchievementsSection],
    Field(discriminator="type"),
]


class ResumeData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    custom_sections: List[CustomSection] = Field(default_factory=list)
    projects: Optional[List[Project]] = None
    certifications: Optional[List[Certification]] = None
    achievements: Optional[List[Achievement]] = None
