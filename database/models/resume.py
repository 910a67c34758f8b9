from typing import List, Optional

from pydantic import Field, field_validator

from .base import Record, none_to_empty_list


class ResumeBasicInfo(Record):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    summary: Optional[str] = None

    @field_validator('name', 'email', 'phone', 'location', mode='before')
    @classmethod
    def _text_or_empty(cls, v):
        return "" if v is None else v


class ResumeEducation(Record):
    id: Optional[str] = None
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    gpa: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)


class ResumeExperience(Record):
    id: Optional[str] = None
    company: str = ""
    position: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    location: Optional[str] = None
    description: str = ""
    achievements: List[str] = Field(default_factory=list)


class ResumeSkills(Record):
    technical: List[str] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)

    @field_validator('technical', 'soft', 'languages', 'certifications', mode='before')
    @classmethod
    def _lists(cls, v):
        return none_to_empty_list(v)


class ResumeProject(Record):
    id: Optional[str] = None
    title: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None
    github_link: Optional[str] = None


class ResumeData(Record):
    """
    A student's resume as stored by the resume builder.

    Sections are stored as JSON columns; any of them may be null for a
    freshly created resume.
    """
    id: Optional[str] = None
    user_id: Optional[str] = None
    title: str = "Untitled resume"
    basic_info: ResumeBasicInfo = Field(default_factory=ResumeBasicInfo)
    education: List[ResumeEducation] = Field(default_factory=list)
    experience: List[ResumeExperience] = Field(default_factory=list)
    skills: ResumeSkills = Field(default_factory=ResumeSkills)
    projects: List[ResumeProject] = Field(default_factory=list)
    is_primary: bool = False

    @field_validator('education', 'experience', 'projects', mode='before')
    @classmethod
    def _sections(cls, v):
        return none_to_empty_list(v)

    @field_validator('basic_info', 'skills', mode='before')
    @classmethod
    def _objects(cls, v):
        return {} if v is None else v

    @field_validator('is_primary', mode='before')
    @classmethod
    def _is_primary(cls, v):
        return False if v is None else v
