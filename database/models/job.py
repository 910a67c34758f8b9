from typing import List, Optional

from pydantic import Field, field_validator

from .base import Record, none_to_empty_list


class Job(Record):
    """A job posting created by an employer. Read-only to the scorers."""
    id: Optional[str] = None
    title: str = ""
    company: str = ""
    location: str = ""
    job_type: Optional[str] = None  # e.g. "Full-time", "Internship"
    skills_required: List[str] = Field(default_factory=list)
    salary_range: Optional[str] = None
    description: Optional[str] = None
    employer_id: Optional[str] = None

    @field_validator('skills_required', mode='before')
    @classmethod
    def _skills_required(cls, v):
        return none_to_empty_list(v)

    @field_validator('title', 'company', 'location', mode='before')
    @classmethod
    def _text_or_empty(cls, v):
        return "" if v is None else v


class JobApplication(Record):
    id: Optional[str] = None
    job_id: str
    student_id: Optional[str] = None
    status: str = "pending"
