from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .base import Record, none_to_empty_list


class StudentProfile(Record):
    """Student profile row: skills and gamification counters."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    github_username: Optional[str] = None
    linkedin_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    level: int = Field(default=1, ge=1)
    xp_points: int = Field(default=0, ge=0)
    account_type: Literal["free", "premium"] = "free"

    @field_validator('skills', mode='before')
    @classmethod
    def _skills(cls, v):
        return none_to_empty_list(v)

    @field_validator('level', mode='before')
    @classmethod
    def _level(cls, v):
        return 1 if v is None else v

    @field_validator('xp_points', mode='before')
    @classmethod
    def _xp(cls, v):
        return 0 if v is None else v

    @field_validator('account_type', mode='before')
    @classmethod
    def _account_type(cls, v):
        return "free" if v is None else v
