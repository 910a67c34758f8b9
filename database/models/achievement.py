from typing import Optional

from pydantic import Field, field_validator

from .base import Record


class Achievement(Record):
    id: Optional[str] = None
    name: str
    type: str = "general"
    description: Optional[str] = None
    badge_image_url: Optional[str] = None
    earned_at: Optional[str] = None
    xp_awarded: int = Field(default=0, ge=0)

    @field_validator('xp_awarded', mode='before')
    @classmethod
    def _xp(cls, v):
        return 0 if v is None else v
