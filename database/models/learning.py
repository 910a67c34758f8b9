from typing import Optional

from pydantic import Field, field_validator

from .base import Record


class LearningPath(Record):
    """A structured course composed of ordered modules."""
    id: str
    title: str = ""
    description: str = ""
    total_modules: int = Field(default=0, ge=0)
    xp_reward: int = Field(default=0, ge=0)

    @field_validator('total_modules', 'xp_reward', mode='before')
    @classmethod
    def _counts(cls, v):
        return 0 if v is None else v

    @field_validator('description', 'title', mode='before')
    @classmethod
    def _text(cls, v):
        return "" if v is None else v


class LearningModule(Record):
    id: str
    learning_path_id: str
    title: str = ""
    order_number: int = 0


class LearningProgress(Record):
    """Append-only record marking a module as completed by a student."""
    student_id: Optional[str] = None
    learning_path_id: str
    module_id: str


class LearningEnrollment(Record):
    student_id: Optional[str] = None
    learning_path_id: str
