#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Optional
from dataclasses import dataclass, field

from database.models import Job


@dataclass
class ScoredJob:
    """A job annotated with the student's skill match."""
    job: Job
    match_percentage: int = 0
    matched_skills: List[str] = field(default_factory=list)
    match_tier: str = "low"


@dataclass
class LearningPathProgress:
    """Per-path progress for one student."""
    id: str
    title: str
    description: str
    total_modules: int
    completed_modules: int = 0
    progress: int = 0
    xp_reward: int = 0
    enrolled: bool = False

    @property
    def is_completed(self) -> bool:
        return self.progress == 100


@dataclass
class LevelProgress:
    level: int
    xp_points: int
    xp_floor: int
    xp_ceiling: int
    progress: int

    @property
    def xp_to_next_level(self) -> int:
        return max(0, self.xp_ceiling - self.xp_points)


@dataclass
class QuestTask:
    """An onboarding task on the Job Quest card."""
    id: str
    title: str
    description: str
    xp_reward: int
    progress: int
    target_url: str
    button_text: str
    category: str

    @property
    def is_complete(self) -> bool:
        return self.progress >= 100


@dataclass
class DashboardSnapshot:
    """Every derived metric the student dashboard renders."""
    level: LevelProgress
    resume_completion: int
    resume_hint: str
    recommended_jobs: List[ScoredJob] = field(default_factory=list)
    learning_paths: List[LearningPathProgress] = field(default_factory=list)
    priority_task: Optional[QuestTask] = None
    applications_sent: int = 0
    achievement_xp: int = 0
