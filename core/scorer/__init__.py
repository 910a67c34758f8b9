#!/usr/bin/env python3
"""
Scoring Module - Derived metrics for the student dashboard.

Public API:
- ScoringService: Builds a DashboardSnapshot from fetched records
- The pure scorers below, usable on their own

The module is split into focused, single-responsibility files:

- models.py: Data structures (ScoredJob, LearningPathProgress, LevelProgress, ...)
- job_match.py: Skill match percentage and job ranking
- resume_completion.py: Resume section completion
- learning_progress.py: Learning path progress aggregation
- level_progress.py: XP progress toward the next level
- filters.py: Jobs / learning paths / achievements list filters
- quest.py: Job Quest onboarding tasks
- service.py: ScoringService orchestrator
"""

from core.scorer.models import (
    ScoredJob, LearningPathProgress, LevelProgress, QuestTask, DashboardSnapshot
)
from core.scorer.job_match import calculate_match_percentage, rank_jobs_by_match, recommend_jobs
from core.scorer.resume_completion import calculate_resume_completion, student_resume_completion
from core.scorer.learning_progress import (
    group_completed_modules, calculate_path_progress, aggregate_learning_paths
)
from core.scorer.level_progress import calculate_level_progress
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService',
    'ScoredJob',
    'LearningPathProgress',
    'LevelProgress',
    'QuestTask',
    'DashboardSnapshot',
    'calculate_match_percentage',
    'rank_jobs_by_match',
    'recommend_jobs',
    'calculate_resume_completion',
    'student_resume_completion',
    'group_completed_modules',
    'calculate_path_progress',
    'aggregate_learning_paths',
    'calculate_level_progress',
]
