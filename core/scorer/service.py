#!/usr/bin/env python3
"""
Scoring Service - Derives every dashboard metric for one student.

Takes the result sets the application shell fetched from the data store
(as raw rows or already-validated records) and returns a DashboardSnapshot.
The service holds configuration only; each call is independent.
"""

from typing import Any, List, Mapping, Optional, Sequence, Union
import logging

from core.config_loader import AppConfig
from core.exceptions import InvalidInputError
from core.scorer.models import DashboardSnapshot, ScoredJob, LearningPathProgress
from core.scorer import job_match, resume_completion, learning_progress, level_progress, quest
from database.models import (
    Job, JobApplication, ResumeData, StudentProfile,
    LearningPath, LearningProgress, LearningEnrollment, Achievement
)
from database.records import parse_record, parse_records

logger = logging.getLogger(__name__)

Rows = Optional[Sequence[Union[Mapping[str, Any], Any]]]


class ScoringService:
    """
    Service for the student dashboard metrics.

    Calculates:
    - Level progress toward the next level (floor-truncated)
    - Resume completion of the primary resume, plus the next-step hint
    - Recommended jobs ranked by skill match
    - Learning path progress with enrollment flags
    - The Job Quest priority task
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

    def rank_jobs(self, jobs: Rows, student_skills: Optional[Sequence[str]]) -> List[ScoredJob]:
        """Every job, annotated and sorted by match percentage."""
        return job_match.rank_jobs_by_match(
            parse_records(Job, jobs), student_skills, self.config.scoring
        )

    def recommend_jobs(self, jobs: Rows, student_skills: Optional[Sequence[str]]) -> List[ScoredJob]:
        return job_match.recommend_jobs(
            parse_records(Job, jobs),
            student_skills,
            top_n=self.config.recommendations.top_n,
            config=self.config.scoring,
        )

    def learning_paths(self, paths: Rows, progress_records: Rows, enrollments: Rows) -> List[LearningPathProgress]:
        return learning_progress.aggregate_learning_paths(
            parse_records(LearningPath, paths),
            parse_records(LearningProgress, progress_records),
            parse_records(LearningEnrollment, enrollments),
        )

    def build_dashboard(
        self,
        profile: Union[Mapping[str, Any], StudentProfile],
        jobs: Rows = (),
        resumes: Rows = (),
        paths: Rows = (),
        progress_records: Rows = (),
        enrollments: Rows = (),
        achievements: Rows = (),
        applications: Rows = ()
    ) -> DashboardSnapshot:
        """Calculate the full dashboard snapshot for one student.

        Args:
            profile: Student profile row (skills, level, xp_points, links)
            jobs: Job rows to recommend from
            resumes: The student's resume rows
            paths: All learning path rows
            progress_records: The student's module completion rows
            enrollments: The student's learning path enrollment rows
            achievements: The student's earned achievement rows
            applications: The student's job application rows

        Returns:
            DashboardSnapshot with every derived metric

        Raises:
            InvalidInputError: profile is None
            InvalidRecordError: a result set is None or a row is malformed
        """
        if profile is None:
            raise InvalidInputError("profile must not be None")

        student = parse_record(StudentProfile, profile)
        resume_records = parse_records(ResumeData, resumes)
        application_records = parse_records(JobApplication, applications)
        achievement_records = parse_records(Achievement, achievements)

        level = level_progress.build_level_progress(
            student.level, student.xp_points, self.config.scoring.xp_band
        )
        completion = resume_completion.student_resume_completion(resume_records)

        tasks = quest.build_quest_tasks(
            student,
            resume_count=len(resume_records),
            application_count=len(application_records),
            config=self.config.quest,
        )

        snapshot = DashboardSnapshot(
            level=level,
            resume_completion=completion,
            resume_hint=resume_completion.next_resume_hint(completion),
            recommended_jobs=self.recommend_jobs(jobs, student.skills),
            learning_paths=self.learning_paths(paths, progress_records, enrollments),
            priority_task=quest.select_priority_task(tasks, self.config.quest),
            applications_sent=len(application_records),
            achievement_xp=level_progress.total_achievement_xp(achievement_records),
        )

        logger.info(
            f"Dashboard for {student.id or 'student'}: level {level.level} ({level.progress}%), "
            f"resume {completion}%, {len(snapshot.recommended_jobs)} recommended jobs"
        )
        return snapshot
