"""List filters used by the jobs, learning paths and achievements pages."""
from typing import List, Optional, Sequence
import logging

from core.exceptions import InvalidInputError
from core.utils import contains_ci, require_sequence
from core.scorer.models import LearningPathProgress
from database.models import Job, Achievement

logger = logging.getLogger(__name__)

LEARNING_PATH_STATUSES = ("all", "enrolled", "not-enrolled", "completed")


def job_matches_search(job: Job, search_term: str) -> bool:
    term = search_term.lower()
    return (
        contains_ci(job.title, term)
        or contains_ci(job.company, term)
        or contains_ci(job.location, term)
        or any(contains_ci(skill, term) for skill in job.skills_required)
    )


def filter_jobs(
    jobs: Optional[Sequence[Job]],
    search_term: Optional[str] = None,
    job_type: Optional[str] = None
) -> List[Job]:
    """
    Filter jobs by free-text search and job type.

    The search term matches title, company, location or any required skill
    (case-insensitive substring). A blank term or job type matches everything.
    """
    result = []
    for job in require_sequence(jobs, "jobs"):
        if search_term and not job_matches_search(job, search_term):
            continue
        if job_type and job.job_type != job_type:
            continue
        result.append(job)
    return result


def filter_learning_paths(
    paths: Optional[Sequence[LearningPathProgress]],
    search_term: Optional[str] = None,
    status: str = "all"
) -> List[LearningPathProgress]:
    """Filter aggregated learning paths by title/description search and status."""
    if status not in LEARNING_PATH_STATUSES:
        raise InvalidInputError(
            f"status must be one of {', '.join(LEARNING_PATH_STATUSES)}, got {status!r}"
        )

    result = list(require_sequence(paths, "learning_paths"))
    if search_term:
        term = search_term.lower()
        result = [
            p for p in result
            if contains_ci(p.title, term) or contains_ci(p.description, term)
        ]

    if status == "enrolled":
        result = [p for p in result if p.enrolled]
    elif status == "not-enrolled":
        result = [p for p in result if not p.enrolled]
    elif status == "completed":
        result = [p for p in result if p.is_completed]

    return result


def filter_achievements(
    achievements: Optional[Sequence[Achievement]],
    achievement_type: Optional[str] = "all"
) -> List[Achievement]:
    items = require_sequence(achievements, "achievements")
    if not achievement_type or achievement_type == "all":
        return list(items)
    return [a for a in items if a.type == achievement_type]


def has_achievement(achievements: Optional[Sequence[Achievement]], name: str) -> bool:
    return any(a.name == name for a in require_sequence(achievements, "achievements"))
