#!/usr/bin/env python3
"""
Job Match Scoring - Heuristic skill match between a student and a job.

A student skill "matches" a requirement when either string is a
case-insensitive substring of the other ("Node.js" matches "node",
"react" matches "React Native"). This is an approximate ranking signal,
not a qualification check.
"""

from typing import List, Optional, Sequence
import logging

from core.config_loader import ScoringConfig
from core.exceptions import InvalidInputError
from core.utils import round_half_up, require_sequence
from core.scorer.models import ScoredJob
from database.models import Job

logger = logging.getLogger(__name__)


def skill_matches(skill: str, requirement: str) -> bool:
    """
    Bidirectional case-insensitive containment.

    Strings are compared as stored: no trimming, so "java " does not match
    "javascript", and an empty string is contained in every requirement.
    """
    if not isinstance(skill, str) or not isinstance(requirement, str):
        raise InvalidInputError(f"skills must be strings, got {skill!r} and {requirement!r}")
    s = skill.lower()
    r = requirement.lower()
    return s in r or r in s


def calculate_match_percentage(
    student_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]]
) -> int:
    """
    Calculate the percentage of a job's requirements covered by a student.

    Each student skill is counted at most once, if it matches ANY
    requirement. Because several student skills can match the same
    requirement the raw ratio can exceed 1, so the result is capped.

    Formula: min(100, round_half_up(match_count / len(required) * 100))

    Returns:
        Match percentage (0-100); 0 when either list is empty

    Raises:
        InvalidInputError: either list is None
    """
    skills = require_sequence(student_skills, "student_skills")
    required = require_sequence(required_skills, "required_skills")

    if not skills or not required:
        return 0

    match_count = sum(
        1 for skill in skills
        if any(skill_matches(skill, req) for req in required)
    )

    # Over-counting past the requirement total is expected, so cap silently
    return min(100, round_half_up(match_count / len(required) * 100))


def matched_required_skills(
    student_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]]
) -> List[str]:
    """Required skills covered by at least one student skill, in job order."""
    skills = require_sequence(student_skills, "student_skills")
    required = require_sequence(required_skills, "required_skills")
    return [
        req for req in required
        if any(skill_matches(skill, req) for skill in skills)
    ]


def match_tier(match_percentage: int, config: Optional[ScoringConfig] = None) -> str:
    """Badge tier for a match percentage: strong / good / low."""
    config = config or ScoringConfig()
    if match_percentage >= config.match_strong_threshold:
        return "strong"
    if match_percentage >= config.match_good_threshold:
        return "good"
    return "low"


def rank_jobs_by_match(
    jobs: Optional[Sequence[Job]],
    student_skills: Optional[Sequence[str]],
    config: Optional[ScoringConfig] = None
) -> List[ScoredJob]:
    """
    Annotate every job with its match percentage and sort best-first.

    sorted() is stable, so jobs with equal percentages keep fetch order.
    """
    job_list = require_sequence(jobs, "jobs")
    skills = require_sequence(student_skills, "student_skills")

    scored = []
    for job in job_list:
        pct = calculate_match_percentage(skills, job.skills_required)
        scored.append(ScoredJob(
            job=job,
            match_percentage=pct,
            matched_skills=matched_required_skills(skills, job.skills_required),
            match_tier=match_tier(pct, config),
        ))

    ranked = sorted(scored, key=lambda s: s.match_percentage, reverse=True)
    logger.debug(f"Ranked {len(ranked)} jobs against {len(skills)} skills")
    return ranked


def recommend_jobs(
    jobs: Optional[Sequence[Job]],
    student_skills: Optional[Sequence[str]],
    top_n: int = 3,
    config: Optional[ScoringConfig] = None
) -> List[ScoredJob]:
    """Top-N jobs by match percentage for the dashboard."""
    return rank_jobs_by_match(jobs, student_skills, config)[:max(0, top_n)]
