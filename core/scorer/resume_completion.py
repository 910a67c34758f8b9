#!/usr/bin/env python3
"""
Resume Completion - What share of the five resume sections is filled in.

Sections (20% each): basic_info, education, experience, skills, projects.
"""

from typing import List, Optional, Sequence
import logging

from core.exceptions import InvalidInputError
from core.utils import round_half_up, require_sequence
from database.models import ResumeData

logger = logging.getLogger(__name__)

TOTAL_SECTIONS = 5

# (upper bound exclusive, hint) checked in order; 100 means complete
_HINTS = [
    (1, "Create your first resume to earn 25 XP"),
    (40, "Add your education to earn 25 XP"),
    (60, "Add your work experience to earn 25 XP"),
    (80, "Add your skills to earn 25 XP"),
    (100, "Add some projects to earn 25 XP"),
]
COMPLETE_HINT = "Resume complete! Great job!"


def completed_sections(resume: ResumeData) -> List[str]:
    """Names of the sections that count as complete, in canonical order."""
    if resume is None:
        raise InvalidInputError("resume must not be None")

    done = []
    info = resume.basic_info
    if info.name and info.email and info.phone:
        done.append("basic_info")
    if len(resume.education) > 0:
        done.append("education")
    if len(resume.experience) > 0:
        done.append("experience")
    # Partial skills are enough: either technical or soft
    if len(resume.skills.technical) > 0 or len(resume.skills.soft) > 0:
        done.append("skills")
    if len(resume.projects) > 0:
        done.append("projects")
    return done


def calculate_resume_completion(resume: ResumeData) -> int:
    """
    Calculate resume completion percentage.

    Formula: round_half_up(completed_sections / 5 * 100)

    Raises:
        InvalidInputError: resume is None
    """
    done = completed_sections(resume)
    return round_half_up(len(done) / TOTAL_SECTIONS * 100)


def select_primary_resume(resumes: Optional[Sequence[ResumeData]]) -> Optional[ResumeData]:
    """The resume flagged primary, else the first one, else None."""
    resumes = require_sequence(resumes, "resumes")
    if not resumes:
        return None
    return next((r for r in resumes if r.is_primary), resumes[0])


def student_resume_completion(resumes: Optional[Sequence[ResumeData]]) -> int:
    """Completion of the student's primary resume; 0 when they have none."""
    primary = select_primary_resume(resumes)
    if primary is None:
        return 0
    return calculate_resume_completion(primary)


def next_resume_hint(completion: int) -> str:
    for bound, hint in _HINTS:
        if completion < bound:
            return hint
    return COMPLETE_HINT
