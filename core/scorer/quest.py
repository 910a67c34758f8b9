#!/usr/bin/env python3
"""
Job Quest - Onboarding tasks and the "what to do next" pick.

Tasks are derived from the profile plus resume and application counts.
The priority task is the first incomplete one in the configured
priority order, falling back to the first incomplete task overall.
"""

from typing import List, Optional
import logging

from core.config_loader import QuestConfig
from core.exceptions import InvalidInputError
from core.utils import round_half_up
from core.scorer.models import QuestTask
from database.models import StudentProfile

logger = logging.getLogger(__name__)

ALL_COMPLETE_TASK_ID = "all-complete"


def skills_task_progress(skill_count: int, target: int = 3) -> int:
    """Partial credit toward the add-skills task: min(100, count / target * 100)."""
    if skill_count >= target:
        return 100
    return min(100, round_half_up(skill_count / target * 100))


def build_quest_tasks(
    profile: StudentProfile,
    resume_count: int,
    application_count: int,
    config: Optional[QuestConfig] = None
) -> List[QuestTask]:
    """Build the six onboarding tasks in display order."""
    if profile is None:
        raise InvalidInputError("profile must not be None")
    config = config or QuestConfig()

    return [
        QuestTask(
            id="profile-pic",
            title="Add a profile picture",
            description="This will help recruiters remember you and make your profile more professional.",
            xp_reward=25,
            progress=100 if profile.profile_image_url else 0,
            target_url="/settings",
            button_text="Upload Picture",
            category="profile",
        ),
        QuestTask(
            id="add-skills",
            title=f"Add {config.skills_target} skills to your profile",
            description="This will help match you with jobs that align with your skills.",
            xp_reward=25,
            progress=skills_task_progress(len(profile.skills), config.skills_target),
            target_url="/profile",
            button_text="Add Skills",
            category="skill",
        ),
        QuestTask(
            id="github-profile",
            title="Connect your GitHub account",
            description="Showcase your coding projects to potential employers.",
            xp_reward=50,
            progress=100 if profile.github_username else 0,
            target_url="/profile",
            button_text="Connect GitHub",
            category="profile",
        ),
        QuestTask(
            id="linkedin-profile",
            title="Add your LinkedIn profile",
            description="Help recruiters find you on professional networks.",
            xp_reward=25,
            progress=100 if profile.linkedin_url else 0,
            target_url="/profile",
            button_text="Add LinkedIn",
            category="profile",
        ),
        QuestTask(
            id="create-resume",
            title="Create your first resume",
            description="A professional resume is essential for job applications.",
            xp_reward=50,
            progress=100 if resume_count > 0 else 0,
            target_url="/resume-builder",
            button_text="Create Resume",
            category="resume",
        ),
        QuestTask(
            id="apply-job",
            title="Apply to your first job",
            description="Start your job search journey by submitting an application.",
            xp_reward=75,
            progress=100 if application_count > 0 else 0,
            target_url="/jobs",
            button_text="Browse Jobs",
            category="application",
        ),
    ]


def select_priority_task(
    tasks: List[QuestTask],
    config: Optional[QuestConfig] = None
) -> QuestTask:
    config = config or QuestConfig()
    incomplete = [t for t in tasks if not t.is_complete]

    if not incomplete:
        return QuestTask(
            id=ALL_COMPLETE_TASK_ID,
            title="Great job!",
            description="You've completed all the initial tasks. "
                        "Keep building your profile and applying to jobs!",
            xp_reward=0,
            progress=100,
            target_url="/jobs",
            button_text="Browse More Jobs",
            category="application",
        )

    for task_id in config.priority_order:
        task = next((t for t in incomplete if t.id == task_id), None)
        if task is not None:
            return task
    return incomplete[0]
