from .base import Record
from .job import Job, JobApplication
from .resume import (
    ResumeData, ResumeBasicInfo, ResumeEducation, ResumeExperience, ResumeSkills, ResumeProject
)
from .profile import StudentProfile
from .learning import LearningPath, LearningModule, LearningProgress, LearningEnrollment
from .achievement import Achievement

__all__ = [
    'Record',
    'Job',
    'JobApplication',
    'ResumeData',
    'ResumeBasicInfo',
    'ResumeEducation',
    'ResumeExperience',
    'ResumeSkills',
    'ResumeProject',
    'StudentProfile',
    'LearningPath',
    'LearningModule',
    'LearningProgress',
    'LearningEnrollment',
    'Achievement',
]
