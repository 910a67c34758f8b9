"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import copy

import pytest

from core.config_loader import AppConfig
from core.scorer.service import ScoringService
from database.models import (
    Job, StudentProfile, ResumeData, LearningPath, LearningProgress, LearningEnrollment
)
from database.records import parse_records, parse_record
from tests.fixtures import record_fixtures as rows


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "redis: marks tests as requiring a live Redis (deselect with '-m \"not redis\"')"
    )


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def scoring_service(app_config):
    return ScoringService(app_config)


@pytest.fixture
def job_rows():
    return copy.deepcopy(rows.JOB_ROWS)


@pytest.fixture
def jobs(job_rows):
    return parse_records(Job, job_rows)


@pytest.fixture
def profile():
    return parse_record(StudentProfile, copy.deepcopy(rows.PROFILE_ROW))


@pytest.fixture
def full_resume():
    return parse_record(ResumeData, copy.deepcopy(rows.FULL_RESUME_ROW))


@pytest.fixture
def partial_resume():
    return parse_record(ResumeData, copy.deepcopy(rows.PARTIAL_RESUME_ROW))


@pytest.fixture
def learning_paths():
    return parse_records(LearningPath, copy.deepcopy(rows.LEARNING_PATH_ROWS))


@pytest.fixture
def progress_records():
    return parse_records(LearningProgress, copy.deepcopy(rows.PROGRESS_ROWS))


@pytest.fixture
def enrollments():
    return parse_records(LearningEnrollment, copy.deepcopy(rows.ENROLLMENT_ROWS))
