"""
Tests for ScoringService dashboard aggregation.
"""
import copy

import pytest

from core.config_loader import AppConfig, RecommendationConfig
from core.exceptions import InvalidInputError, InvalidRecordError
from core.scorer.service import ScoringService
from tests.fixtures import record_fixtures as rows


@pytest.fixture
def dashboard_rows():
    return {
        "profile": copy.deepcopy(rows.PROFILE_ROW),
        "jobs": copy.deepcopy(rows.JOB_ROWS),
        "resumes": [copy.deepcopy(rows.FULL_RESUME_ROW), copy.deepcopy(rows.PARTIAL_RESUME_ROW)],
        "paths": copy.deepcopy(rows.LEARNING_PATH_ROWS),
        "progress_records": copy.deepcopy(rows.PROGRESS_ROWS),
        "enrollments": copy.deepcopy(rows.ENROLLMENT_ROWS),
        "achievements": copy.deepcopy(rows.ACHIEVEMENT_ROWS),
        "applications": copy.deepcopy(rows.APPLICATION_ROWS),
    }


class TestScoringService:
    """Test suite for ScoringService."""

    def test_01_build_dashboard(self, scoring_service, dashboard_rows):
        snapshot = scoring_service.build_dashboard(**dashboard_rows)

        assert snapshot.level.level == 2
        assert snapshot.level.progress == 50
        # Primary (partial) resume: basic_info + education
        assert snapshot.resume_completion == 40
        assert snapshot.resume_hint == "Add your work experience to earn 25 XP"
        assert snapshot.applications_sent == 1
        assert snapshot.achievement_xp == 35

    def test_02_recommended_jobs(self, scoring_service, dashboard_rows):
        snapshot = scoring_service.build_dashboard(**dashboard_rows)

        recommended = snapshot.recommended_jobs
        assert [s.job.id for s in recommended] == ["job-1", "job-3", "job-2"]
        assert [s.match_percentage for s in recommended] == [67, 25, 0]

    def test_03_learning_paths(self, scoring_service, dashboard_rows):
        snapshot = scoring_service.build_dashboard(**dashboard_rows)

        by_id = {p.id: p for p in snapshot.learning_paths}
        assert by_id["path-1"].completed_modules == 2
        assert by_id["path-1"].progress == 40
        assert by_id["path-2"].progress == 100
        assert by_id["path-3"].enrolled is True
        assert by_id["path-3"].progress == 0

    def test_04_priority_task(self, scoring_service, dashboard_rows):
        # Has resumes; only 2 skills -> skills task is next
        snapshot = scoring_service.build_dashboard(**dashboard_rows)
        assert snapshot.priority_task.id == "add-skills"
        assert snapshot.priority_task.progress == 67

    def test_05_new_student_defaults(self, scoring_service):
        snapshot = scoring_service.build_dashboard(
            {"id": "new", "skills": None, "level": None, "xp_points": None}
        )
        assert snapshot.level.level == 1
        assert snapshot.level.progress == 0
        assert snapshot.resume_completion == 0
        assert snapshot.resume_hint == "Create your first resume to earn 25 XP"
        assert snapshot.recommended_jobs == []
        assert snapshot.learning_paths == []
        assert snapshot.priority_task.id == "create-resume"

    def test_06_top_n_from_config(self, dashboard_rows):
        service = ScoringService(AppConfig(recommendations=RecommendationConfig(top_n=1)))
        snapshot = service.build_dashboard(**dashboard_rows)
        assert [s.job.id for s in snapshot.recommended_jobs] == ["job-1"]

    def test_07_rank_jobs_returns_every_job(self, scoring_service, job_rows):
        ranked = scoring_service.rank_jobs(job_rows, ["React", "Node.js"])
        assert len(ranked) == 4
        assert ranked[-1].job.id == "job-4"

    def test_08_none_profile(self, scoring_service):
        with pytest.raises(InvalidInputError):
            scoring_service.build_dashboard(None)

    def test_09_none_result_set(self, scoring_service, dashboard_rows):
        dashboard_rows["jobs"] = None
        with pytest.raises(InvalidRecordError):
            scoring_service.build_dashboard(**dashboard_rows)

    def test_10_malformed_row(self, scoring_service, dashboard_rows):
        dashboard_rows["paths"][0]["total_modules"] = "many"
        with pytest.raises(InvalidRecordError) as exc_info:
            scoring_service.build_dashboard(**dashboard_rows)
        assert exc_info.value.model_name == "LearningPath"
        assert exc_info.value.index == 0

    def test_11_padded_row_skill_is_compared_as_stored(self, scoring_service):
        ranked = scoring_service.rank_jobs([{"id": "j", "skills_required": ["java "]}], ["javascript"])
        assert ranked[0].match_percentage == 0
