"""
Raw rows shaped like the data store's result sets.

Kept as plain dicts so tests exercise validation at the boundary.
"""

JOB_ROWS = [
    {
        "id": "job-1",
        "title": "Frontend Intern",
        "company": "Acme",
        "location": "Istanbul",
        "job_type": "Internship",
        "skills_required": ["react", "typescript", "node"],
        "salary_range": None,
        "created_at": "2024-01-01T00:00:00Z",
    },
    {
        "id": "job-2",
        "title": "Data Analyst",
        "company": "Globex",
        "location": "Remote",
        "job_type": "Full-time",
        "skills_required": ["sql", "python"],
    },
    {
        "id": "job-3",
        "title": "Backend Developer",
        "company": "Initech",
        "location": "Ankara",
        "job_type": "Full-time",
        "skills_required": ["node", "postgres", "docker", "aws"],
    },
    {
        "id": "job-4",
        "title": "Office Assistant",
        "company": "Umbrella",
        "location": "Izmir",
        "job_type": "Part-time",
        "skills_required": None,
    },
]

PROFILE_ROW = {
    "id": "student-1",
    "first_name": "Ada",
    "last_name": "Yilmaz",
    "skills": ["React", "Node.js"],
    "github_username": None,
    "linkedin_url": "https://linkedin.com/in/ada",
    "profile_image_url": None,
    "level": 2,
    "xp_points": 150,
    "account_type": "free",
}

FULL_RESUME_ROW = {
    "id": "resume-1",
    "user_id": "student-1",
    "title": "Main resume",
    "basic_info": {"name": "Ada Yilmaz", "email": "ada@example.com", "phone": "555-0100", "location": "Istanbul"},
    "education": [{"id": "e1", "institution": "METU", "degree": "BSc", "field": "CS", "start_date": "2020-09"}],
    "experience": [{"id": "x1", "company": "Acme", "position": "Intern", "start_date": "2023-06", "description": "UI work"}],
    "skills": {"technical": ["React"], "soft": []},
    "projects": [{"id": "p1", "title": "Portfolio", "description": "Site", "technologies": ["React"]}],
    "is_primary": False,
}

PARTIAL_RESUME_ROW = {
    "id": "resume-2",
    "user_id": "student-1",
    "title": "Draft",
    "basic_info": {"name": "Ada Yilmaz", "email": "ada@example.com", "phone": "555-0100"},
    "education": [{"id": "e1", "institution": "METU", "degree": "BSc", "field": "CS"}],
    "experience": [],
    "skills": {"technical": [], "soft": []},
    "projects": None,
    "is_primary": True,
}

LEARNING_PATH_ROWS = [
    {"id": "path-1", "title": "React Basics", "description": "Components and hooks", "total_modules": 5, "xp_reward": 100},
    {"id": "path-2", "title": "SQL Fundamentals", "description": "Queries and joins", "total_modules": 2, "xp_reward": 50},
    {"id": "path-3", "title": "Career Prep", "description": "Interviews", "total_modules": 0, "xp_reward": 25},
]

PROGRESS_ROWS = [
    {"student_id": "student-1", "learning_path_id": "path-1", "module_id": "m1"},
    {"student_id": "student-1", "learning_path_id": "path-1", "module_id": "m2"},
    {"student_id": "student-1", "learning_path_id": "path-1", "module_id": "m1"},
    {"student_id": "student-1", "learning_path_id": "path-2", "module_id": "s1"},
    {"student_id": "student-1", "learning_path_id": "path-2", "module_id": "s2"},
]

ENROLLMENT_ROWS = [
    {"student_id": "student-1", "learning_path_id": "path-1"},
    {"student_id": "student-1", "learning_path_id": "path-3"},
]

ACHIEVEMENT_ROWS = [
    {"id": "a1", "name": "First Steps", "type": "profile", "xp_awarded": 10, "earned_at": "2024-02-01"},
    {"id": "a2", "name": "Resume Ready", "type": "resume", "xp_awarded": 25, "earned_at": "2024-02-02"},
    {"id": "a3", "name": "Skill Builder", "type": "profile", "xp_awarded": None},
]

APPLICATION_ROWS = [
    {"id": "app-1", "job_id": "job-1", "student_id": "student-1", "status": "pending"},
]
