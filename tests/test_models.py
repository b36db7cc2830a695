"""Tests for data models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from career_compass.models import (
    AnalysisRequest,
    CareerPath,
    GitHubFacts,
    LearningResource,
    ProfileAnalysis,
    RepoFacts,
    ResourceRequest,
    ResumeAnalysis,
    ResumeRequest,
    WeeklyPlan,
)


class TestWireFormat:
    def test_career_path_uses_camel_case(self):
        path = CareerPath(title="t", total_weeks=4, weekly_plan=[WeeklyPlan(week=1, title="w")])
        wire = path.to_wire()
        assert wire["totalWeeks"] == 4
        assert "weeklyPlan" in wire and "weekly_plan" not in wire
        assert wire["weeklyPlan"][0]["milestones"] == []

    def test_populate_by_either_name(self):
        a = CareerPath.model_validate({"title": "t", "jobTitles": ["Dev"]})
        b = CareerPath(title="t", job_titles=["Dev"])
        assert a == b

    def test_resume_defaults_are_complete(self):
        wire = ResumeAnalysis(overall_score=50).to_wire()
        assert wire["contentAnalysis"]["toneAnalysis"] == "Professional"
        assert wire["atsAnalysis"]["missingKeywords"] == []
        assert wire["recommendations"]["priorityActions"] == []

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            ProfileAnalysis(overall_score=101)

    def test_illegal_enum_rejected(self):
        with pytest.raises(ValidationError):
            LearningResource(title="x", difficulty="Expert")

    def test_list_defaults_not_shared(self):
        a, b = CareerPath(title="a"), CareerPath(title="b")
        a.outcomes.append("x")
        assert b.outcomes == []


class TestRequests:
    def test_discriminated_union(self):
        adapter = TypeAdapter(AnalysisRequest)
        request = adapter.validate_python({"kind": "resources", "skill": "Rust"})
        assert isinstance(request, ResourceRequest)
        assert request.level == "beginner"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AnalysisRequest).validate_python({"kind": "horoscope"})

    def test_requests_are_frozen(self):
        request = ResumeRequest(extracted_text="text")
        with pytest.raises(ValidationError):
            request.target_role = "Engineer"


class TestGitHubFacts:
    def test_derived_metrics(self):
        facts = GitHubFacts(
            username="u",
            repos=[
                RepoFacts(name="a", stars=3, description="A", languages={"Go": 10}, weekly_commits=[1, 0, 2]),
                RepoFacts(name="b", stars=4, language="Rust", weekly_commits=[0, 0, 5]),
            ],
        )
        assert facts.total_stars == 7
        assert facts.language_bytes == {"Go": 10, "Rust": 1}
        assert facts.active_weeks == 2
        assert facts.recent_commits == 8
        assert facts.documented_repos == 1
