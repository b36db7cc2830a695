"""Tests for the deterministic fallback generator."""

from __future__ import annotations

import pytest

from career_compass.models.career import CareerPath, ResourceRecommendations, SkillGapAnalysis
from career_compass.models.facts import GitHubFacts
from career_compass.models.profile import ProfileAnalysis
from career_compass.models.request import (
    CareerPathRequest,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.models.resume import ResumeAnalysis
from career_compass.pipeline.fallback import fallback, skills_to_learn
from career_compass.templates.roles import GENERIC_TEMPLATE, pick_template


class TestRoleTemplates:
    @pytest.mark.parametrize(
        "role,key",
        [
            ("Frontend Developer", "frontend"),
            ("React engineer", "frontend"),
            ("Backend Engineer", "backend"),
            ("Data Scientist", "data"),
            ("ML Engineer", "data"),
            ("UX Designer", "design"),
            ("Site Reliability Engineer", "devops"),
            ("Physical Therapist", "generic"),
            ("", "generic"),
            (None, "generic"),
        ],
    )
    def test_pick_template(self, role, key):
        assert pick_template(role).key == key

    def test_skills_to_learn_skips_known_skills(self):
        template = pick_template("frontend")
        assert skills_to_learn(template, ["html", " CSS "])[:2] == ["JavaScript", "TypeScript"]

    def test_skills_to_learn_never_empty(self):
        assert skills_to_learn(GENERIC_TEMPLATE, GENERIC_TEMPLATE.curriculum) == list(GENERIC_TEMPLATE.curriculum)


class TestCareerPathFallback:
    def test_complete_plan(self, career_request):
        path = fallback(career_request)
        assert isinstance(path, CareerPath)
        assert path.title == "Frontend Developer Roadmap (Frontend Development)"
        assert path.total_weeks == 8
        assert [w.week for w in path.weekly_plan] == list(range(1, 9))
        assert path.difficulty == "Beginner"
        assert "HTML" not in path.skills_to_learn
        assert all(w.resources and w.milestones and w.skills for w in path.weekly_plan)
        assert path.weekly_plan[-1].projects[0].startswith("Capstone")

    def test_every_curriculum_skill_gets_a_week(self, career_request):
        path = fallback(career_request)
        covered = {s for w in path.weekly_plan for s in w.skills}
        assert covered == set(path.skills_to_learn)

    def test_pace_changes_length(self, career_request):
        slow = fallback(career_request.model_copy(update={"pace": "slow"}))
        assert slow.total_weeks == len(slow.weekly_plan) == 12

    def test_generic_role(self):
        path = fallback(CareerPathRequest(target_role="Underwater Basket Weaver", timeframe="1 month"))
        assert "Professional Development" in path.title
        assert path.job_titles == ["Underwater Basket Weaver"]
        assert path.total_weeks == 4

    def test_deterministic(self, career_request):
        assert fallback(career_request) == fallback(career_request)


class TestOtherFallbacks:
    def test_skill_gap(self):
        result = fallback(SkillGapRequest(target_role="Data Scientist", current_skills=("Python", "Excel")))
        assert isinstance(result, SkillGapAnalysis)
        assert "Python" not in result.missing_skills
        assert result.strong_skills == ["Python"]
        assert result.skills_to_improve == ["Excel"]
        assert [p.skill for p in result.learning_priority] == result.missing_skills
        assert result.learning_priority[0].priority == "High"
        assert result.learning_priority[-1].priority == "Low"

    def test_resources(self):
        result = fallback(ResourceRequest(skill="Rust", level="advanced"))
        assert isinstance(result, ResourceRecommendations)
        assert result.skill == "Rust"
        assert 0 < len(result.resources) <= 8
        assert all(r.difficulty == "Advanced" for r in result.resources)
        assert any(r.url.startswith("Search: ") for r in result.resources)

    def test_github_without_facts(self, github_request):
        result = fallback(github_request)
        assert isinstance(result, ProfileAnalysis)
        assert result.overall_score == 0
        assert result.suggestions[0].priority == "high"
        assert result.action_plan.immediate

    def test_github_with_facts(self, github_request, github_facts):
        result = fallback(github_request, github_facts)
        assert result.overall_score > 0
        assert result.strengths

    def test_linkedin(self, linkedin_request):
        result = fallback(linkedin_request)
        assert isinstance(result, ProfileAnalysis)
        assert len(result.industry_benchmarks) == 9

    def test_resume(self, resume_request):
        result = fallback(resume_request)
        assert isinstance(result, ResumeAnalysis)
        assert result.content_analysis.total_words == len(resume_request.extracted_text.split())
        assert result.section_analysis[0].section == "overall"
        assert "Python" in [s.skill for s in result.skills_analysis.identified_skills]
        assert result.experience_analysis.total_years == 6
        assert result.formatting_analysis.length == "Too short"


@pytest.mark.parametrize(
    "request_",
    [
        CareerPathRequest(target_role="x", timeframe="", pace="fast", experience_level=""),
        CareerPathRequest(target_role="Data Engineer", timeframe="52 weeks", pace="slow"),
        CareerPathRequest(target_role="devops", current_skills=("Linux", "Networking", "Git", "Docker", "CI/CD", "Kubernetes", "Infrastructure as Code", "Monitoring")),
        SkillGapRequest(target_role="designer"),
        SkillGapRequest(target_role="devops", current_skills=("Linux", "Networking", "Git", "Docker", "CI/CD", "Kubernetes", "Infrastructure as Code", "Monitoring")),
        ResourceRequest(skill="x", level="unknown"),
        GitHubProfileRequest(profile_url="https://github.com/a"),
        LinkedInProfileRequest(profile_url="https://linkedin.com/in/a", linkedin_data=LinkedInData()),
        ResumeRequest(extracted_text="x"),
        ResumeRequest(extracted_text="word " * 2000, sections={"skills": "Python"}),
    ],
    ids=lambda r: r.kind,
)
def test_fallback_never_fails(request_):
    result = fallback(request_)
    assert result.to_wire()


def test_fallback_accepts_mismatched_facts(github_request):
    assert isinstance(fallback(github_request, facts={"junk": True}), ProfileAnalysis)
    assert isinstance(fallback(github_request, facts=GitHubFacts(username="octocat")), ProfileAnalysis)
