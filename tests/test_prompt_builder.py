"""Tests for the prompt builder."""

from __future__ import annotations

import pytest

from career_compass.models.request import (
    CareerPathRequest,
    LinkedInProfileRequest,
    ResourceRequest,
    SkillGapRequest,
)
from career_compass.pipeline.prompt_builder import (
    NONE_PROVIDED,
    Prompt,
    build_prompt,
)
from career_compass.pipeline.scoring import resume_facts
from career_compass.pipeline.schemas import DIFFICULTY, LEARNING_PRIORITY, PRIORITY, RESOURCE_TYPE


class TestCareerPathPrompt:
    def test_embeds_json_template_and_facts(self, career_request):
        prompt = build_prompt(career_request)
        assert isinstance(prompt, Prompt)
        assert '"weeklyPlan": [' in prompt.system
        assert "Frontend Developer" in prompt.user
        assert "HTML, CSS" in prompt.user
        assert "8 weeks" in prompt.user
        assert "web apps" in prompt.user
        assert "Learning Pace: normal" in prompt.user

    def test_difficulty_constraint_restated(self, career_request):
        prompt = build_prompt(career_request)
        requirements = prompt.system.split("CRITICAL REQUIREMENTS:")[1]
        for value in DIFFICULTY.legal:
            assert f'"{value}"' in requirements
            assert value in prompt.system.split("CRITICAL REQUIREMENTS:")[0]
        for value in RESOURCE_TYPE.legal:
            assert f'"{value}"' in requirements

    def test_empty_lists_render_as_none_provided(self):
        prompt = build_prompt(CareerPathRequest(target_role="Data Analyst"))
        assert f"Current Skills: {NONE_PROVIDED}" in prompt.user
        assert f"Interests: {NONE_PROVIDED}" in prompt.user
        assert f"Industry: {NONE_PROVIDED}" in prompt.user

    def test_additional_context_included(self, career_request):
        prompt = build_prompt(career_request.model_copy(update={"additional_context": "Evenings only"}))
        assert "Evenings only" in prompt.user

    def test_deterministic(self, career_request):
        assert build_prompt(career_request) == build_prompt(career_request)

    def test_plan_length_matches_pace(self, career_request):
        prompt = build_prompt(career_request.model_copy(update={"pace": "fast"}))
        assert '"totalWeeks": 6' in prompt.user


class TestProfilePrompts:
    def test_github_facts_interpolated(self, github_request, github_facts):
        prompt = build_prompt(github_request, github_facts)
        assert "GitHub" in prompt.system
        assert "Followers: 120" in prompt.user
        assert "hello-world" in prompt.user
        assert "Python (90%)" in prompt.user
        for value in PRIORITY.legal:
            assert f'"{value}"' in prompt.system.split("CRITICAL REQUIREMENTS:")[1]

    def test_github_without_facts(self, github_request):
        prompt = build_prompt(github_request)
        assert NONE_PROVIDED in prompt.user

    def test_linkedin_facts_interpolated(self, linkedin_request):
        prompt = build_prompt(linkedin_request)
        assert "LinkedIn" in prompt.system
        assert "Backend Engineer at Acme" in prompt.user
        assert "Connections: 500+" in prompt.user
        assert "Shipped a new API" in prompt.user

    def test_linkedin_with_empty_bundle_does_not_crash(self):
        prompt = build_prompt(LinkedInProfileRequest(profile_url="https://linkedin.com/in/x"))
        assert NONE_PROVIDED in prompt.user

    def test_profile_system_is_valid_template(self, github_request):
        """The JSON example in the profile prompt uses single braces after formatting."""
        system = build_prompt(github_request).system
        assert '"actionPlan": {' in system
        assert "{{" not in system


class TestOtherPrompts:
    def test_resume_prompt_includes_text_and_facts(self, resume_request):
        facts = resume_facts(resume_request.extracted_text)
        prompt = build_prompt(resume_request, facts)
        assert "Jane Doe" in prompt.user
        assert "Estimated years of experience: 6" in prompt.user
        assert '"atsAnalysis"' in prompt.system

    def test_skill_gap_prompt(self):
        prompt = build_prompt(SkillGapRequest(target_role="SRE", current_skills=("Linux",)))
        assert "Linux" in prompt.user
        for value in LEARNING_PRIORITY.legal:
            assert f'"{value}"' in prompt.system

    def test_resources_prompt(self):
        prompt = build_prompt(ResourceRequest(skill="Rust", level="advanced"))
        assert prompt.system.lstrip().count("[") >= 1
        assert "Rust" in prompt.user
        assert "at most 8" in prompt.system

    def test_unknown_request_type(self):
        with pytest.raises(TypeError):
            build_prompt(object())
