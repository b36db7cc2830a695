"""Tests for the scoring & heuristics engine."""

from __future__ import annotations

import pytest

from career_compass.models.facts import GitHubFacts, RepoFacts, ResumeFacts
from career_compass.models.profile import Suggestion
from career_compass.models.request import LinkedInData
from career_compass.pipeline.scoring import (
    GITHUB_RULES,
    LINKEDIN_RULES,
    RESUME_RULES,
    action_plan,
    benchmarks,
    connection_count,
    estimate_experience_years,
    parse_timeframe_weeks,
    prioritized_suggestions,
    resume_facts,
    ruleset_for,
    score,
    strengths,
    weaknesses,
)


class TestRules:
    @pytest.mark.parametrize("ruleset", [GITHUB_RULES, LINKEDIN_RULES, RESUME_RULES])
    def test_rule_maxima_sum_to_100(self, ruleset):
        assert sum(r.max_points for r in ruleset.scoring) == 100

    @pytest.mark.parametrize("ruleset", [GITHUB_RULES, LINKEDIN_RULES, RESUME_RULES])
    def test_rule_names_unique(self, ruleset):
        names = [r.name for r in ruleset.scoring]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("ruleset", [GITHUB_RULES, LINKEDIN_RULES, RESUME_RULES])
    def test_every_severity_key_is_a_weakness(self, ruleset):
        keys = {c.key for c in ruleset.weaknesses}
        assert set(ruleset.severity) <= keys
        assert all(entry[1] in ("high", "medium", "low") for entry in ruleset.severity.values())

    def test_ruleset_for_unknown_type(self):
        with pytest.raises(TypeError):
            ruleset_for({"followers": 1})


class TestGitHubScoring:
    def test_follower_component_zero_to_capped(self, github_facts):
        low = github_facts.model_copy(update={"followers": 0})
        high = github_facts.model_copy(update={"followers": 500})
        assert score(low).contributions["Follower count"] == 0
        assert score(high).contributions["Follower count"] == 10
        assert score(high).total >= score(low).total

    def test_empty_profile_scores_zero(self):
        assert score(GitHubFacts(username="ghost")).total == 0

    def test_maximal_profile_capped_at_100(self, github_facts):
        facts = github_facts.model_copy(
            update={"public_repos": 10_000, "followers": 10_000, "company": "Acme"}
        )
        assert score(facts).total <= 100

    @pytest.mark.parametrize(
        "field,low,high",
        [
            ("public_repos", 0, 50),
            ("followers", 3, 4),
            ("followers", 10, 10_000),
            ("bio", None, "Hello"),
            ("blog", None, "https://x.dev"),
        ],
    )
    def test_monotonic_in_single_fact(self, github_facts, field, low, high):
        base = score(github_facts.model_copy(update={field: low})).total
        raised = score(github_facts.model_copy(update={field: high})).total
        assert raised >= base

    def test_monotonic_in_stars(self, github_facts):
        totals = []
        for stars in (0, 5, 50, 5000):
            repos = [r.model_copy(update={"stars": stars}) for r in github_facts.repos]
            totals.append(score(github_facts.model_copy(update={"repos": repos})).total)
        assert totals == sorted(totals)

    def test_strengths_and_weaknesses(self, github_facts):
        assert "Profile has a bio that introduces you" in strengths(github_facts)
        assert "Projects have earned community stars" in strengths(github_facts)
        assert "Missing profile bio" not in weaknesses(github_facts)

    def test_suggestions_sorted_by_priority(self):
        suggestions = prioritized_suggestions(GitHubFacts(username="ghost"))
        priorities = [s.priority for s in suggestions]
        assert priorities == ["high", "high", "medium", "low", "low"]
        assert suggestions[0].category == "Profile"

    def test_suggestion_priority_ignores_score(self, github_facts):
        """A weakness keeps its table priority whatever the overall score."""
        strong = github_facts.model_copy(update={"blog": None})
        weak = GitHubFacts(username="ghost")
        def website_priority(facts):
            return next(s.priority for s in prioritized_suggestions(facts) if "portfolio" in s.suggestion)

        assert website_priority(strong) == website_priority(weak) == "low"

    def test_benchmarks_in_range(self, github_facts):
        rows = benchmarks(github_facts)
        assert len(rows) == len(GITHUB_RULES.scoring)
        assert all(0 <= b.user_score <= 100 and 0 <= b.industry_average <= 100 for b in rows)


class TestLinkedInScoring:
    def test_connection_buckets(self):
        assert connection_count("500+") == 500
        assert connection_count("100-499") == 100
        assert connection_count("1,200") == 1200
        assert connection_count(None) == 0
        assert connection_count("many") == 0

    def test_complete_profile_scores_higher_than_empty(self, linkedin_data):
        assert score(linkedin_data).total > score(LinkedInData()).total

    def test_monotonic_in_recommendations(self, linkedin_data):
        totals = [score(linkedin_data.model_copy(update={"recommendations": n})).total for n in (0, 1, 4, 40)]
        assert totals == sorted(totals)

    def test_weaknesses_for_sparse_profile(self):
        found = weaknesses(LinkedInData(headline="Dev"))
        assert "Headline is short or generic" in found
        assert "No recommendations from colleagues" in found


class TestResumeFacts:
    def test_extracts_facts(self, sample_resume_text):
        facts = resume_facts(sample_resume_text, target_role="Backend Engineer")
        assert "Python" in facts.skills_found
        assert "Kubernetes" in facts.skills_found
        assert "Java" not in facts.skills_found
        assert "Leadership" in facts.soft_skills
        assert "Leadership" not in facts.technical_skills
        assert facts.estimated_years == 6
        assert facts.has_contact is True
        assert facts.quantified_lines >= 5
        assert {"led", "built", "improved"} <= set(facts.action_verbs)
        assert {"summary", "experience", "education", "skills"} <= set(facts.sections_present)
        assert facts.target_role == "Backend Engineer"

    def test_sections_argument_takes_precedence(self):
        facts = resume_facts("text", sections={"skills": "Python", "hobbies": "chess", "education": "  "})
        assert facts.sections_present == ["skills"]

    def test_experience_from_job_markers(self):
        assert estimate_experience_years("Engineer at Acme\nDeveloper at Globex") == 4
        assert estimate_experience_years("nothing here") == 0

    def test_strong_resume_outscores_thin_one(self, sample_resume_text):
        assert score(resume_facts(sample_resume_text)).total > score(ResumeFacts(word_count=20)).total

    def test_monotonic_in_quantified_lines(self):
        base = ResumeFacts(word_count=200, quantified_lines=1)
        assert score(ResumeFacts(word_count=200, quantified_lines=9)).total >= score(base).total


class TestActionPlanAndTimeframes:
    def test_action_plan_buckets(self):
        plan = action_plan(
            [
                Suggestion(category="a", priority="high", suggestion="now"),
                Suggestion(category="b", priority="medium", suggestion="soon"),
                Suggestion(category="c", priority="low", suggestion="later"),
            ]
        )
        assert plan.immediate == ["now"]
        assert plan.short_term == ["soon"]
        assert plan.long_term == ["later"]

    @pytest.mark.parametrize(
        "timeframe,pace,weeks",
        [
            ("8 weeks", "normal", 8),
            ("3 months", "normal", 13),
            ("1 year", "normal", 52),
            ("6", "normal", 6),
            ("two months", "normal", 8),
            ("2 weeks", "normal", 4),
            ("3 years", "normal", 52),
            ("8 weeks", "slow", 12),
            ("8 weeks", "fast", 6),
            (None, "normal", 8),
        ],
    )
    def test_parse_timeframe_weeks(self, timeframe, pace, weeks):
        assert parse_timeframe_weeks(timeframe, pace) == weeks
