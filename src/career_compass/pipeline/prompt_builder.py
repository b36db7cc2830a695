"""Prompt builder: deterministic system + user prompts for every analysis kind.

Each system prompt carries a literal JSON template of the expected result and
a CRITICAL REQUIREMENTS list that repeats the enum constraints the backend
most often gets wrong. User prompts interpolate every known fact; empty
values render as "none provided" so nothing is dropped silently.
"""

from __future__ import annotations

from dataclasses import dataclass

from career_compass.models.facts import GitHubFacts, ResumeFacts
from career_compass.models.request import (
    CareerPathRequest,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.pipeline.scoring import parse_timeframe_weeks

NONE_PROVIDED = "none provided"


@dataclass(frozen=True)
class Prompt:
    system: str
    user: str


CAREER_PATH_SYSTEM = """\
You are an expert career advisor and learning path designer. Create detailed, practical \
career roadmaps with real resources and actionable steps.

Respond ONLY with JSON in exactly this format:
{
  "title": "Career path title",
  "description": "Detailed description of the career path",
  "duration": "8 weeks",
  "difficulty": "Beginner|Intermediate|Advanced",
  "totalWeeks": 8,
  "prerequisites": ["prerequisite1", "prerequisite2"],
  "outcomes": ["outcome1", "outcome2", "outcome3"],
  "skillsToLearn": ["skill1", "skill2", "skill3"],
  "marketDemand": "High demand with X% growth expected",
  "averageSalary": "$XX,000 - $XX,000",
  "jobTitles": ["title1", "title2", "title3"],
  "weeklyPlan": [
    {
      "week": 1,
      "title": "Week title",
      "description": "What will be learned this week",
      "skills": ["skill1", "skill2"],
      "resources": [
        {
          "title": "Resource title",
          "type": "video|article|course|practice|project",
          "url": "https://real-url.com",
          "duration": "X hours",
          "description": "What this resource covers",
          "source": "Platform name",
          "difficulty": "Beginner|Intermediate|Advanced"
        }
      ],
      "milestones": ["milestone1", "milestone2"],
      "projects": ["project1"]
    }
  ]
}

CRITICAL REQUIREMENTS:
1. "difficulty" must be exactly one of: "Beginner", "Intermediate", "Advanced".
2. Every resource "type" must be exactly one of: "video", "article", "course", "practice", "project".
3. Every resource "difficulty" must be exactly one of: "Beginner", "Intermediate", "Advanced".
4. "weeklyPlan" must contain one entry per week, numbered from 1, covering the full timeframe.
5. Include 3-5 resources with real URLs (YouTube, Coursera, freeCodeCamp, MDN, official docs) per week.
6. Every week needs specific skills, milestones and projects.
7. Do not wrap the JSON in Markdown and do not add commentary."""

SKILL_GAP_SYSTEM = """\
You are an expert career advisor who compares a person's skills with the requirements of a target role.

Respond ONLY with JSON in exactly this format:
{
  "missingSkills": ["skill1", "skill2"],
  "skillsToImprove": ["skill3"],
  "strongSkills": ["skill4"],
  "learningPriority": [
    {
      "skill": "skill1",
      "priority": "High|Medium|Low",
      "reason": "Why this skill matters for the role",
      "timeToLearn": "2-4 weeks"
    }
  ],
  "recommendations": "Overall recommendation"
}

CRITICAL REQUIREMENTS:
1. Every "priority" must be exactly one of: "High", "Medium", "Low".
2. "strongSkills" may only contain skills from the current skills list.
3. Do not wrap the JSON in Markdown and do not add commentary."""

RESOURCES_SYSTEM = """\
You are a learning resource curator. Recommend real, well-known learning resources.

Respond ONLY with a JSON array in exactly this format:
[
  {
    "title": "Resource title",
    "type": "video|article|course|practice|project",
    "url": "https://real-url.com",
    "duration": "X hours",
    "description": "What this resource covers",
    "source": "Platform name",
    "difficulty": "Beginner|Intermediate|Advanced",
    "rating": "4.5/5"
  }
]

CRITICAL REQUIREMENTS:
1. Return at most 8 resources.
2. Every "type" must be exactly one of: "video", "article", "course", "practice", "project".
3. Every "difficulty" must be exactly one of: "Beginner", "Intermediate", "Advanced".
4. Only use URLs of real platforms; if unsure of an exact URL, use "Search: <search terms>".
5. Do not wrap the JSON in Markdown and do not add commentary."""

PROFILE_SYSTEM = """\
You are an expert career coach and recruiter who reviews professional {platform} profiles.

Respond ONLY with JSON in exactly this format:
{{
  "overallScore": 75,
  "strengths": ["strength1", "strength2"],
  "weaknesses": ["weakness1", "weakness2"],
  "suggestions": [
    {{
      "category": "Profile section",
      "priority": "high|medium|low",
      "suggestion": "Specific, actionable suggestion",
      "impact": "Expected impact"
    }}
  ],
  "industryBenchmarks": [
    {{
      "metric": "Metric name",
      "userScore": 60,
      "industryAverage": 70,
      "recommendation": "How to close the gap"
    }}
  ],
  "actionPlan": {{
    "immediate": ["action1"],
    "shortTerm": ["action2"],
    "longTerm": ["action3"]
  }}
}}

CRITICAL REQUIREMENTS:
1. "overallScore", "userScore" and "industryAverage" must be integers from 0 to 100.
2. Every suggestion "priority" must be exactly one of: "high", "medium", "low".
3. Base the review only on the facts provided; do not invent repositories, roles or numbers.
4. Do not wrap the JSON in Markdown and do not add commentary."""

RESUME_SYSTEM = """\
You are an expert resume reviewer and ATS specialist.

Respond ONLY with JSON in exactly this format:
{
  "overallScore": 75,
  "contentAnalysis": {
    "totalWords": 450,
    "readabilityScore": 80,
    "grammarIssues": ["issue"],
    "spellingErrors": ["error"],
    "toneAnalysis": "Professional",
    "clarityScore": 75
  },
  "sectionAnalysis": [
    {
      "section": "experience",
      "score": 70,
      "strengths": ["strength"],
      "weaknesses": ["weakness"],
      "suggestions": ["suggestion"],
      "wordCount": 200
    }
  ],
  "skillsAnalysis": {
    "identifiedSkills": [
      {"skill": "Python", "relevance": "high|medium|low", "frequency": 2, "context": "Where it appears"}
    ],
    "skillsGap": ["skill"],
    "recommendedSkills": ["skill"],
    "technicalSkills": ["skill"],
    "softSkills": ["skill"]
  },
  "experienceAnalysis": {
    "totalYears": 5,
    "careerProgression": "Description",
    "achievementCount": 6,
    "quantifiedAchievements": 3,
    "actionVerbsUsed": ["led"],
    "improvementSuggestions": ["suggestion"]
  },
  "atsAnalysis": {
    "overallScore": 70,
    "keywordMatch": 65,
    "formatting": 75,
    "readability": 80,
    "recommendations": ["recommendation"],
    "missingKeywords": ["keyword"],
    "foundKeywords": ["keyword"]
  },
  "industryAnalysis": {
    "targetIndustry": "Technology",
    "industryRelevance": 70,
    "industryKeywords": ["keyword"],
    "competitorAnalysis": "Description",
    "marketTrends": ["trend"]
  },
  "formattingAnalysis": {
    "structure": "Description",
    "consistency": 75,
    "visualAppeal": 70,
    "length": "Too short|Appropriate|Too long",
    "fontAnalysis": "Description",
    "spacingAnalysis": "Description"
  },
  "recommendations": {
    "immediate": ["action"],
    "shortTerm": ["action"],
    "longTerm": ["action"],
    "priorityActions": ["action"]
  },
  "industryBenchmarks": [
    {"metric": "Overall Score", "userScore": 70, "industryAverage": 75, "topPercentile": 90, "recommendation": "Advice"}
  ],
  "improvementPlan": {
    "weeklyGoals": ["goal"],
    "monthlyGoals": ["goal"],
    "skillDevelopment": ["skill"],
    "networkingAdvice": ["advice"]
  }
}

CRITICAL REQUIREMENTS:
1. Every score field must be an integer from 0 to 100.
2. Every skill "relevance" must be exactly one of: "high", "medium", "low".
3. Base the review only on the resume text provided; quote real skills and keywords from it.
4. Do not wrap the JSON in Markdown and do not add commentary."""


def _listing(items) -> str:
    values = [str(i).strip() for i in items if str(i).strip()]
    return ", ".join(values) if values else NONE_PROVIDED


def _value(value) -> str:
    if value is None:
        return NONE_PROVIDED
    text = str(value).strip()
    return text or NONE_PROVIDED


def _context(text: str | None) -> str:
    return f"\nAdditional context from the user:\n{text.strip()}\n" if text and text.strip() else ""


def career_path_prompt(request: CareerPathRequest) -> Prompt:
    weeks = parse_timeframe_weeks(request.timeframe, request.pace)
    user = f"""Create a comprehensive career learning path for someone who wants to become a {request.target_role.strip()}.

Current context:
- Target Role: {request.target_role.strip()}
- Current Skills: {_listing(request.current_skills)}
- Experience Level: {_value(request.experience_level)}
- Desired Timeframe: {_value(request.timeframe)} ({weeks} weeks at a {request.pace} pace)
- Learning Pace: {request.pace}
- Interests: {_listing(request.interests)}
- Industry: {_value(request.industry)}
{_context(request.additional_context)}
The plan must have exactly {weeks} weeks ("totalWeeks": {weeks}). "difficulty" must be "Beginner", "Intermediate" or "Advanced"."""
    return Prompt(CAREER_PATH_SYSTEM, user)


def skill_gap_prompt(request: SkillGapRequest) -> Prompt:
    user = f"""Analyze the skill gap for the target role below.

- Target Role: {request.target_role.strip()}
- Current Skills: {_listing(request.current_skills)}

Every "priority" must be "High", "Medium" or "Low"."""
    return Prompt(SKILL_GAP_SYSTEM, user)


def resources_prompt(request: ResourceRequest) -> Prompt:
    user = f"""Recommend learning resources.

- Skill: {request.skill.strip()}
- Level: {_value(request.level)}

Return at most 8 resources; "type" must be one of video, article, course, practice, project."""
    return Prompt(RESOURCES_SYSTEM, user)


def _github_facts_text(facts: GitHubFacts) -> str:
    languages = facts.language_bytes
    total = sum(languages.values()) or 1
    language_text = _listing(f"{lang} ({100 * size / total:.0f}%)" for lang, size in languages.items())
    repo_lines = "\n".join(
        f"  - {r.name}: {_value(r.description)} | language {_value(r.language)} | "
        f"{r.stars} stars, {r.forks} forks | commits in last year {sum(r.weekly_commits)}"
        for r in facts.repos
    ) or f"  {NONE_PROVIDED}"
    return f"""- Username: {facts.username}
- Name: {_value(facts.name)}
- Bio: {_value(facts.bio)}
- Company: {_value(facts.company)}
- Location: {_value(facts.location)}
- Website: {_value(facts.blog)}
- Public repositories: {facts.public_repos}
- Followers: {facts.followers}
- Following: {facts.following}
- Total stars on recent repositories: {facts.total_stars}
- Languages: {language_text}
- Weeks with commits in the last year: {facts.active_weeks}
- Commits in the last 12 weeks: {facts.recent_commits}
- Recent repositories:
{repo_lines}"""


def _linkedin_facts_text(data: LinkedInData) -> str:
    experience = "\n".join(
        f"  - {_value(e.title)} at {_value(e.company)} ({_value(e.duration)}): {_value(e.description)}"
        for e in data.experience
    ) or f"  {NONE_PROVIDED}"
    education = "\n".join(
        f"  - {_value(e.degree)} in {_value(e.field)}, {_value(e.school)} ({_value(e.year)})"
        for e in data.education
    ) or f"  {NONE_PROVIDED}"
    posts = "\n".join(f"  - {_value(p.content)} ({p.engagement} engagements)" for p in data.posts) or f"  {NONE_PROVIDED}"
    return f"""- Headline: {_value(data.headline)}
- Summary: {_value(data.summary)}
- Experience:
{experience}
- Education:
{education}
- Skills: {_listing(data.skills)}
- Recommendations received: {data.recommendations}
- Connections: {_value(data.connections)}
- Recent posts:
{posts}"""


def profile_prompt(request: GitHubProfileRequest | LinkedInProfileRequest, facts) -> Prompt:
    if isinstance(request, GitHubProfileRequest):
        platform = "GitHub"
        facts_text = _github_facts_text(facts) if isinstance(facts, GitHubFacts) else f"- {NONE_PROVIDED}"
    else:
        platform = "LinkedIn"
        data = facts if isinstance(facts, LinkedInData) else request.linkedin_data
        facts_text = _linkedin_facts_text(data) if data is not None else f"- {NONE_PROVIDED}"
    user = f"""Review this {platform} profile: {request.profile_url.strip()}

Profile facts:
{facts_text}
{_context(request.additional_context)}
"overallScore" must be an integer from 0 to 100 and every suggestion "priority" must be "high", "medium" or "low"."""
    return Prompt(PROFILE_SYSTEM.format(platform=platform), user)


def resume_prompt(request: ResumeRequest, facts: ResumeFacts | None = None) -> Prompt:
    heuristics = ""
    if facts is not None:
        heuristics = f"""
Pre-computed facts:
- Word count: {facts.word_count}
- Skills detected: {_listing(facts.skills_found)}
- Estimated years of experience: {facts.estimated_years}
- Lines with quantified results: {facts.quantified_lines}
- Action verbs used: {_listing(facts.action_verbs)}
- Sections present: {_listing(facts.sections_present)}
- Contact information found: {"yes" if facts.has_contact else "no"}
"""
    user = f"""Analyze this resume.

- Target Role: {_value(request.target_role)}
- Target Industry: {_value(request.target_industry)}
- Experience Level: {_value(request.experience_level)}
- File: {_value(request.file_name)}
{heuristics}{_context(request.additional_context)}
Resume text:
---
{request.extracted_text.strip()}
---

Every score must be an integer from 0 to 100 and every "relevance" must be "high", "medium" or "low"."""
    return Prompt(RESUME_SYSTEM, user)


def build_prompt(request, facts=None) -> Prompt:
    """Build the prompt pair for ``request`` with the facts gathered for it."""
    if isinstance(request, CareerPathRequest):
        return career_path_prompt(request)
    if isinstance(request, (GitHubProfileRequest, LinkedInProfileRequest)):
        return profile_prompt(request, facts)
    if isinstance(request, ResumeRequest):
        return resume_prompt(request, facts if isinstance(facts, ResumeFacts) else None)
    if isinstance(request, SkillGapRequest):
        return skill_gap_prompt(request)
    if isinstance(request, ResourceRequest):
        return resources_prompt(request)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")
