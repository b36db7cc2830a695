"""Scoring & heuristics engine: pure functions over fact bundles.

Every score is a sum of named, independently capped contributions, clamped
to [0, 100]. Strengths, weaknesses and suggestions come from fixed threshold
rules over the same facts; suggestion priority comes from a fixed severity
table, never from the score.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Union

from career_compass.models.facts import GitHubFacts, ResumeFacts
from career_compass.models.profile import ActionPlan, IndustryBenchmark, Suggestion
from career_compass.models.request import LinkedInData

Facts = Union[GitHubFacts, LinkedInData, ResumeFacts]

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


@dataclass(frozen=True)
class ScoringRule:
    name: str
    max_points: float
    measure: Callable[..., float]
    industry_average: int = 60  # percent of max_points a typical profile earns

    def contribution(self, facts: Facts) -> float:
        return max(0.0, min(self.max_points, float(self.measure(facts))))


@dataclass
class ScoreBreakdown:
    contributions: dict[str, float] = field(default_factory=dict)
    maxima: dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return int(round(max(0.0, min(100.0, sum(self.contributions.values())))))

    def percent(self, name: str) -> int:
        maximum = self.maxima.get(name) or 1.0
        return int(round(100.0 * self.contributions.get(name, 0.0) / maximum))


@dataclass(frozen=True)
class Check:
    """A threshold rule: ``key`` identifies it in the severity table."""

    key: str
    predicate: Callable[..., bool]
    message: str


@dataclass(frozen=True)
class Ruleset:
    scoring: tuple[ScoringRule, ...]
    strengths: tuple[Check, ...]
    weaknesses: tuple[Check, ...]
    # weakness key -> (category, priority, suggestion, impact)
    severity: dict[str, tuple[str, str, str, str]]


# GitHub -----------------------------------------------------------------------

GITHUB_MIN_REPOS = 5
GITHUB_STRONG_REPOS = 15
GITHUB_STRONG_FOLLOWERS = 50
GITHUB_STRONG_STARS = 25
GITHUB_STRONG_LANGUAGES = 4
GITHUB_ACTIVE_WEEKS = 20
GITHUB_LOW_ACTIVE_WEEKS = 4

GITHUB_RULES = Ruleset(
    scoring=(
        ScoringRule("Bio", 10, lambda f: 10 if f.bio else 0, 70),
        ScoringRule("Display name", 5, lambda f: 5 if f.name else 0, 85),
        ScoringRule("Location or company", 5, lambda f: 5 if (f.location or f.company) else 0, 65),
        ScoringRule("Website", 5, lambda f: 5 if f.blog else 0, 40),
        ScoringRule("Repository count", 20, lambda f: f.public_repos * 1.5, 55),
        ScoringRule("Follower count", 10, lambda f: f.followers * 0.2, 35),
        ScoringRule("Stars received", 15, lambda f: f.total_stars * 0.5, 30),
        ScoringRule("Language diversity", 15, lambda f: len(f.language_bytes) * 3, 60),
        ScoringRule("Commit activity", 10, lambda f: f.active_weeks * 0.4, 45),
        ScoringRule(
            "Documented repositories",
            5,
            lambda f: 5 * f.documented_repos / len(f.repos) if f.repos else 0,
            50,
        ),
    ),
    strengths=(
        Check("bio", lambda f: bool(f.bio), "Profile has a bio that introduces you"),
        Check("repos", lambda f: f.public_repos >= GITHUB_STRONG_REPOS, "Large portfolio of public repositories"),
        Check("followers", lambda f: f.followers >= GITHUB_STRONG_FOLLOWERS, "Established follower base in the community"),
        Check("stars", lambda f: f.total_stars >= GITHUB_STRONG_STARS, "Projects have earned community stars"),
        Check("languages", lambda f: len(f.language_bytes) >= GITHUB_STRONG_LANGUAGES, "Works across several programming languages"),
        Check("activity", lambda f: f.active_weeks >= GITHUB_ACTIVE_WEEKS, "Consistent commit activity over the last year"),
    ),
    weaknesses=(
        Check("no_bio", lambda f: not f.bio, "Missing profile bio"),
        Check("few_repos", lambda f: f.public_repos < GITHUB_MIN_REPOS, "Few public repositories to showcase work"),
        Check("no_followers", lambda f: f.followers < 5, "Limited community visibility (few followers)"),
        Check("low_activity", lambda f: f.active_weeks < GITHUB_LOW_ACTIVE_WEEKS, "Little recent commit activity"),
        Check("undocumented", lambda f: bool(f.repos) and f.documented_repos < len(f.repos) / 2, "Most repositories lack a description"),
        Check("no_website", lambda f: not f.blog, "No personal website or portfolio linked"),
    ),
    severity={
        "no_bio": ("Profile", "high", "Write a 1-2 sentence bio stating your focus and stack", "Recruiters understand your profile at a glance"),
        "few_repos": ("Projects", "high", "Publish 2-3 polished projects that reflect your target role", "Gives reviewers concrete evidence of your skills"),
        "low_activity": ("Activity", "medium", "Commit to personal or open-source projects weekly", "A green contribution graph signals consistency"),
        "undocumented": ("Documentation", "medium", "Add descriptions and READMEs to your main repositories", "Makes your projects understandable without reading code"),
        "no_followers": ("Community", "low", "Contribute to open-source issues and share your work", "Builds visibility and network effects"),
        "no_website": ("Profile", "low", "Link a portfolio site or blog in your profile", "Adds context beyond code"),
    },
)

# LinkedIn ---------------------------------------------------------------------

_CONNECTIONS = re.compile(r"\d[\d,]*")


def connection_count(bucket: str | None) -> int:
    """Lower bound of a connection-count bucket such as "500+" or "100-499"."""
    if not bucket:
        return 0
    match = _CONNECTIONS.search(bucket)
    return int(match.group().replace(",", "")) if match else 0


LINKEDIN_MIN_SKILLS = 5
LINKEDIN_STRONG_SKILLS = 15
LINKEDIN_SUMMARY_MIN = 200
LINKEDIN_STRONG_CONNECTIONS = 500

LINKEDIN_RULES = Ruleset(
    scoring=(
        ScoringRule("Headline", 10, lambda f: 10 if f.headline else 0, 90),
        ScoringRule("Summary", 15, lambda f: len(f.summary or "") / 40, 55),
        ScoringRule("Experience entries", 20, lambda f: len(f.experience) * 5, 65),
        ScoringRule("Described experience", 5, lambda f: sum(1 for e in f.experience if e.description) * 2.5, 45),
        ScoringRule("Education", 10, lambda f: len(f.education) * 5, 70),
        ScoringRule("Skills", 15, lambda f: len(f.skills), 60),
        ScoringRule("Recommendations", 10, lambda f: max(0, f.recommendations) * 2.5, 30),
        ScoringRule("Connections", 10, lambda f: connection_count(f.connections) / 50, 55),
        ScoringRule("Posting activity", 5, lambda f: len(f.posts) * 2.5, 25),
    ),
    strengths=(
        Check("headline", lambda f: len(f.headline or "") >= 30, "Descriptive, keyword-rich headline"),
        Check("summary", lambda f: len(f.summary or "") >= LINKEDIN_SUMMARY_MIN, "Detailed About section"),
        Check("experience", lambda f: len(f.experience) >= 3, "Well-documented work history"),
        Check("skills", lambda f: len(f.skills) >= LINKEDIN_STRONG_SKILLS, "Broad set of listed skills"),
        Check("recommendations", lambda f: f.recommendations >= 3, "Social proof through recommendations"),
        Check("network", lambda f: connection_count(f.connections) >= LINKEDIN_STRONG_CONNECTIONS, "Large professional network"),
    ),
    weaknesses=(
        Check("short_headline", lambda f: len(f.headline or "") < 30, "Headline is short or generic"),
        Check("short_summary", lambda f: len(f.summary or "") < LINKEDIN_SUMMARY_MIN, "About section is brief"),
        Check("undescribed_experience", lambda f: any(not e.description for e in f.experience), "Some roles lack descriptions of impact"),
        Check("few_skills", lambda f: len(f.skills) < LINKEDIN_MIN_SKILLS, "Few skills listed"),
        Check("no_recommendations", lambda f: f.recommendations == 0, "No recommendations from colleagues"),
        Check("no_education", lambda f: not f.education, "Education section is empty"),
        Check("no_posts", lambda f: not f.posts, "No recent posts or activity"),
    ),
    severity={
        "short_headline": ("Headline", "high", "Rewrite your headline as role + specialty + value (e.g. 'Backend Engineer | Python, AWS | Scaling APIs')", "Headlines drive search ranking and first impressions"),
        "short_summary": ("About", "high", "Expand your About section to 3-4 short paragraphs with achievements and goals", "Tells your story in your own words"),
        "undescribed_experience": ("Experience", "high", "Add 2-3 quantified achievement bullets to each role", "Shows impact rather than duties"),
        "few_skills": ("Skills", "medium", "List at least 10 relevant skills and pin the top three", "Improves discoverability in recruiter searches"),
        "no_recommendations": ("Social proof", "medium", "Ask two former colleagues or managers for recommendations", "Third-party validation builds trust"),
        "no_education": ("Education", "low", "Add education, certifications or relevant courses", "Completes your profile"),
        "no_posts": ("Engagement", "low", "Share one post per week about what you are learning or building", "Keeps you visible in your network's feed"),
    },
)

# Resume -----------------------------------------------------------------------

COMMON_SKILLS = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "Go", "React", "Node.js",
    "SQL", "HTML", "CSS", "AWS", "Docker", "Kubernetes", "Git",
    "Leadership", "Management", "Communication", "Project Management",
    "Marketing", "Sales", "Design", "Analytics", "Excel", "PowerPoint",
)
SOFT_SKILLS = {"Leadership", "Management", "Communication", "Project Management"}
BUSINESS_SKILLS = {"Marketing", "Sales", "Design", "Analytics", "Excel", "PowerPoint"}
ACTION_VERBS = (
    "achieved", "built", "created", "delivered", "designed", "developed", "improved",
    "increased", "launched", "led", "managed", "optimized", "reduced", "implemented",
)
SECTION_NAMES = ("contact", "summary", "experience", "education", "skills", "projects", "certifications")

_YEARS = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)
_JOB_MARKER = re.compile(r"\b(?:at|@)\s+[A-Z]")
_QUANTIFIED = re.compile(r"\d+\s*%|\$\s?\d|\b\d{2,}\b")
_CONTACT = re.compile(r"[\w.+-]+@[\w-]+\.[\w.]+|\+?\d[\d\s().-]{7,}\d")
_BULLET = re.compile(r"^\s*[-*•●]\s+", re.MULTILINE)

RESUME_IDEAL_MIN_WORDS = 300
RESUME_IDEAL_MAX_WORDS = 800


def _contains_skill(text: str, skill: str) -> bool:
    return re.search(rf"(?<![\w+]){re.escape(skill.lower())}(?![\w+])", text) is not None


def estimate_experience_years(text: str) -> int:
    """Largest "N years" mention, else 2 years per "at <Company>" marker (max 15)."""
    years = [int(m) for m in _YEARS.findall(text)]
    if years:
        return min(max(years), 50)
    return min(len(_JOB_MARKER.findall(text)) * 2, 15)


def resume_facts(
    text: str,
    sections: dict[str, str] | None = None,
    target_role: str | None = None,
    target_industry: str | None = None,
) -> ResumeFacts:
    """Extract heuristic facts from resume text."""
    lowered = text.lower()
    lines = [line for line in text.splitlines() if line.strip()]
    skills = [s for s in COMMON_SKILLS if _contains_skill(lowered, s)]
    present = [name for name, body in (sections or {}).items() if name in SECTION_NAMES and body.strip()]
    if not present:
        present = [name for name in SECTION_NAMES if re.search(rf"^\s*{name}\b", lowered, re.MULTILINE)]
    return ResumeFacts(
        word_count=len(text.split()),
        skills_found=skills,
        technical_skills=[s for s in skills if s not in SOFT_SKILLS | BUSINESS_SKILLS],
        soft_skills=[s for s in skills if s in SOFT_SKILLS],
        estimated_years=estimate_experience_years(text),
        quantified_lines=sum(1 for line in lines if _QUANTIFIED.search(line)),
        bullet_lines=len(_BULLET.findall(text)),
        action_verbs=[v for v in ACTION_VERBS if re.search(rf"\b{v}\b", lowered)],
        sections_present=present,
        has_contact=bool(_CONTACT.search(text)),
        target_role=target_role,
        target_industry=target_industry,
    )


RESUME_RULES = Ruleset(
    scoring=(
        ScoringRule("Length", 15, lambda f: 15 * f.word_count / RESUME_IDEAL_MIN_WORDS, 80),
        ScoringRule("Section coverage", 20, lambda f: len(f.sections_present) * 4, 70),
        ScoringRule("Skills", 15, lambda f: len(f.skills_found) * 2, 60),
        ScoringRule("Quantified achievements", 20, lambda f: f.quantified_lines * 4, 45),
        ScoringRule("Action verbs", 10, lambda f: len(f.action_verbs) * 2, 60),
        ScoringRule("Contact information", 10, lambda f: 10 if f.has_contact else 0, 95),
        ScoringRule("Experience", 10, lambda f: f.estimated_years * 2, 50),
    ),
    strengths=(
        Check("quantified", lambda f: f.quantified_lines >= 5, "Achievements are backed by numbers"),
        Check("verbs", lambda f: len(f.action_verbs) >= 5, "Strong action verbs throughout"),
        Check("skills", lambda f: len(f.skills_found) >= 6, "Clear set of relevant skills"),
        Check("structure", lambda f: len(f.sections_present) >= 4, "Well-structured with standard sections"),
        Check("length", lambda f: RESUME_IDEAL_MIN_WORDS <= f.word_count <= RESUME_IDEAL_MAX_WORDS, "Appropriate length"),
    ),
    weaknesses=(
        Check("no_contact", lambda f: not f.has_contact, "Contact information not found"),
        Check("unquantified", lambda f: f.quantified_lines < 3, "Few quantified achievements"),
        Check("too_short", lambda f: f.word_count < RESUME_IDEAL_MIN_WORDS, "Resume is short on detail"),
        Check("too_long", lambda f: f.word_count > RESUME_IDEAL_MAX_WORDS, "Resume is longer than recruiters prefer"),
        Check("few_skills", lambda f: len(f.skills_found) < 4, "Few recognizable skills or keywords"),
        Check("weak_verbs", lambda f: len(f.action_verbs) < 3, "Limited use of action verbs"),
        Check("missing_sections", lambda f: len(f.sections_present) < 3, "Standard sections are missing"),
    ),
    severity={
        "no_contact": ("Contact", "high", "Add email, phone and a LinkedIn URL at the top", "Recruiters cannot reach you without it"),
        "unquantified": ("Achievements", "high", "Quantify results (%, $, time saved, users served) in each role", "Numbers make impact credible"),
        "missing_sections": ("Structure", "high", "Use standard headings: Summary, Experience, Education, Skills", "ATS parsers rely on standard section names"),
        "few_skills": ("Keywords", "medium", "Add a skills section mirroring keywords from target job posts", "Raises ATS keyword match"),
        "weak_verbs": ("Language", "medium", "Start bullets with action verbs like led, built, improved", "Makes contributions clear and active"),
        "too_short": ("Content", "medium", "Expand recent roles with 3-5 achievement bullets each", "Gives reviewers enough evidence"),
        "too_long": ("Content", "low", "Trim older or less relevant roles to keep to 1-2 pages", "Keeps attention on your strongest work"),
    },
)


def ruleset_for(facts: Facts) -> Ruleset:
    if isinstance(facts, GitHubFacts):
        return GITHUB_RULES
    if isinstance(facts, LinkedInData):
        return LINKEDIN_RULES
    if isinstance(facts, ResumeFacts):
        return RESUME_RULES
    raise TypeError(f"No scoring rules for {type(facts).__name__}")


def score(facts: Facts) -> ScoreBreakdown:
    rules = ruleset_for(facts).scoring
    return ScoreBreakdown(
        contributions={r.name: r.contribution(facts) for r in rules},
        maxima={r.name: r.max_points for r in rules},
    )


def strengths(facts: Facts) -> list[str]:
    return [c.message for c in ruleset_for(facts).strengths if c.predicate(facts)]


def weaknesses(facts: Facts) -> list[str]:
    return [c.message for c in ruleset_for(facts).weaknesses if c.predicate(facts)]


def prioritized_suggestions(facts: Facts) -> list[Suggestion]:
    """Suggestions for every triggered weakness, high priority first."""
    ruleset = ruleset_for(facts)
    suggestions = []
    for check in ruleset.weaknesses:
        if check.key in ruleset.severity and check.predicate(facts):
            category, priority, text, impact = ruleset.severity[check.key]
            suggestions.append(
                Suggestion(category=category, priority=priority, suggestion=text, impact=impact)
            )
    return sorted(suggestions, key=lambda s: PRIORITY_ORDER[s.priority])


def benchmarks(facts: Facts) -> list[IndustryBenchmark]:
    """Per-rule benchmark: the user's share of each rule's points vs a typical profile."""
    ruleset = ruleset_for(facts)
    breakdown = score(facts)
    result = []
    for rule in ruleset.scoring:
        user = breakdown.percent(rule.name)
        if user >= rule.industry_average:
            advice = "At or above typical profiles"
        else:
            advice = f"Below typical profiles; improving {rule.name.lower()} is worth up to {rule.max_points:g} points"
        result.append(
            IndustryBenchmark(
                metric=rule.name,
                user_score=user,
                industry_average=rule.industry_average,
                recommendation=advice,
            )
        )
    return result


def action_plan(suggestions: list[Suggestion]) -> ActionPlan:
    """High priority -> immediate, medium -> short term, low -> long term."""
    buckets: dict[str, list[str]] = {"high": [], "medium": [], "low": []}
    for s in suggestions:
        buckets[s.priority].append(s.suggestion)
    return ActionPlan(immediate=buckets["high"], short_term=buckets["medium"], long_term=buckets["low"])


# Timeframes -------------------------------------------------------------------

MIN_WEEKS = 4
MAX_WEEKS = 52
DEFAULT_WEEKS = 8
PACE_FACTOR = {"slow": 1.5, "normal": 1.0, "fast": 0.75}

_TIMEFRAME = re.compile(r"(\d+(?:\.\d+)?)\s*(week|wk|month|mo|year|yr)?", re.IGNORECASE)
_UNIT_WEEKS = {"week": 1.0, "wk": 1.0, "month": 52 / 12, "mo": 52 / 12, "year": 52.0, "yr": 52.0}


def parse_timeframe_weeks(timeframe: str | None, pace: str = "normal") -> int:
    """Number of plan weeks for a free-text timeframe ("8 weeks", "3 months", "1 year").

    A bare number means weeks; unparseable input means DEFAULT_WEEKS. The
    pace stretches or compresses the plan; the result is clamped to
    [MIN_WEEKS, MAX_WEEKS].
    """
    weeks = float(DEFAULT_WEEKS)
    match = _TIMEFRAME.search(timeframe or "")
    if match:
        unit = (match.group(2) or "week").lower()
        weeks = float(match.group(1)) * _UNIT_WEEKS[unit]
    weeks *= PACE_FACTOR.get(pace, 1.0)
    return max(MIN_WEEKS, min(MAX_WEEKS, int(round(weeks))))
