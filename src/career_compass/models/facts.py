"""Fact bundles gathered before any completion call is made."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

RECENT_WEEKS = 12


class RepoFacts(BaseModel):
    name: str
    description: str | None = None
    language: str | None = None
    stars: int = 0
    forks: int = 0
    fork: bool = False
    pushed_at: str | None = None
    languages: dict[str, int] = {}  # language -> bytes
    weekly_commits: list[int] = []  # oldest first, up to 52 weeks


class GitHubFacts(BaseModel):
    """Public metadata for a GitHub user and their most recently pushed repos."""

    username: str
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    blog: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    repos: list[RepoFacts] = []

    @property
    def total_stars(self) -> int:
        return sum(r.stars for r in self.repos)

    @property
    def language_bytes(self) -> dict[str, int]:
        totals: dict[str, int] = {}
        for repo in self.repos:
            langs = repo.languages or ({repo.language: 1} if repo.language else {})
            for lang, size in langs.items():
                totals[lang] = totals.get(lang, 0) + size
        return dict(sorted(totals.items(), key=lambda kv: kv[1], reverse=True))

    @property
    def active_weeks(self) -> int:
        """Number of distinct weeks (last year) with at least one commit in any repo."""
        weeks: dict[int, int] = {}
        for repo in self.repos:
            offset = 52 - len(repo.weekly_commits)
            for i, count in enumerate(repo.weekly_commits):
                weeks[offset + i] = weeks.get(offset + i, 0) + count
        return sum(1 for c in weeks.values() if c > 0)

    @property
    def recent_commits(self) -> int:
        return sum(sum(r.weekly_commits[-RECENT_WEEKS:]) for r in self.repos)

    @property
    def documented_repos(self) -> int:
        return sum(1 for r in self.repos if r.description)


@dataclass
class ResumeFacts:
    """Heuristic facts extracted from resume text."""

    word_count: int
    skills_found: list[str] = field(default_factory=list)
    technical_skills: list[str] = field(default_factory=list)
    soft_skills: list[str] = field(default_factory=list)
    estimated_years: int = 0
    quantified_lines: int = 0
    bullet_lines: int = 0
    action_verbs: list[str] = field(default_factory=list)
    sections_present: list[str] = field(default_factory=list)
    has_contact: bool = False
    target_role: str | None = None
    target_industry: str | None = None
