"""GitHub REST API wrapper for public profile metadata (read-only)."""

from __future__ import annotations

import asyncio
import logging
import os

import httpx
from pydantic import ValidationError

from career_compass.errors import BackendUnavailable
from career_compass.models.facts import GitHubFacts, RepoFacts

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"


def _count(value: object) -> int:
    """Non-negative int from a JSON value; null and junk read as 0."""
    if isinstance(value, bool):
        return 0
    try:
        return max(int(value), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _text(value: object) -> str | None:
    return value if isinstance(value, str) else None


class GitHubClient:
    """Async GitHub client. Per-repository failures degrade to empty results."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 10.0,
        max_repos: int = 10,
        per_page: int = 100,
        user_agent: str = "career-compass",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        key = token or os.environ.get("GITHUB_TOKEN")
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": user_agent,
        }
        if key:
            headers["Authorization"] = f"Bearer {key}"
        self.client = httpx.AsyncClient(
            base_url=api_base,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self.max_repos = max_repos
        self.per_page = per_page
        self._request_count: int = 0

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get(self, path: str, params: dict | None = None) -> httpx.Response:
        self._request_count += 1
        response = await self.client.get(path, params=params)
        response.raise_for_status()
        return response

    async def get_user(self, username: str) -> dict:
        """Fetch the user record. Raises BackendUnavailable on any failure."""
        try:
            response = await self._get(f"/users/{username}")
            user = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("GitHub user fetch failed for %s: %s", username, exc)
            raise BackendUnavailable(f"GitHub API error for user {username!r}") from exc
        if not isinstance(user, dict):
            raise BackendUnavailable(f"Unexpected GitHub user payload for {username!r}")
        return user

    async def list_repos(self, username: str) -> list[dict]:
        """Owned repositories, most recently pushed first, sources before forks."""
        try:
            response = await self._get(
                f"/users/{username}/repos",
                params={"per_page": self.per_page, "sort": "pushed", "type": "owner"},
            )
            repos = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("GitHub repo listing failed for %s: %s", username, exc)
            return []
        if not isinstance(repos, list):
            return []
        repos = [r for r in repos if isinstance(r, dict) and _text(r.get("name"))]
        repos.sort(key=lambda r: bool(r.get("fork")))
        return repos[: self.max_repos]

    async def get_languages(self, owner: str, repo: str) -> dict[str, int]:
        try:
            response = await self._get(f"/repos/{owner}/{repo}/languages")
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Language fetch failed for %s/%s: %s", owner, repo, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: _count(v) for k, v in data.items() if isinstance(v, (int, float))}

    async def get_commit_activity(self, owner: str, repo: str) -> list[int]:
        """Weekly commit totals for the last year; empty while GitHub is still computing (202)."""
        try:
            response = await self._get(f"/repos/{owner}/{repo}/stats/commit_activity")
            if response.status_code == 202:
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Commit activity fetch failed for %s/%s: %s", owner, repo, exc)
            return []
        if not isinstance(data, list):
            return []
        return [_count(week.get("total")) for week in data if isinstance(week, dict)]

    async def _repo_facts(self, owner: str, repo: dict) -> RepoFacts:
        name = repo["name"]
        languages, weekly = await asyncio.gather(
            self.get_languages(owner, name),
            self.get_commit_activity(owner, name),
        )
        try:
            return RepoFacts(
                name=name,
                description=_text(repo.get("description")),
                language=_text(repo.get("language")),
                stars=_count(repo.get("stargazers_count")),
                forks=_count(repo.get("forks_count")),
                fork=bool(repo.get("fork")),
                pushed_at=_text(repo.get("pushed_at")),
                languages=languages,
                weekly_commits=weekly,
            )
        except ValidationError as exc:
            logger.warning("Unusable metadata for %s/%s: %s", owner, name, exc)
            return RepoFacts(name=name)

    async def fetch_profile_facts(self, username: str) -> GitHubFacts:
        """Fetch user metadata plus per-repo languages and commit activity concurrently."""
        logger.info("Fetching GitHub facts: %s", username)
        user = await self.get_user(username)
        repos = await self.list_repos(username)
        repo_facts = await asyncio.gather(*(self._repo_facts(username, r) for r in repos))
        return GitHubFacts(
            username=_text(user.get("login")) or username,
            name=_text(user.get("name")),
            bio=_text(user.get("bio")),
            company=_text(user.get("company")),
            location=_text(user.get("location")),
            blog=_text(user.get("blog")) or None,
            public_repos=_count(user.get("public_repos")),
            followers=_count(user.get("followers")),
            following=_count(user.get("following")),
            repos=list(repo_facts),
        )

    def get_request_count(self) -> int:
        """Return accumulated request count and reset the counter."""
        count = self._request_count
        self._request_count = 0
        return count
