"""Tests for GitHubClient using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from career_compass.clients.github_client import GitHubClient
from career_compass.errors import BackendUnavailable

USER = {
    "login": "octocat",
    "name": "The Octocat",
    "bio": "Hello",
    "company": "@github",
    "location": "SF",
    "blog": "",
    "public_repos": 3,
    "followers": 100,
    "following": 2,
}

REPOS = [
    {"name": "forked", "fork": True, "stargazers_count": 0, "language": "C"},
    {"name": "alpha", "fork": False, "stargazers_count": 10, "language": "Python", "description": "A"},
    {"name": "beta", "fork": False, "stargazers_count": 3, "language": "Go"},
]


def _handler(overrides: dict | None = None):
    overrides = overrides or {}
    seen: list[str] = []

    def handle(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        seen.append(path)
        if path in overrides:
            return overrides[path]
        if path == "/users/octocat":
            return httpx.Response(200, json=USER)
        if path == "/users/octocat/repos":
            return httpx.Response(200, json=REPOS)
        if path.endswith("/languages"):
            return httpx.Response(200, json={"Python": 1200, "Shell": 100})
        if path.endswith("/stats/commit_activity"):
            return httpx.Response(200, json=[{"total": 2, "week": 1}, {"total": 0, "week": 2}])
        return httpx.Response(404, json={"message": "Not Found"})

    handle.seen = seen
    return handle


def _client(handler, **kwargs) -> GitHubClient:
    return GitHubClient(token="t0k", transport=httpx.MockTransport(handler), **kwargs)


class TestGitHubClient:
    async def test_fetch_profile_facts(self):
        client = _client(_handler())
        facts = await client.fetch_profile_facts("octocat")
        await client.aclose()

        assert facts.username == "octocat"
        assert facts.followers == 100
        assert facts.blog is None
        assert [r.name for r in facts.repos] == ["alpha", "beta", "forked"]
        assert facts.repos[0].languages == {"Python": 1200, "Shell": 100}
        assert facts.repos[0].weekly_commits == [2, 0]
        assert facts.total_stars == 13

    async def test_sends_auth_and_api_headers(self):
        captured: list[httpx.Request] = []

        def handle(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=USER)

        client = _client(handle)
        await client.get_user("octocat")
        await client.aclose()
        assert captured[0].headers["Authorization"] == "Bearer t0k"
        assert captured[0].headers["Accept"] == "application/vnd.github+json"

    async def test_max_repos_cap(self):
        client = _client(_handler(), max_repos=1)
        facts = await client.fetch_profile_facts("octocat")
        await client.aclose()
        assert [r.name for r in facts.repos] == ["alpha"]

    async def test_user_failure_raises_backend_unavailable(self):
        client = _client(_handler({"/users/octocat": httpx.Response(404, json={"message": "Not Found"})}))
        with pytest.raises(BackendUnavailable):
            await client.fetch_profile_facts("octocat")
        await client.aclose()

    async def test_network_error_raises_backend_unavailable(self):
        def handle(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        client = _client(handle)
        with pytest.raises(BackendUnavailable):
            await client.get_user("octocat")
        await client.aclose()

    async def test_per_repo_failures_degrade_to_empty(self):
        client = _client(
            _handler(
                {
                    "/repos/octocat/alpha/languages": httpx.Response(500),
                    "/repos/octocat/beta/stats/commit_activity": httpx.Response(403),
                }
            )
        )
        facts = await client.fetch_profile_facts("octocat")
        await client.aclose()

        alpha, beta = facts.repos[0], facts.repos[1]
        assert alpha.languages == {}
        assert alpha.weekly_commits == [2, 0]
        assert beta.languages == {"Python": 1200, "Shell": 100}
        assert beta.weekly_commits == []

    async def test_commit_activity_still_computing(self):
        client = _client(_handler({"/repos/octocat/alpha/stats/commit_activity": httpx.Response(202)}))
        assert await client.get_commit_activity("octocat", "alpha") == []
        await client.aclose()

    async def test_repo_listing_failure_yields_no_repos(self):
        client = _client(_handler({"/users/octocat/repos": httpx.Response(502)}))
        facts = await client.fetch_profile_facts("octocat")
        await client.aclose()
        assert facts.repos == []
        assert facts.public_repos == 3

    async def test_request_count_resets(self):
        client = _client(_handler())
        await client.fetch_profile_facts("octocat")
        await client.aclose()
        # user + repos + 3 repos x (languages + activity)
        assert client.get_request_count() == 8
        assert client.get_request_count() == 0

    async def test_null_and_junk_fields_read_as_defaults(self):
        repos = [
            {"name": "alpha", "stargazers_count": None, "forks_count": "many", "description": 7, "language": None},
            {"name": None},
            "not a repo",
        ]
        client = _client(
            _handler(
                {
                    "/users/octocat": httpx.Response(200, json={**USER, "followers": None, "name": 42}),
                    "/users/octocat/repos": httpx.Response(200, json=repos),
                    "/repos/octocat/alpha/stats/commit_activity": httpx.Response(
                        200, json=[{"total": None}, {"total": "3"}, {"total": "n/a"}, {"week": 9}]
                    ),
                }
            )
        )
        facts = await client.fetch_profile_facts("octocat")
        await client.aclose()

        assert facts.followers == 0
        assert facts.name is None
        (alpha,) = facts.repos
        assert alpha.stars == 0
        assert alpha.forks == 0
        assert alpha.description is None
        assert alpha.weekly_commits == [0, 3, 0, 0]
        assert facts.total_stars == 0
        assert facts.active_weeks == 1

    async def test_non_object_user_payload_raises_backend_unavailable(self):
        client = _client(_handler({"/users/octocat": httpx.Response(200, json=["octocat"])}))
        with pytest.raises(BackendUnavailable):
            await client.get_user("octocat")
        await client.aclose()
