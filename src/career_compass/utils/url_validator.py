"""Profile URL validation for GitHub and LinkedIn analyses."""

from __future__ import annotations

import re
from urllib.parse import urlparse

# GitHub paths that are site pages, not user names
_RESERVED_GITHUB_PATHS = {
    "about", "enterprise", "explore", "features", "login", "marketplace",
    "orgs", "pricing", "settings", "signup", "sponsors", "topics",
}
_GITHUB_USERNAME = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$")


class ProfileURLError(ValueError):
    """Raised when a profile URL does not match its declared profile type."""


def _parse(url: str):
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https"):
        raise ProfileURLError(f"Please provide a valid URL (got scheme {parsed.scheme!r})")
    if not parsed.hostname:
        raise ProfileURLError("Please provide a valid URL")
    return parsed


def _host_matches(hostname: str, domain: str) -> bool:
    hostname = hostname.lower()
    return hostname == domain or hostname.endswith("." + domain)


def extract_github_username(url: str) -> str:
    """Return the user name from a github.com profile or repository URL."""
    parsed = _parse(url)
    if not _host_matches(parsed.hostname, "github.com"):
        raise ProfileURLError("Please provide a valid github profile URL")
    segments = [s for s in parsed.path.split("/") if s]
    if not segments:
        raise ProfileURLError("GitHub URL must include a user name, e.g. https://github.com/octocat")
    username = segments[0]
    if username.lower() in _RESERVED_GITHUB_PATHS or not _GITHUB_USERNAME.match(username):
        raise ProfileURLError(f"{username!r} is not a valid GitHub user name")
    return username


def validate_linkedin_url(url: str) -> str:
    parsed = _parse(url)
    if not _host_matches(parsed.hostname, "linkedin.com"):
        raise ProfileURLError("Please provide a valid linkedin profile URL")
    if "/in/" not in parsed.path and "/pub/" not in parsed.path:
        raise ProfileURLError("LinkedIn URL must point to a profile (/in/<name>)")
    return url.strip()


def validate_profile_url(url: str, profile_type: str) -> str:
    """Validate that ``url`` is a profile URL of ``profile_type`` ("github" or "linkedin").

    Returns the cleaned URL. Raises ProfileURLError otherwise.
    """
    if profile_type == "github":
        extract_github_username(url)
        return url.strip().rstrip("/")
    if profile_type == "linkedin":
        return validate_linkedin_url(url)
    raise ProfileURLError('Profile type must be either "linkedin" or "github"')
