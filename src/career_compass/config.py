"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _require_range(name: str, value: float, low: float, high: float | None = None) -> None:
    if value < low or (high is not None and value > high):
        bound = f"between {low} and {high}" if high is not None else f">= {low}"
        raise ValueError(f"{name} must be {bound}, got {value!r}")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    temperature: float = 0.7
    max_tokens: int = 8192
    timeout: int = 60

    def __post_init__(self) -> None:
        _require_range("temperature", self.temperature, 0.0, 1.0)
        _require_range("max_tokens", self.max_tokens, 256)
        _require_range("timeout", self.timeout, 1, 600)


@dataclass(frozen=True)
class GitHubConfig:
    api_base: str = "https://api.github.com"
    timeout: int = 10
    max_repos: int = 10
    per_page: int = 100
    user_agent: str = "career-compass"

    def __post_init__(self) -> None:
        _require_range("timeout", self.timeout, 1, 120)
        _require_range("max_repos", self.max_repos, 1, 100)
        _require_range("per_page", self.per_page, 1, 100)


@dataclass(frozen=True)
class PipelineConfig:
    deadline_seconds: float = 90.0
    completion_attempts: int = 2
    retry_backoff: float = 1.0
    max_resources_per_week: int = 5
    max_enriched_skills: int = 6
    enrich_resources_with_llm: bool = True

    def __post_init__(self) -> None:
        _require_range("deadline_seconds", self.deadline_seconds, 1)
        _require_range("completion_attempts", self.completion_attempts, 1, 5)
        _require_range("retry_backoff", self.retry_backoff, 0.0)
        _require_range("max_resources_per_week", self.max_resources_per_week, 1, 20)
        _require_range("max_enriched_skills", self.max_enriched_skills, 0, 20)


@dataclass(frozen=True)
class UsageConfig:
    db_path: str = "~/.career-compass/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        github=GitHubConfig(**raw.get("github", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
        usage=UsageConfig(**raw.get("usage", {})),
    )
