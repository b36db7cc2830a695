"""Analysis orchestrator: fetch -> prompt -> complete -> reconcile -> fallback -> enrich."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
)

from career_compass.clients.github_client import GitHubClient
from career_compass.clients.llm_client import CompletionClient
from career_compass.config import PipelineConfig
from career_compass.errors import BackendUnavailable, ReconciliationFailure
from career_compass.models.career import (
    CareerPath,
    LearningResource,
    ResourceRecommendations,
    SkillGapAnalysis,
)
from career_compass.models.facts import GitHubFacts
from career_compass.models.profile import ProfileAnalysis
from career_compass.models.request import (
    GitHubProfileRequest,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.models.resume import ResumeAnalysis
from career_compass.pipeline import enrichment
from career_compass.pipeline.fallback import fallback
from career_compass.pipeline.prompt_builder import build_prompt, resources_prompt
from career_compass.pipeline.reconciler import reconcile
from career_compass.pipeline.schemas import (
    CAREER_PATH_SCHEMA,
    PROFILE_SCHEMA,
    RESOURCES_SCHEMA,
    RESUME_SCHEMA,
    SKILL_GAP_SCHEMA,
    ResultSchema,
)
from career_compass.pipeline.scoring import resume_facts
from career_compass.pipeline.validation import validate_request
from career_compass.templates.resources import StaticResourceProvider
from career_compass.utils.url_validator import extract_github_username

logger = logging.getLogger(__name__)

MAX_BACKOFF_SECONDS = 10


@dataclass(frozen=True)
class AnalysisKind:
    """Per-kind descriptor: which schema the completion is reconciled against."""

    name: str
    schema: ResultSchema
    result_type: type[BaseModel]


KINDS: dict[str, AnalysisKind] = {
    "career_path": AnalysisKind("career_path", CAREER_PATH_SCHEMA, CareerPath),
    "github_profile": AnalysisKind("github_profile", PROFILE_SCHEMA, ProfileAnalysis),
    "linkedin_profile": AnalysisKind("linkedin_profile", PROFILE_SCHEMA, ProfileAnalysis),
    "resume": AnalysisKind("resume", RESUME_SCHEMA, ResumeAnalysis),
    "skill_gap": AnalysisKind("skill_gap", SKILL_GAP_SCHEMA, SkillGapAnalysis),
    "resources": AnalysisKind("resources", RESOURCES_SCHEMA, ResourceRecommendations),
}


@dataclass
class AnalysisOutcome:
    """Result of one analysis call plus how it was produced."""

    kind: str
    result: BaseModel
    source: Literal["llm", "fallback"]
    failure: str | None = None  # ReconciliationFailure value, "backend_unavailable" or "timeout"
    attempts: int = 0
    elapsed_seconds: float = 0.0


class _Deadline:
    def __init__(self, seconds: float):
        self.expires = time.monotonic() + seconds

    def remaining(self) -> float:
        left = self.expires - time.monotonic()
        if left <= 0:
            raise asyncio.TimeoutError("analysis deadline expired")
        return left


class AnalysisOrchestrator:
    """Runs every analysis kind through the same reconcile-or-fallback cycle.

    ``completion`` may be None (no API key): every call then uses the
    deterministic fallback. ``github`` may be None: GitHub analyses then
    work from the user name in the URL alone.
    """

    def __init__(
        self,
        completion: CompletionClient | None,
        github: GitHubClient | None = None,
        *,
        config: PipelineConfig | None = None,
        resources: StaticResourceProvider | None = None,
    ):
        self.completion = completion
        self.github = github
        self.config = config or PipelineConfig()
        self.resources = resources or StaticResourceProvider()

    async def run(self, request) -> AnalysisOutcome:
        """Analyze ``request``.

        Raises:
            InputValidationError: the request is missing required input. Nothing
                else escapes; backend and reconciliation failures fall back.
        """
        validate_request(request)
        kind = KINDS[request.kind]
        start = time.monotonic()
        deadline = _Deadline(self.config.deadline_seconds)

        facts = await self._gather_facts(request, deadline)
        result, failure, attempts = await self._complete(request, facts, kind, deadline)
        source = "llm"
        if result is None:
            logger.info("Falling back for %s (%s)", kind.name, failure)
            result = fallback(request, facts)
            source = "fallback"
        result = await self._enrich(request, result, facts, deadline)

        return AnalysisOutcome(
            kind=kind.name,
            result=result,
            source=source,
            failure=failure,
            attempts=attempts,
            elapsed_seconds=round(time.monotonic() - start, 3),
        )

    async def analyze(self, request) -> BaseModel:
        return (await self.run(request)).result

    async def analyze_skill_gap(self, current_skills: list[str], target_role: str) -> SkillGapAnalysis:
        return await self.analyze(SkillGapRequest(target_role=target_role, current_skills=tuple(current_skills)))

    async def recommend_resources(self, skill: str, level: str = "beginner") -> list[LearningResource]:
        result = await self.analyze(ResourceRequest(skill=skill, level=level))
        return result.resources

    # --- Fetching ---

    async def _gather_facts(self, request, deadline: _Deadline):
        if isinstance(request, GitHubProfileRequest):
            username = extract_github_username(request.profile_url)
            if self.github is None:
                return GitHubFacts(username=username)
            try:
                timeout = deadline.remaining()
                return await asyncio.wait_for(self.github.fetch_profile_facts(username), timeout)
            except (BackendUnavailable, asyncio.TimeoutError) as e:
                logger.warning("GitHub fetch failed for %s: %s", username, str(e) or "timeout")
                return GitHubFacts(username=username)
        if isinstance(request, LinkedInProfileRequest):
            return request.linkedin_data
        if isinstance(request, ResumeRequest):
            return resume_facts(
                request.extracted_text, request.sections, request.target_role, request.target_industry
            )
        return None

    # --- Completing + reconciling ---

    async def _complete(self, request, facts, kind: AnalysisKind, deadline: _Deadline):
        """Return (result, failure, attempts); result is None when the fallback must run."""
        if self.completion is None:
            return None, "backend_unavailable", 0

        prompt = build_prompt(request, facts)
        attempts = 0
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(BackendUnavailable),
            stop=stop_after_attempt(self.config.completion_attempts)
            | stop_after_delay(self.config.deadline_seconds),
            wait=wait_exponential(multiplier=self.config.retry_backoff, max=MAX_BACKOFF_SECONDS),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    attempts += 1
                    timeout = deadline.remaining()
                    raw = await asyncio.wait_for(self.completion.complete(prompt.system, prompt.user), timeout)
        except BackendUnavailable as e:
            logger.warning("Completion backend unavailable for %s after %d attempt(s): %s", kind.name, attempts, e)
            return None, "backend_unavailable", attempts
        except asyncio.TimeoutError:
            logger.warning("Analysis deadline expired during completion for %s", kind.name)
            return None, "timeout", attempts

        reconciled = reconcile(raw, kind.schema)
        if isinstance(reconciled, ReconciliationFailure):
            return None, reconciled.value, attempts
        if isinstance(request, ResourceRequest):
            reconciled = ResourceRecommendations(skill=request.skill.strip(), level=request.level, resources=reconciled)
        return reconciled, None, attempts

    # --- Enriching ---

    async def _resources_for_skill(self, skill: str, level: str, deadline: _Deadline) -> list[LearningResource]:
        """One completion for a skill's resources; empty list when unusable."""
        if self.completion is None or not self.config.enrich_resources_with_llm:
            return []
        prompt = resources_prompt(ResourceRequest(skill=skill, level=level))
        timeout = deadline.remaining()
        raw = await asyncio.wait_for(self.completion.complete(prompt.system, prompt.user), timeout)
        reconciled = reconcile(raw, RESOURCES_SCHEMA)
        return [] if isinstance(reconciled, ReconciliationFailure) else reconciled

    async def _enrich(self, request, result: BaseModel, facts, deadline: _Deadline) -> BaseModel:
        if isinstance(result, CareerPath):
            async def source(skill: str, level: str) -> list[LearningResource]:
                return await self._resources_for_skill(skill, level, deadline)

            return await enrichment.enrich_career_path(
                result,
                request,
                source,
                max_resources_per_week=self.config.max_resources_per_week,
                max_enriched_skills=self.config.max_enriched_skills,
                provider=self.resources,
            )
        if isinstance(result, ProfileAnalysis):
            return enrichment.enrich_profile(result, facts)
        if isinstance(result, ResumeAnalysis):
            return enrichment.enrich_resume(result, facts)
        if isinstance(result, ResourceRecommendations):
            return enrichment.enrich_resources(result, self.resources)
        return result
