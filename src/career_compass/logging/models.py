"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class AnalysisLog(BaseModel):
    """Single usage log entry for an analysis run."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    kind: str  # "career_path" | "github_profile" | "linkedin_profile" | "resume" | ...
    subject: str | None = None  # role, profile URL, file name or skill
    source: str = "llm"  # "llm" | "fallback" | "none" (request rejected before running)
    failure: str | None = None
    overall_score: int | None = None
    attempts: int = 0
    elapsed_seconds: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    github_requests: int = 0
    estimated_cost_usd: float = 0.0
    success: bool = True
    error_message: str | None = None
