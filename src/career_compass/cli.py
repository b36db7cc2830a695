"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from career_compass.clients.github_client import GitHubClient
from career_compass.clients.llm_client import CompletionClient
from career_compass.config import AppConfig, load_config
from career_compass.errors import InputValidationError
from career_compass.logging.cost_calculator import calculate_cost
from career_compass.logging.models import AnalysisLog
from career_compass.logging.usage_store import UsageStore
from career_compass.models.request import (
    CareerPathRequest,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.parsers.resume_parser import SUPPORTED_SUFFIXES, extract_sections, parse_resume
from career_compass.pipeline.orchestrator import AnalysisOrchestrator, AnalysisOutcome

app = typer.Typer(
    name="career-compass",
    help="AI career roadmaps and profile/resume reviews with a deterministic fallback",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _completion_client(config: AppConfig) -> CompletionClient | None:
    if not os.environ.get("ANTHROPIC_API_KEY"):
        console.print("[yellow]ANTHROPIC_API_KEY is not set; using the rule-based fallback.[/yellow]")
        return None
    return CompletionClient(
        timeout=config.llm.timeout,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )


def _run(request, subject: str, *, output: Path | None, verbose: bool, with_github: bool = False) -> None:
    """Run one analysis, print or save its JSON, and record usage."""
    _setup_logging(verbose)
    config = load_config()
    completion = _completion_client(config)
    github = (
        GitHubClient(
            api_base=config.github.api_base,
            timeout=config.github.timeout,
            max_repos=config.github.max_repos,
            per_page=config.github.per_page,
            user_agent=config.github.user_agent,
        )
        if with_github
        else None
    )
    orchestrator = AnalysisOrchestrator(completion, github, config=config.pipeline)

    async def _go() -> AnalysisOutcome:
        try:
            return await orchestrator.run(request)
        finally:
            if github is not None:
                await github.aclose()

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Analyzing ({request.kind})...", total=None)
            outcome = asyncio.run(_go())
    except InputValidationError as e:
        console.print(f"[red]{e.message}[/red]")
        if e.missing_fields:
            console.print(f"[red]Missing fields: {', '.join(e.missing_fields)}[/red]")
        UsageStore(config.usage.resolved_db_path).save_log(
            AnalysisLog(
                kind=request.kind,
                subject=subject,
                source="none",
                failure="invalid_input",
                success=False,
                error_message=e.message,
            )
        )
        raise typer.Exit(1)

    payload = json.dumps(outcome.result.to_wire(), indent=2, ensure_ascii=False)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        console.print(f"[green]Saved: {output}[/green]")
    else:
        console.print_json(payload)

    tokens = completion.get_token_summary() if completion is not None else {"input": 0, "output": 0, "calls": []}
    github_requests = github.get_request_count() if github is not None else 0
    cost = calculate_cost(tokens["calls"])
    score = getattr(outcome.result, "overall_score", None)

    source_color = "green" if outcome.source == "llm" else "yellow"
    console.print(
        Panel(
            f"[bold {source_color}]Source: {outcome.source}[/bold {source_color}]"
            + (f" ({outcome.failure})" if outcome.failure else "")
            + (f" | Score: {score}" if score is not None else "")
            + f"\nAttempts: {outcome.attempts} | Elapsed: {outcome.elapsed_seconds:.1f}s"
            + f" | Tokens: {tokens['input']}/{tokens['output']} | Cost: ${cost:.4f}",
            title=outcome.kind,
        )
    )

    store = UsageStore(config.usage.resolved_db_path)
    store.save_log(
        AnalysisLog(
            kind=outcome.kind,
            subject=subject,
            source=outcome.source,
            failure=outcome.failure,
            overall_score=score,
            attempts=outcome.attempts,
            elapsed_seconds=outcome.elapsed_seconds,
            total_input_tokens=tokens["input"],
            total_output_tokens=tokens["output"],
            github_requests=github_requests,
            estimated_cost_usd=cost,
        )
    )


_OUTPUT = typer.Option(None, "--output", "-o", help="Write the JSON result to this file")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command("career-path")
def career_path(
    role: str = typer.Argument(help="Target role, e.g. 'Frontend Developer'"),
    skill: list[str] = typer.Option([], "--skill", "-s", help="Current skill (repeatable)"),
    interest: list[str] = typer.Option([], "--interest", "-i", help="Interest (repeatable)"),
    timeframe: str = typer.Option("8 weeks", "--timeframe", "-t", help="e.g. '8 weeks', '3 months'"),
    pace: str = typer.Option("normal", "--pace", help="slow | normal | fast"),
    level: str = typer.Option("entry", "--level", "-l", help="Experience level"),
    industry: str = typer.Option(None, "--industry", help="Target industry"),
    context: str = typer.Option(None, "--context", help="Additional context"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Generate a week-by-week learning roadmap for a target role."""
    try:
        request = CareerPathRequest(
            target_role=role,
            current_skills=tuple(skill),
            interests=tuple(interest),
            timeframe=timeframe,
            pace=pace,
            experience_level=level,
            industry=industry,
            additional_context=context,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid options: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(1)
    _run(request, role, output=output, verbose=verbose)


@app.command()
def github(
    url: str = typer.Argument(help="GitHub profile URL"),
    context: str = typer.Option(None, "--context", help="Additional context"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Review a GitHub profile from its public metadata."""
    request = GitHubProfileRequest(profile_url=url, additional_context=context)
    _run(request, url, output=output, verbose=verbose, with_github=True)


@app.command()
def linkedin(
    url: str = typer.Argument(help="LinkedIn profile URL"),
    facts: Path = typer.Option(None, "--facts", "-f", help="JSON file with the profile data"),
    context: str = typer.Option(None, "--context", help="Additional context"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Review a LinkedIn profile from caller-supplied profile data."""
    data = None
    if facts is not None:
        if not facts.exists():
            console.print(f"[red]Facts file not found: {facts}[/red]")
            raise typer.Exit(1)
        try:
            data = LinkedInData.model_validate_json(facts.read_text(encoding="utf-8"))
        except ValidationError as e:
            console.print(f"[red]Invalid LinkedIn data: {e.error_count()} error(s)[/red]")
            raise typer.Exit(1)
    request = LinkedInProfileRequest(profile_url=url, linkedin_data=data, additional_context=context)
    _run(request, url, output=output, verbose=verbose)


@app.command()
def resume(
    file: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    role: str = typer.Option(None, "--role", "-r", help="Target role"),
    industry: str = typer.Option(None, "--industry", help="Target industry"),
    level: str = typer.Option("mid", "--level", "-l", help="Experience level"),
    context: str = typer.Option(None, "--context", help="Additional context"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Review a resume file."""
    if not file.exists():
        console.print(f"[red]Resume file not found: {file}[/red]")
        raise typer.Exit(1)
    if file.suffix.lower() not in SUPPORTED_SUFFIXES:
        console.print(f"[red]Unsupported file format: {file.suffix} (use {', '.join(SUPPORTED_SUFFIXES)})[/red]")
        raise typer.Exit(1)
    text = parse_resume(file)
    request = ResumeRequest(
        extracted_text=text,
        sections=extract_sections(text),
        target_role=role,
        target_industry=industry,
        experience_level=level,
        additional_context=context,
        file_name=file.name,
        file_type=file.suffix.lower().lstrip("."),
    )
    _run(request, file.name, output=output, verbose=verbose)


@app.command("skill-gap")
def skill_gap(
    role: str = typer.Argument(help="Target role"),
    skill: list[str] = typer.Option([], "--skill", "-s", help="Current skill (repeatable)"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Compare current skills with a target role."""
    _run(SkillGapRequest(target_role=role, current_skills=tuple(skill)), role, output=output, verbose=verbose)


@app.command()
def resources(
    skill: str = typer.Argument(help="Skill to learn"),
    level: str = typer.Option("beginner", "--level", "-l", help="beginner | intermediate | advanced"),
    output: Path = _OUTPUT,
    verbose: bool = _VERBOSE,
) -> None:
    """Recommend learning resources for a skill."""
    _run(ResourceRequest(skill=skill, level=level), skill, output=output, verbose=verbose)


@app.command()
def usage(
    recent: int = typer.Option(10, "--recent", "-n", help="Number of recent runs to list"),
) -> None:
    """Show this month's usage statistics and recent runs."""
    config = load_config()
    store = UsageStore(config.usage.resolved_db_path)
    stats = store.get_monthly_stats()
    avg = stats["avg_overall_score"]
    console.print(
        Panel(
            f"Runs: {stats['total_runs']} | Success rate: {stats['success_rate']:.0f}%"
            f" | Fallback rate: {stats['fallback_rate']:.0f}%"
            f" | Avg score: {avg if avg is not None else '-'}"
            f"\nTokens: {stats['total_input_tokens']}/{stats['total_output_tokens']}"
            f" | GitHub requests: {stats['total_github_requests']}"
            f" | Cost: ${stats['total_cost_usd']:.4f} (all time ${store.get_total_cost():.4f})",
            title=f"Usage {stats['month']}",
        )
    )

    logs = store.get_logs(limit=recent)
    if not logs:
        return
    table = Table(title="Recent runs")
    for column in ("When", "Kind", "Subject", "Source", "Score", "Seconds"):
        table.add_column(column)
    for log in logs:
        table.add_row(
            log.timestamp.strftime("%Y-%m-%d %H:%M"),
            log.kind,
            log.subject or "",
            (log.source + (f" ({log.failure})" if log.failure else "")) if log.success else f"error: {log.error_message}",
            "" if log.overall_score is None else str(log.overall_score),
            f"{log.elapsed_seconds:.1f}",
        )
    console.print(table)


if __name__ == "__main__":
    app()
