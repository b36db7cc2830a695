"""SQLite-backed analysis log storage."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path

from career_compass.logging.models import AnalysisLog

DEFAULT_DB_PATH = Path.home() / ".career-compass" / "usage.db"

_COLUMNS = (
    "id", "timestamp", "kind", "subject", "source", "failure", "overall_score",
    "attempts", "elapsed_seconds", "total_input_tokens", "total_output_tokens",
    "github_requests", "estimated_cost_usd", "success", "error_message",
)


class UsageStore:
    """SQLite-backed store for analysis logs with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS analysis_logs (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    kind TEXT NOT NULL,
                    subject TEXT,
                    source TEXT NOT NULL DEFAULT 'llm',
                    failure TEXT,
                    overall_score INTEGER,
                    attempts INTEGER NOT NULL DEFAULT 0,
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    total_input_tokens INTEGER NOT NULL DEFAULT 0,
                    total_output_tokens INTEGER NOT NULL DEFAULT 0,
                    github_requests INTEGER NOT NULL DEFAULT 0,
                    estimated_cost_usd REAL NOT NULL DEFAULT 0.0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_message TEXT
                )
            """)

    def save_log(self, log: AnalysisLog) -> None:
        """Persist an analysis log entry."""
        with self._connect() as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO analysis_logs ({', '.join(_COLUMNS)}) "
                f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                (
                    log.id,
                    log.timestamp.isoformat(),
                    log.kind,
                    log.subject,
                    log.source,
                    log.failure,
                    log.overall_score,
                    log.attempts,
                    log.elapsed_seconds,
                    log.total_input_tokens,
                    log.total_output_tokens,
                    log.github_requests,
                    log.estimated_cost_usd,
                    1 if log.success else 0,
                    log.error_message,
                ),
            )

    def get_logs(self, kind: str | None = None, limit: int = 50) -> list[AnalysisLog]:
        """Retrieve analysis logs, newest first, optionally filtered by kind."""
        select = f"SELECT {', '.join(_COLUMNS)} FROM analysis_logs"
        with self._connect() as conn:
            if kind is not None:
                rows = conn.execute(
                    f"{select} WHERE kind = ? ORDER BY timestamp DESC LIMIT ?",
                    (kind, limit),
                ).fetchall()
            else:
                rows = conn.execute(
                    f"{select} ORDER BY timestamp DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        return [self._row_to_log(row) for row in rows]

    def get_monthly_stats(self) -> dict:
        """Get aggregated stats for the current month."""
        now = datetime.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) as total_runs,
                       SUM(total_input_tokens) as total_input,
                       SUM(total_output_tokens) as total_output,
                       SUM(github_requests) as total_github,
                       SUM(estimated_cost_usd) as total_cost,
                       AVG(overall_score) as avg_score,
                       SUM(CASE WHEN source = 'fallback' THEN 1 ELSE 0 END) as fallback_count,
                       SUM(CASE WHEN success = 1 THEN 1 ELSE 0 END) as success_count
                   FROM analysis_logs
                   WHERE timestamp >= ?""",
                (month_start.isoformat(),),
            ).fetchone()
        return {
            "total_runs": row[0] or 0,
            "total_input_tokens": row[1] or 0,
            "total_output_tokens": row[2] or 0,
            "total_github_requests": row[3] or 0,
            "total_cost_usd": row[4] or 0.0,
            "avg_overall_score": round(row[5], 1) if row[5] is not None else None,
            "fallback_rate": (row[6] / row[0] * 100) if row[0] else 0.0,
            "success_rate": (row[7] / row[0] * 100) if row[0] else 0.0,
            "month": now.strftime("%Y-%m"),
        }

    def get_total_cost(self) -> float:
        """Get total estimated cost across all logs."""
        with self._connect() as conn:
            row = conn.execute("SELECT SUM(estimated_cost_usd) FROM analysis_logs").fetchone()
        return row[0] or 0.0

    @staticmethod
    def _row_to_log(row: tuple) -> AnalysisLog:
        values = dict(zip(_COLUMNS, row))
        values["timestamp"] = datetime.fromisoformat(values["timestamp"])
        values["success"] = bool(values["success"])
        return AnalysisLog(**values)
