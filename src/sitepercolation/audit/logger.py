"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from sitepercolation.audit.helpers import (
    generate_run_id,
    get_package_version,
    get_platform_info,
    get_python_version,
)
from sitepercolation.audit.models import LogEvent
from sitepercolation.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name for context.
    """

    def __init__(self, log_path: Path, run_id: str | None = None) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        log_path : Path
            Path to JSONL log file. Parent directories are created.
        run_id : str | None, optional
            Unique run identifier, generated if not provided.
        """
        self.run_id = run_id or generate_run_id()
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context."""
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "run_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, uses current_stage if not provided.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            stage=stage if stage is not None else self.current_stage,
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, stage: str, parameters: dict[str, Any]) -> None:
        """Log run_started event and enter the driver stage.

        Parameters
        ----------
        stage : str
            Driver stage ("replay" or "trial").
        parameters : dict[str, Any]
            Run parameters.
        """
        self.set_stage(stage)
        self.event(
            "run_started",
            data={
                "parameters": parameters,
                "environment": {
                    "python_version": get_python_version(),
                    "platform": get_platform_info(),
                    "package_version": get_package_version(),
                },
            },
        )

    def site_opened(self, row: int, col: int, open_sites: int) -> None:
        """Log a single site opening at DEBUG level."""
        self.event(
            "site_opened",
            data={"row": row, "col": col, "open_sites": open_sites},
            level="DEBUG",
        )

    def percolated(self, open_sites: int, open_fraction: float) -> None:
        """Log the moment the grid first percolates.

        Parameters
        ----------
        open_sites : int
            Number of open sites at that moment.
        open_fraction : float
            Fraction of sites open at that moment.
        """
        self.event(
            "percolated",
            data={"open_sites": open_sites, "open_fraction": open_fraction},
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        counters: dict[str, Any] | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Wall-clock time in seconds.
        counters : dict[str, Any] | None, optional
            Driver-specific results.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if counters:
            data["counters"] = counters

        self.event("run_finished", data=data)

    def error(self, exception_class: str, message: str) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
        )
