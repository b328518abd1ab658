from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional


@dataclass
class JobStatus:
    """Status of a background classification run."""

    correlation_id: str
    status: str  # "running", "completed", "cancelled", "failed"
    started_at: datetime
    completed_at: Optional[datetime] = None
    result: Optional[dict] = None
    error: Optional[str] = None


class JobManager:
    """Tracks background runs and their cancellation flags."""

    def __init__(self) -> None:
        self._jobs: Dict[str, JobStatus] = {}
        self._cancellation_flags: Dict[str, threading.Event] = {}
        self._lock = threading.Lock()

    def register_job(self, correlation_id: str) -> bool:
        """
        Register a new job.

        Returns:
            False if a job with this id is still running, True otherwise
        """
        with self._lock:
            existing = self._jobs.get(correlation_id)
            if existing is not None and existing.status == "running":
                return False
            self._jobs[correlation_id] = JobStatus(
                correlation_id=correlation_id,
                status="running",
                started_at=datetime.now(timezone.utc),
            )
            self._cancellation_flags[correlation_id] = threading.Event()
            return True

    def is_cancelled(self, correlation_id: str) -> bool:
        with self._lock:
            flag = self._cancellation_flags.get(correlation_id)
            return flag.is_set() if flag else False

    def cancel_job(self, correlation_id: str) -> bool:
        """
        Request cancellation of a running job.

        Returns:
            True if the job was running and is now cancelled, False otherwise
        """
        with self._lock:
            job = self._jobs.get(correlation_id)
            if job is None or job.status != "running":
                return False
            self._cancellation_flags[correlation_id].set()
            job.status = "cancelled"
            job.completed_at = datetime.now(timezone.utc)
            return True

    def complete_job(self, correlation_id: str, result: dict) -> None:
        with self._lock:
            job = self._jobs.get(correlation_id)
            if job is not None and job.status == "running":
                job.status = "completed"
                job.completed_at = datetime.now(timezone.utc)
                job.result = result

    def fail_job(self, correlation_id: str, error: str) -> None:
        with self._lock:
            job = self._jobs.get(correlation_id)
            if job is not None and job.status == "running":
                job.status = "failed"
                job.completed_at = datetime.now(timezone.utc)
                job.error = error

    def get_job_status(self, correlation_id: str) -> Optional[JobStatus]:
        with self._lock:
            return self._jobs.get(correlation_id)

    def cleanup_old_jobs(self, max_age_hours: int = 24) -> int:
        """Drop finished jobs older than max_age_hours. Returns how many were removed."""
        cutoff = datetime.now(timezone.utc) - timedelta(hours=max_age_hours)
        with self._lock:
            to_remove = [
                cid
                for cid, job in self._jobs.items()
                if job.status != "running" and job.completed_at and job.completed_at < cutoff
            ]
            for cid in to_remove:
                del self._jobs[cid]
                self._cancellation_flags.pop(cid, None)
        return len(to_remove)


job_manager = JobManager()
