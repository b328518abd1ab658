from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import BackgroundTasks, FastAPI, HTTPException
from pydantic import BaseModel

from fulfillment_runtime.application.errors import PackCatalogError, RunCancelledError
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.application.runner import Runner
from fulfillment_runtime.app.api.routers import (
    classification_router,
    fulfillments_router,
    orders_router,
    packs_router,
)
from fulfillment_runtime.app.factory import create_adapters, create_classification_config
from fulfillment_runtime.app.health import router as health_router
from fulfillment_runtime.app.job_manager import job_manager
from fulfillment_runtime.observability.logging import configure_logging
from fulfillment_runtime.settings import get_settings

configure_logging()

app = FastAPI(title="Fulfillment Runtime")
app.include_router(health_router)
app.include_router(fulfillments_router, prefix="/v1", tags=["fulfillments"])
app.include_router(orders_router, prefix="/v1", tags=["orders"])
app.include_router(classification_router, prefix="/v1", tags=["classification"])
app.include_router(packs_router, prefix="/v1", tags=["packs"])


class RunRequest(BaseModel):
    as_of_ts: datetime | None = None
    correlation_id: str | None = None


def _build_runner(correlation_id: str | None = None) -> Runner:
    settings = get_settings()
    fulfillments_repo, catalog_provider, outputs_repo = create_adapters(settings)
    cancellation_check = (lambda: job_manager.is_cancelled(correlation_id)) if correlation_id else None
    return Runner(
        fulfillments_repo=fulfillments_repo,
        catalog_provider=catalog_provider,
        outputs_repo=outputs_repo,
        classification_config=create_classification_config(settings),
        cancellation_check=cancellation_check,
    )


def _run_job_in_background(req: RunRequest, correlation_id: str) -> None:
    try:
        runner = _build_runner(correlation_id)
        ctx = RunContext.from_args(
            as_of_ts=req.as_of_ts or datetime.now(timezone.utc),
            correlation_id=correlation_id,
        )
        result = runner.run(ctx)
        job_manager.complete_job(correlation_id, result)
    except RunCancelledError:
        # Status already set by cancel_job
        pass
    except Exception as e:
        job_manager.fail_job(correlation_id, str(e))


@app.post("/run")
async def run_classification(req: RunRequest, background_tasks: BackgroundTasks) -> dict:
    """
    Start a classification pass. Returns immediately with correlation_id.
    Use /status/{correlation_id} to check progress.
    """
    correlation_id = req.correlation_id or f"auto-{uuid.uuid4().hex[:8]}"
    job_manager.cleanup_old_jobs()
    if not job_manager.register_job(correlation_id):
        raise HTTPException(status_code=409, detail=f"Job {correlation_id} is already running")
    background_tasks.add_task(_run_job_in_background, req, correlation_id)
    return {
        "correlation_id": correlation_id,
        "status": "started",
        "message": "Job started. Use /status/{correlation_id} to check progress.",
    }


@app.post("/run/sync")
def run_classification_sync(req: RunRequest) -> dict:
    """Run a classification pass and block until it completes."""
    runner = _build_runner()
    ctx = RunContext.from_args(
        as_of_ts=req.as_of_ts or datetime.now(timezone.utc),
        correlation_id=req.correlation_id,
    )
    try:
        return runner.run(ctx)
    except (PackCatalogError, FileNotFoundError) as e:
        raise HTTPException(status_code=500, detail=f"Error loading inputs: {str(e)}")


@app.post("/cancel/{correlation_id}")
def cancel_job(correlation_id: str) -> dict:
    cancelled = job_manager.cancel_job(correlation_id)
    if not cancelled:
        raise HTTPException(
            status_code=404,
            detail=f"Job {correlation_id} not found or cannot be cancelled (may already be completed/failed)",
        )
    return {
        "correlation_id": correlation_id,
        "status": "cancelled",
        "message": "Job cancellation requested",
    }


@app.get("/status/{correlation_id}")
def get_job_status(correlation_id: str) -> dict:
    """
    Get the status of a background run.

    Returns:
        Job status including the run summary if completed
    """
    job = job_manager.get_job_status(correlation_id)
    if not job:
        raise HTTPException(status_code=404, detail=f"Job {correlation_id} not found")

    response = {
        "correlation_id": job.correlation_id,
        "status": job.status,
        "started_at": job.started_at.isoformat(),
    }
    if job.completed_at:
        response["completed_at"] = job.completed_at.isoformat()
        response["duration_ms"] = int((job.completed_at - job.started_at).total_seconds() * 1000)
    if job.result:
        response["result"] = job.result
    if job.error:
        response["error"] = job.error
    return response
