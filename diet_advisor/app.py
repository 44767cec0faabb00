"""HbA1c Diet Advisor - FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

import structlog
from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from diet_advisor.application.plan.orchestration_service import DietPlanOrchestrator
from diet_advisor.config import get_settings
from diet_advisor.domain.shared.errors import GenerationError, InvalidHbA1cError
from diet_advisor.domain.shared.value_objects import HbA1c
from diet_advisor.infrastructure.ai.factory import create_openai_client, create_orchestrator
from diet_advisor.logging_config import configure_logging
from diet_advisor.presentation import labels
from diet_advisor.presentation.view_state import DietPlanPage, DietPlanView

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# Set by lifespan once the OpenAI client is initialized
_orchestrator: Optional[DietPlanOrchestrator] = None


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Open the OpenAI client for the app lifetime and wire the orchestrator."""
    global _orchestrator

    logger.info(
        "startup.config",
        openai_key_present=bool(settings.openai_api_key),
        openai_key_masked=settings.masked_api_key,
        version=settings.app_version,
    )

    client = create_openai_client(settings)
    async with client as initialized:
        _orchestrator = create_orchestrator(initialized, settings)
        logger.info("lifespan.clients_ready", **initialized.get_stats())
        try:
            yield
        finally:
            _orchestrator = None
            logger.info("lifespan.shutdown")


app = FastAPI(
    title="HbA1c Diet Advisor",
    version=settings.app_version,
    lifespan=lifespan,
)


def get_orchestrator() -> DietPlanOrchestrator:
    if _orchestrator is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _orchestrator


def _render(request: Request, view: DietPlanView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": view, "labels": labels},
    )


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    return _render(request, DietPlanView())


@app.post("/", response_class=HTMLResponse)
async def submit(
    request: Request,
    hba1c: str = Form(""),
    orchestrator: DietPlanOrchestrator = Depends(get_orchestrator),
) -> HTMLResponse:
    page = DietPlanPage(orchestrator)
    view = await page.submit(hba1c)
    return _render(request, view)


class DietPlanRequest(BaseModel):
    """JSON API request body."""

    hba1c: Any = None


@app.post("/api/diet-plan")
async def create_diet_plan(
    payload: DietPlanRequest,
    orchestrator: DietPlanOrchestrator = Depends(get_orchestrator),
) -> dict[str, Any]:
    """Generate a complete diet plan (camelCase JSON)."""
    try:
        hba1c = HbA1c.from_input(payload.hba1c)
    except InvalidHbA1cError:
        raise HTTPException(status_code=422, detail=labels.INVALID_INPUT_MESSAGE)

    try:
        plan = await orchestrator.create_plan(hba1c)
    except GenerationError:
        logger.exception("Diet plan generation failed", hba1c=hba1c.value)
        raise HTTPException(status_code=502, detail=labels.GENERATION_ERROR_MESSAGE)

    return plan.to_wire()


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": settings.app_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("diet_advisor.app:app", host="127.0.0.1", port=8080, reload=True)
