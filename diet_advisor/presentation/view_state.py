"""
Diet plan page state.

State machine behind the form:

    idle -> submitting -> success | error -> submitting -> ...

Invalid input never leaves the page: it only sets the inline error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from diet_advisor.application.plan.orchestration_service import DietPlanOrchestrator
from diet_advisor.domain.plan.models import DietPlan
from diet_advisor.domain.shared.errors import (
    GenerationError,
    InvalidHbA1cError,
    SubmissionInProgressError,
)
from diet_advisor.domain.shared.value_objects import HbA1c
from diet_advisor.presentation import labels

logger = structlog.get_logger(__name__)


class ViewStatus(str, Enum):
    """Page status."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class DietPlanView:
    """What the template renders."""

    status: ViewStatus = ViewStatus.IDLE
    hba1c_input: str = ""
    plan: Optional[DietPlan] = None
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.SUBMITTING


class DietPlanPage:
    """
    Controller for the HbA1c form.

    Example:
        >>> page = DietPlanPage(orchestrator)
        >>> view = await page.submit("5.7")
        >>> view.status
        <ViewStatus.SUCCESS: 'success'>
    """

    def __init__(self, orchestrator: DietPlanOrchestrator):
        self.orchestrator = orchestrator
        self.view = DietPlanView()

    async def submit(self, raw_value: Any) -> DietPlanView:
        """
        Handle one form submission.

        Args:
            raw_value: Value typed by the user

        Returns:
            The updated view

        Raises:
            SubmissionInProgressError: If a submission is still running
        """
        if self.view.is_loading:
            raise SubmissionInProgressError("A diet plan request is already in progress")

        self.view.hba1c_input = "" if raw_value is None else str(raw_value).strip()

        try:
            hba1c = HbA1c.from_input(raw_value)
        except InvalidHbA1cError as e:
            logger.info("Rejected HbA1c input", value=self.view.hba1c_input, reason=str(e))
            self.view.error = labels.INVALID_INPUT_MESSAGE
            self.view.status = ViewStatus.ERROR
            return self.view

        self.view.status = ViewStatus.SUBMITTING
        self.view.error = None
        self.view.plan = None

        try:
            plan = await self.orchestrator.create_plan(hba1c)
        except GenerationError:
            logger.exception("Diet plan generation failed", hba1c=hba1c.value)
            self._fail(labels.GENERATION_ERROR_MESSAGE)
        else:
            self.view.plan = plan
            self.view.status = ViewStatus.SUCCESS
        finally:
            # unexpected exception still propagating
            if self.view.is_loading:
                self._fail(labels.GENERATION_ERROR_MESSAGE)

        return self.view

    def _fail(self, message: str) -> None:
        self.view.plan = None
        self.view.error = message
        self.view.status = ViewStatus.ERROR
