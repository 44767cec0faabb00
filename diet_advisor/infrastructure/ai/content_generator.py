"""
Diet plan content generator.

OpenAI adapter for IContentGenerator: one structured completion per
HbA1c reading, parsed and shape-checked into a DietPlan.
"""

from __future__ import annotations

import time

import structlog

from diet_advisor.domain.plan.mapper import DietPlanMapper
from diet_advisor.domain.plan.models import DietPlan
from diet_advisor.domain.plan.prompts import (
    DIET_PLAN_RESPONSE_FORMAT,
    build_plan_messages,
)
from diet_advisor.domain.shared.errors import GenerationError
from diet_advisor.domain.shared.value_objects import HbA1c
from diet_advisor.infrastructure.ai.openai_client import OpenAIClient

logger = structlog.get_logger(__name__)


class OpenAIContentGenerator:
    """
    Generates diet plans with OpenAI structured output.

    Example:
        >>> async with OpenAIClient() as client:
        ...     generator = OpenAIContentGenerator(client)
        ...     plan = await generator.generate_plan(HbA1c(value=5.7))
        >>> print(plan.analysis.level)
    """

    def __init__(self, openai_client: OpenAIClient, temperature: float = 0.7):
        """
        Initialize generator.

        Args:
            openai_client: Initialized OpenAI client
            temperature: Sampling temperature for the plan
        """
        self.openai_client = openai_client
        self.temperature = temperature

    async def generate_plan(self, hba1c: HbA1c) -> DietPlan:
        """
        Generate a diet plan for the reading.

        Args:
            hba1c: Validated HbA1c reading

        Returns:
            DietPlan with every image_url unset

        Raises:
            GenerationError: On API failure, invalid JSON or bad shape
        """
        start_time = time.time()

        try:
            response = await self.openai_client.complete(
                messages=build_plan_messages(hba1c),
                response_format=DIET_PLAN_RESPONSE_FORMAT,
                temperature=self.temperature,
            )
        except Exception as e:
            raise GenerationError(f"Diet plan request failed: {e}") from e

        if response.get("finish_reason") == "length":
            raise GenerationError("Diet plan response truncated (max tokens reached)")

        plan = DietPlanMapper.parse_response(response["content"])

        logger.info(
            "Diet plan generated",
            hba1c=hba1c.value,
            options=plan.meal_plan.option_count(),
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        return plan
