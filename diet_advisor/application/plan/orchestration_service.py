"""
Diet Plan Orchestration Service.

Coordinates plan generation: one structured content call, then one
image call per meal option, all started concurrently.

Design Pattern: Service Layer + Dependency Injection
"""

import asyncio
import time

import structlog

from diet_advisor.domain.plan.models import PLACEHOLDER_IMAGE_URL, DietPlan, MealOption
from diet_advisor.domain.plan.ports import IContentGenerator, IImageGenerator
from diet_advisor.domain.shared.errors import GenerationError
from diet_advisor.domain.shared.value_objects import HbA1c

logger = structlog.get_logger(__name__)


class DietPlanOrchestrator:
    """
    Orchestrates diet plan creation for one HbA1c reading.

    Responsibilities:
    - Request the structured plan (single attempt)
    - Fan out one image request per meal option, no concurrency limit
    - Attach each image reference to its own MealOption in place
    - Return only once every image request has settled
    - Put the placeholder on any option whose image request raised

    Dependencies (injected via Ports/Interfaces):
    - content_generator: IContentGenerator - structured plan
    - image_generator: IImageGenerator - dish photos, never raises

    Example:
        >>> orchestrator = DietPlanOrchestrator(
        ...     content_generator=content_gen,
        ...     image_generator=image_gen,
        ... )
        >>> plan = await orchestrator.create_plan(HbA1c(value=5.7))
        >>> assert plan.is_complete()
    """

    def __init__(
        self,
        content_generator: IContentGenerator,
        image_generator: IImageGenerator,
        placeholder_url: str = PLACEHOLDER_IMAGE_URL,
    ):
        """
        Initialize orchestrator with dependencies.

        Args:
            content_generator: Diet plan generator
            image_generator: Dish photo generator
            placeholder_url: Image reference for options whose request raised
        """
        self.content_generator = content_generator
        self.image_generator = image_generator
        self.placeholder_url = placeholder_url

    async def create_plan(self, hba1c: HbA1c) -> DietPlan:
        """
        Create a complete diet plan.

        Workflow:
        1. Generate structured plan (no images)
        2. Collect every meal option across all categories
        3. Generate all images concurrently
        4. Return the plan with every image_url set

        Args:
            hba1c: Validated reading

        Returns:
            DietPlan with every MealOption.image_url populated

        Raises:
            GenerationError: If the plan could not be generated; no
                image request is made in that case
        """
        start_time = time.time()
        logger.info("Creating diet plan", hba1c=hba1c.value)

        try:
            plan = await self.content_generator.generate_plan(hba1c)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Diet plan generation failed: {e}") from e

        options = plan.meal_plan.all_options()
        logger.info("Generating meal images", hba1c=hba1c.value, images=len(options))

        await asyncio.gather(*(self._attach_image(option) for option in options))

        logger.info(
            "Diet plan complete",
            hba1c=hba1c.value,
            images=len(options),
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        return plan

    async def _attach_image(self, option: MealOption) -> None:
        """Generate and store the image for one option.

        Image generators are expected to degrade on their own; an
        exception that still escapes only affects this option.
        """
        try:
            option.image_url = await self.image_generator.generate(option.name)
        except Exception as e:
            logger.warning(
                "Image generator raised, using placeholder",
                food_name=option.name,
                error=str(e),
            )
            option.image_url = self.placeholder_url
