"""
Ports (Interfaces) for Diet Plan Orchestration Dependencies.

Defines the interfaces of the two hosted AI collaborators used by
DietPlanOrchestrator, so the application layer never imports the
OpenAI adapters directly.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from typing import Protocol, runtime_checkable

from diet_advisor.domain.plan.models import DietPlan
from diet_advisor.domain.shared.value_objects import HbA1c


@runtime_checkable
class IContentGenerator(Protocol):
    """
    Port for structured diet plan generation.

    One call, one attempt: implementations must not retry.
    """

    async def generate_plan(self, hba1c: HbA1c) -> DietPlan:
        """
        Generate a diet plan for the reading.

        Args:
            hba1c: Validated HbA1c reading

        Returns:
            DietPlan with every MealOption.image_url unset

        Raises:
            GenerationError: If the call fails or output is unusable
        """
        ...


@runtime_checkable
class IImageGenerator(Protocol):
    """
    Port for food photo generation.

    Implementations degrade instead of failing: they never raise.
    """

    async def generate(self, food_name: str) -> str:
        """
        Generate one photo for a dish.

        Args:
            food_name: Dish name

        Returns:
            Data URI of the image, or a placeholder URL on failure
        """
        ...
