"""
Diet plan mapper.

Transforms raw model output to domain models.

The structured-output schema is a best-effort contract: the model
usually honors it, but the shape is checked here before anything
downstream iterates over it.
"""

import json
import re
from typing import Any, List

from diet_advisor.domain.plan.models import (
    Analysis,
    DietPlan,
    MealCategory,
    MealOption,
    MealPlan,
)
from diet_advisor.domain.shared.errors import GenerationError

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$")


class DietPlanMapper:
    """Maps model JSON output to DietPlan."""

    @staticmethod
    def parse_response(text: str) -> DietPlan:
        """Parse raw model text into a DietPlan.

        Args:
            text: Response content (JSON, optionally in a code fence)

        Returns:
            DietPlan with every image_url unset

        Raises:
            GenerationError: If not JSON or not shaped like a plan

        Example:
            >>> plan = DietPlanMapper.parse_response(
            ...     '{"analysis": {"level": "طبيعي", "explanation": "..."},'
            ...     ' "mealPlan": {"breakfast": [{"name": "شوفان"}]}}'
            ... )
            >>> plan.meal_plan.breakfast[0].name
            'شوفان'
        """
        cleaned = _CODE_FENCE.sub("", text or "").strip()
        if not cleaned:
            raise GenerationError("Empty response from model")

        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise GenerationError(f"Invalid JSON response: {cleaned[:200]}") from e

        return DietPlanMapper.parse_plan(data)

    @staticmethod
    def parse_plan(data: Any) -> DietPlan:
        """Validate decoded JSON and build the DietPlan.

        Rules:
        - root, ``analysis`` and ``mealPlan`` must be objects
        - ``analysis.level`` and ``analysis.explanation`` must be strings
        - string lists that are missing become empty; present but not
          a list is an error; non-string entries are dropped
        - a meal category that is missing or not a list becomes empty
        - meal options need a non-empty name (bare strings are accepted
          as the name); anything else is skipped

        Raises:
            GenerationError: On any structural violation above
        """
        if not isinstance(data, dict):
            raise GenerationError(f"Plan must be a JSON object, got {type(data).__name__}")

        return DietPlan(
            analysis=DietPlanMapper._parse_analysis(data.get("analysis")),
            main_goals=DietPlanMapper._parse_strings(data, "mainGoals"),
            meal_plan=DietPlanMapper._parse_meal_plan(data.get("mealPlan")),
            recommended_foods=DietPlanMapper._parse_strings(data, "recommendedFoods"),
            avoid_foods=DietPlanMapper._parse_strings(data, "avoidFoods"),
            lifestyle_tips=DietPlanMapper._parse_strings(data, "lifestyleTips"),
        )

    @staticmethod
    def _parse_analysis(raw: Any) -> Analysis:
        if not isinstance(raw, dict):
            raise GenerationError("Plan 'analysis' must be an object")

        level = raw.get("level")
        explanation = raw.get("explanation")
        if not isinstance(level, str) or not isinstance(explanation, str):
            raise GenerationError("Plan 'analysis' needs string 'level' and 'explanation'")

        return Analysis(level=level.strip(), explanation=explanation.strip())

    @staticmethod
    def _parse_strings(data: dict[str, Any], key: str) -> List[str]:
        raw = data.get(key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise GenerationError(f"Plan '{key}' must be an array")

        return [item.strip() for item in raw if isinstance(item, str) and item.strip()]

    @staticmethod
    def _parse_meal_plan(raw: Any) -> MealPlan:
        if not isinstance(raw, dict):
            raise GenerationError("Plan 'mealPlan' must be an object")

        options = {
            category.value: DietPlanMapper._parse_options(raw.get(category.value))
            for category in MealCategory
        }
        return MealPlan(**options)

    @staticmethod
    def _parse_options(raw: Any) -> List[MealOption]:
        if not isinstance(raw, list):
            return []

        options = []
        for item in raw:
            name = item.get("name") if isinstance(item, dict) else item
            if isinstance(name, str) and name.strip():
                options.append(MealOption(name=name.strip()))
        return options
