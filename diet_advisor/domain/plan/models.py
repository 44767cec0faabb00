"""
Domain models for the diet plan.

A DietPlan is built fresh for every submission from the model output,
then completed in place by the image fan-out (``MealOption.image_url``).
Attribute names are snake_case; the wire form (JSON API, model output)
uses the camelCase aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Image reference used when a photo could not be generated
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/500x281.png?text=Image+not+available"


class MealCategory(str, Enum):
    """Meal categories, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


class MealOption(BaseModel):
    """
    Single suggested dish.

    ``image_url`` stays None until the image generator settles for
    this option; afterwards it holds a data URI or the placeholder URL.

    Example:
        >>> option = MealOption(name="شوفان بالتوت")
        >>> option.image_url is None
        True
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Dish name")
    image_url: Optional[str] = Field(default=None, alias="imageUrl", description="Dish photo")


class Analysis(BaseModel):
    """Classification of the HbA1c reading with a short explanation."""

    model_config = ConfigDict(populate_by_name=True)

    level: str = Field(..., description="Normal / prediabetes / diabetes")
    explanation: str = Field(..., description="What the level means and its risks")


class MealPlan(BaseModel):
    """Meal options grouped by category."""

    model_config = ConfigDict(populate_by_name=True)

    breakfast: List[MealOption] = Field(default_factory=list)
    lunch: List[MealOption] = Field(default_factory=list)
    dinner: List[MealOption] = Field(default_factory=list)
    snacks: List[MealOption] = Field(default_factory=list)

    def categories(self) -> Iterator[Tuple[MealCategory, List[MealOption]]]:
        """Yield (category, options) pairs in display order."""
        for category in MealCategory:
            yield category, getattr(self, category.value)

    def all_options(self) -> List[MealOption]:
        """
        Flatten every option across all categories.

        The returned objects are the ones held by the plan, so
        mutating them completes the plan in place.
        """
        return [option for _, options in self.categories() for option in options]

    def option_count(self) -> int:
        """Total number of options."""
        return len(self.all_options())


class DietPlan(BaseModel):
    """
    Complete diet plan for one HbA1c reading.

    Attributes:
        analysis: Level classification and explanation
        main_goals: Main goals of the diet (2-3)
        meal_plan: Options per meal category
        recommended_foods: Foods to prefer
        avoid_foods: Foods to avoid
        lifestyle_tips: Non-dietary advice

    Example:
        >>> plan = DietPlan(
        ...     analysis=Analysis(level="ما قبل السكري", explanation="..."),
        ...     mainGoals=["تقليل السكريات"],
        ...     mealPlan=MealPlan(breakfast=[MealOption(name="شوفان")]),
        ... )
        >>> plan.meal_plan.option_count()
        1
    """

    model_config = ConfigDict(populate_by_name=True)

    analysis: Analysis
    main_goals: List[str] = Field(default_factory=list, alias="mainGoals")
    meal_plan: MealPlan = Field(default_factory=MealPlan, alias="mealPlan")
    recommended_foods: List[str] = Field(default_factory=list, alias="recommendedFoods")
    avoid_foods: List[str] = Field(default_factory=list, alias="avoidFoods")
    lifestyle_tips: List[str] = Field(default_factory=list, alias="lifestyleTips")

    def is_complete(self) -> bool:
        """True once every meal option carries an image reference."""
        return all(option.image_url for option in self.meal_plan.all_options())

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, omitting unset image URLs."""
        return self.model_dump(by_alias=True, exclude_none=True)
