"""
Tests for Arabic UI labels.
"""

import pytest

from diet_advisor.domain.plan.models import MealCategory
from diet_advisor.presentation import labels


class TestLabels:
    """Label lookup."""

    @pytest.mark.parametrize(
        "category,expected",
        [
            (MealCategory.BREAKFAST, "الإفطار"),
            (MealCategory.LUNCH, "الغداء"),
            (MealCategory.DINNER, "العشاء"),
            (MealCategory.SNACKS, "وجبات خفيفة"),
        ],
    )
    def test_meal_category_label(self, category: MealCategory, expected: str) -> None:
        assert labels.meal_category_label(category) == expected

    def test_every_category_has_label(self) -> None:
        assert set(labels.MEAL_CATEGORY_LABELS) == set(MealCategory)

    def test_analysis_title_embeds_level(self) -> None:
        assert "ما قبل السكري" in labels.ANALYSIS_TITLE.format(level="ما قبل السكري")
