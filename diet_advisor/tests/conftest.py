"""
Shared fixtures for diet advisor tests.

Domain samples, mocked ports and a mocked AsyncOpenAI SDK client.
"""

import copy
import json
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from diet_advisor.domain.plan.mapper import DietPlanMapper
from diet_advisor.domain.plan.models import DietPlan
from diet_advisor.domain.plan.ports import IContentGenerator, IImageGenerator
from diet_advisor.domain.shared.value_objects import HbA1c


# ═══════════════════════════════════════════════════════════
# DOMAIN MODEL FIXTURES
# ═══════════════════════════════════════════════════════════

SAMPLE_PLAN_DATA: dict[str, Any] = {
    "analysis": {
        "level": "ما قبل السكري",
        "explanation": "مستوى 5.7% يشير إلى مرحلة ما قبل السكري.",
    },
    "mainGoals": ["خفض السكريات المضافة", "زيادة الألياف", "إنقاص الوزن تدريجياً"],
    "mealPlan": {
        "breakfast": [{"name": "شوفان بالتوت"}, {"name": "بيض مسلوق مع خبز أسمر"}],
        "lunch": [
            {"name": "سلطة الكينوا مع الدجاج"},
            {"name": "سمك مشوي مع خضار"},
            {"name": "عدس مطبوخ"},
        ],
        "dinner": [{"name": "شوربة خضار"}, {"name": "زبادي يوناني مع خيار"}],
        "snacks": [{"name": "حفنة لوز"}, {"name": "تفاحة"}, {"name": "جزر مع حمص"}],
    },
    "recommendedFoods": ["الخضروات الورقية", "البقوليات"],
    "avoidFoods": ["المشروبات الغازية", "الخبز الأبيض"],
    "lifestyleTips": ["المشي 30 دقيقة يومياً", "النوم الكافي"],
}

SAMPLE_OPTION_COUNT = 10


@pytest.fixture
def sample_plan_data() -> dict[str, Any]:
    """Raw plan JSON as returned by the model (deep copy, safe to mutate)."""
    return copy.deepcopy(SAMPLE_PLAN_DATA)


@pytest.fixture
def sample_plan(sample_plan_data: dict[str, Any]) -> DietPlan:
    """Parsed plan with every image_url unset."""
    return DietPlanMapper.parse_plan(sample_plan_data)


@pytest.fixture
def sample_option_count() -> int:
    """Meal options across all categories of the sample plan."""
    return SAMPLE_OPTION_COUNT


@pytest.fixture
def sample_hba1c() -> HbA1c:
    """Prediabetes-range reading."""
    return HbA1c(value=5.7)


# ═══════════════════════════════════════════════════════════
# MOCK PORT FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def mock_content_generator(sample_plan: DietPlan) -> AsyncMock:
    """Mock content generator.

    Default behavior: returns sample_plan.
    """
    generator = AsyncMock(spec=IContentGenerator)
    generator.generate_plan.return_value = sample_plan
    return generator


@pytest.fixture
def mock_image_generator() -> AsyncMock:
    """Mock image generator.

    Default behavior: returns a data URI derived from the name.
    """
    generator = AsyncMock(spec=IImageGenerator)

    async def _generate(food_name: str) -> str:
        return f"data:image/jpeg;base64,{food_name}"

    generator.generate.side_effect = _generate
    return generator


# ═══════════════════════════════════════════════════════════
# OPENAI SDK FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def make_completion() -> Callable[..., MagicMock]:
    """Factory for mocked ChatCompletion responses."""

    def _make(content: str, finish_reason: str = "stop") -> MagicMock:
        response = MagicMock()
        choice = MagicMock()
        choice.message.content = content
        choice.finish_reason = finish_reason
        response.choices = [choice]
        response.usage = MagicMock(prompt_tokens=100, completion_tokens=50, total_tokens=150)
        return response

    return _make


@pytest.fixture
def make_images_response() -> Callable[..., MagicMock]:
    """Factory for mocked ImagesResponse."""

    def _make(b64: str | None = "aGVsbG8=") -> MagicMock:
        response = MagicMock()
        image = MagicMock()
        image.b64_json = b64
        response.data = [image]
        return response

    return _make


@pytest.fixture
def mock_openai_sdk(
    make_completion: Callable[..., MagicMock],
    make_images_response: Callable[..., MagicMock],
) -> AsyncMock:
    """Mock AsyncOpenAI client answering with the sample plan and one image."""
    client = AsyncMock()
    client.close = AsyncMock()
    client.chat.completions.create = AsyncMock(
        return_value=make_completion(json.dumps(SAMPLE_PLAN_DATA, ensure_ascii=False))
    )
    client.images.generate = AsyncMock(return_value=make_images_response())
    return client
