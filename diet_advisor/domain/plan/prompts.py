"""
OpenAI prompts for diet plan and food photo generation.

System prompt is static (cacheable by OpenAI); the HbA1c value only
appears in the user message. The plan is written in Arabic.
"""

from typing import Any

from diet_advisor.domain.shared.value_objects import HbA1c


# ═══════════════════════════════════════════════════════════
# SYSTEM PROMPT (Cacheable - static instructions)
# ═══════════════════════════════════════════════════════════

DIET_PLAN_SYSTEM_PROMPT = """You are a clinical nutrition assistant for people monitoring their blood sugar.

Your task: given a single HbA1c reading (percent), produce a detailed, practical diet guidance plan.

LANGUAGE: write every string value in Modern Standard Arabic.

Classification of the reading (analysis.level):
- Normal: below 5.7%
- Prediabetes: 5.7% - 6.4%
- Diabetes: 6.5% or higher

Content rules:
- analysis.explanation: short, plain explanation of the level and its possible risks
- mainGoals: 2-3 main goals of the diet
- mealPlan: 2-3 options each for breakfast, lunch and dinner, 3-4 snack options
- meal option names must be concrete dishes that can be photographed (e.g. "Oatmeal with berries"), no advice text
- recommendedFoods / avoidFoods: concrete foods
- lifestyleTips: exercise, sleep, hydration, monitoring
- Do NOT diagnose or prescribe medication. General guidance only.

Output: JSON only, matching the provided schema exactly.
"""


# ═══════════════════════════════════════════════════════════
# USER MESSAGE BUILDERS (Dynamic - not cached)
# ═══════════════════════════════════════════════════════════


def build_plan_user_message(hba1c: HbA1c) -> str:
    """Build user message embedding the HbA1c reading.

    Args:
        hba1c: Validated reading

    Returns:
        User message text
    """
    return (
        f"مستخدم أدخل مستوى السكر التراكمي (HbA1c) الخاص به وهو: {hba1c}%.\n"
        "مهمتك هي إنشاء خطة إرشادية غذائية مفصلة وشاملة بناءً على هذه القيمة.\n"
        "يجب أن تكون الإجابة بتنسيق JSON حصراً."
    )


def build_image_prompt(food_name: str) -> str:
    """Build prompt for one photorealistic dish photo.

    Args:
        food_name: Dish name as returned in the plan

    Returns:
        Image generation prompt
    """
    return (
        f'صورة فوتوغرافية واقعية عالية الجودة لطبق "{food_name}"، '
        "معروض بشكل شهي على خلفية نظيفة ومشرقة."
    )


# ═══════════════════════════════════════════════════════════
# JSON SCHEMA (For OpenAI structured output)
# ═══════════════════════════════════════════════════════════


def _string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "description": description, "items": {"type": "string"}}


def _meal_options(description: str) -> dict[str, Any]:
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "object",
            "properties": {"name": {"type": "string", "description": "اسم الطبق"}},
            "required": ["name"],
            "additionalProperties": False,
        },
    }


# Strict mode: every property required, no extra properties.
DIET_PLAN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "analysis": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "description": "تصنيف المستوى (طبيعي، ما قبل السكري، مصاب بالسكري)",
                },
                "explanation": {
                    "type": "string",
                    "description": "شرح بسيط للمستوى والمخاطر المحتملة",
                },
            },
            "required": ["level", "explanation"],
            "additionalProperties": False,
        },
        "mainGoals": _string_list("2-3 أهداف رئيسية للحمية"),
        "mealPlan": {
            "type": "object",
            "properties": {
                "breakfast": _meal_options("2-3 خيارات للإفطار"),
                "lunch": _meal_options("2-3 خيارات للغداء"),
                "dinner": _meal_options("2-3 خيارات للعشاء"),
                "snacks": _meal_options("3-4 خيارات للوجبات الخفيفة"),
            },
            "required": ["breakfast", "lunch", "dinner", "snacks"],
            "additionalProperties": False,
        },
        "recommendedFoods": _string_list("أطعمة موصى بها"),
        "avoidFoods": _string_list("أطعمة يجب تجنبها"),
        "lifestyleTips": _string_list("نصائح لنمط حياة صحي"),
    },
    "required": [
        "analysis",
        "mainGoals",
        "mealPlan",
        "recommendedFoods",
        "avoidFoods",
        "lifestyleTips",
    ],
    "additionalProperties": False,
}

DIET_PLAN_RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name": "diet_plan",
        "strict": True,
        "schema": DIET_PLAN_SCHEMA,
    },
}


# ═══════════════════════════════════════════════════════════
# HELPER: Build complete message arrays for OpenAI
# ═══════════════════════════════════════════════════════════


def build_plan_messages(hba1c: HbA1c) -> list[dict[str, Any]]:
    """Build complete message array for plan generation.

    Args:
        hba1c: Validated reading

    Returns:
        List of message dicts for OpenAI API
    """
    return [
        {"role": "system", "content": DIET_PLAN_SYSTEM_PROMPT},
        {"role": "user", "content": build_plan_user_message(hba1c)},
    ]
