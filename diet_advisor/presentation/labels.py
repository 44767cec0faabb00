"""Fixed user-facing strings (Arabic UI)."""

from diet_advisor.domain.plan.models import MealCategory

PAGE_TITLE = "مستشار الحمية الغذائية"
PAGE_SUBTITLE = "أدخل مستوى السكر التراكمي (HbA1c) للحصول على خطة غذائية مخصصة ومدعومة بالصور"

INPUT_LABEL = "مستوى السكر التراكمي (HbA1c %)"
INPUT_ARIA_LABEL = "مستوى السكر التراكمي"
INPUT_PLACEHOLDER = "مثال: 5.7"
SUBMIT_LABEL = "تحليل"
SUBMITTING_LABEL = "جاري التحليل وإنشاء الصور..."

ERROR_TITLE = "خطأ"
INVALID_INPUT_MESSAGE = "الرجاء إدخال قيمة صالحة للسكر التراكمي (أكبر من 0 وحتى 25)."
GENERATION_ERROR_MESSAGE = (
    "حدث خطأ أثناء الحصول على التوصية. قد تستغرق العملية وقتاً أطول بسبب إنشاء الصور. "
    "الرجاء المحاولة مرة أخرى."
)
BUSY_MESSAGE = "جاري معالجة طلب سابق، الرجاء الانتظار."

ANALYSIS_TITLE = "تحليل المستوى: {level}"
GOALS_TITLE = "الأهداف الرئيسية للحمية"
MEAL_PLAN_TITLE = "خطة غذائية مقترحة"
RECOMMENDED_TITLE = "أطعمة موصى بها"
AVOID_TITLE = "أطعمة يجب تجنبها"
LIFESTYLE_TITLE = "نصائح لنمط حياة صحي"

DISCLAIMER_TITLE = "تنبيه هام:"
DISCLAIMER_TEXT = (
    "هذه المعلومات هي إرشادية فقط ولا تغني إطلاقًا عن استشارة الطبيب المختص أو أخصائي التغذية. "
    "يجب وضع أي خطة علاجية أو غذائية تحت إشراف طبي."
)

MEAL_CATEGORY_LABELS = {
    MealCategory.BREAKFAST: "الإفطار",
    MealCategory.LUNCH: "الغداء",
    MealCategory.DINNER: "العشاء",
    MealCategory.SNACKS: "وجبات خفيفة",
}


def meal_category_label(category: MealCategory) -> str:
    """Display name of a meal category."""
    return MEAL_CATEGORY_LABELS[category]
