"""Builds the OpenAI-backed collaborators from settings.

Usage:
    client = create_openai_client(settings)
    async with client as initialized:
        orchestrator = create_orchestrator(initialized, settings)
"""

from diet_advisor.application.plan.orchestration_service import DietPlanOrchestrator
from diet_advisor.config import Settings
from diet_advisor.infrastructure.ai.content_generator import OpenAIContentGenerator
from diet_advisor.infrastructure.ai.image_generator import OpenAIImageGenerator
from diet_advisor.infrastructure.ai.openai_client import OpenAIClient


def create_openai_client(settings: Settings) -> OpenAIClient:
    """Create a (not yet entered) OpenAI client.

    Raises:
        ValueError: If OPENAI_API_KEY is not configured
    """
    if not settings.openai_api_key:
        raise ValueError("OPENAI_API_KEY not set. Set it in .env or in the environment.")

    return OpenAIClient(
        api_key=settings.openai_api_key,
        model=settings.content_model,
        image_model=settings.image_model,
        timeout=settings.request_timeout_s,
    )


def create_orchestrator(client: OpenAIClient, settings: Settings) -> DietPlanOrchestrator:
    """Wire content and image generators around an initialized client."""
    return DietPlanOrchestrator(
        content_generator=OpenAIContentGenerator(client),
        image_generator=OpenAIImageGenerator(
            client,
            size=settings.image_size,
            placeholder_url=settings.placeholder_image_url,
        ),
        placeholder_url=settings.placeholder_image_url,
    )
