"""
Unit tests for the OpenAI factory functions.
"""

from unittest.mock import AsyncMock

import pytest

from diet_advisor.application.plan.orchestration_service import DietPlanOrchestrator
from diet_advisor.config import Settings
from diet_advisor.infrastructure.ai.content_generator import OpenAIContentGenerator
from diet_advisor.infrastructure.ai.factory import create_openai_client, create_orchestrator
from diet_advisor.infrastructure.ai.image_generator import OpenAIImageGenerator
from diet_advisor.infrastructure.ai.openai_client import OpenAIClient


class TestFactory:
    """Test wiring from settings."""

    def test_create_client_from_settings(self) -> None:
        settings = Settings(
            openai_api_key="sk-test",
            content_model="gpt-4o",
            image_model="gpt-image-1-mini",
            request_timeout_s=60.0,
        )

        client = create_openai_client(settings)

        assert client.api_key == "sk-test"
        assert client.get_stats() == {
            "model": "gpt-4o",
            "image_model": "gpt-image-1-mini",
            "max_retries": 0,
            "timeout": 60.0,
        }

    def test_create_client_without_key_raises(self) -> None:
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            create_openai_client(Settings(openai_api_key=None))

    def test_create_orchestrator(self, mock_openai_sdk: AsyncMock) -> None:
        settings = Settings(
            openai_api_key="sk-test",
            image_size="1024x1024",
            placeholder_image_url="/static/none.png",
        )
        client = OpenAIClient(client=mock_openai_sdk)

        orchestrator = create_orchestrator(client, settings)

        assert isinstance(orchestrator, DietPlanOrchestrator)
        assert isinstance(orchestrator.content_generator, OpenAIContentGenerator)
        assert isinstance(orchestrator.image_generator, OpenAIImageGenerator)
        assert orchestrator.image_generator.size == "1024x1024"
        assert orchestrator.image_generator.placeholder_url == "/static/none.png"
        assert orchestrator.placeholder_url == "/static/none.png"
        assert orchestrator.content_generator.openai_client is client
