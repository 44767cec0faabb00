"""
Unit tests for OpenAIImageGenerator.

The generator never raises: every failure becomes the placeholder URL.
"""

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from diet_advisor.infrastructure.ai.image_generator import (
    PLACEHOLDER_IMAGE_URL,
    OpenAIImageGenerator,
)
from diet_advisor.infrastructure.ai.openai_client import OpenAIClient


@pytest.fixture
def openai_client(mock_openai_sdk: AsyncMock) -> OpenAIClient:
    return OpenAIClient(client=mock_openai_sdk)


class TestOpenAIImageGenerator:
    """Test photo generation and fallback."""

    @pytest.mark.asyncio
    async def test_returns_jpeg_data_uri(
        self,
        openai_client: OpenAIClient,
        mock_openai_sdk: AsyncMock,
    ) -> None:
        generator = OpenAIImageGenerator(openai_client)

        url = await generator.generate("شوفان بالتوت")

        assert url == "data:image/jpeg;base64,aGVsbG8="
        kwargs = mock_openai_sdk.images.generate.call_args.kwargs
        assert "شوفان بالتوت" in kwargs["prompt"]
        assert kwargs["size"] == "1536x1024"
        assert kwargs["output_format"] == "jpeg"
        assert kwargs["n"] == 1

    @pytest.mark.asyncio
    async def test_mime_type_follows_format(self, openai_client: OpenAIClient) -> None:
        generator = OpenAIImageGenerator(openai_client, output_format="png")
        url = await generator.generate("تفاحة")
        assert url.startswith("data:image/png;base64,")

    @pytest.mark.asyncio
    async def test_api_error_returns_placeholder(
        self,
        openai_client: OpenAIClient,
        mock_openai_sdk: AsyncMock,
    ) -> None:
        mock_openai_sdk.images.generate.side_effect = Exception("content policy")
        generator = OpenAIImageGenerator(openai_client)

        url = await generator.generate("سمك مشوي")

        assert url == PLACEHOLDER_IMAGE_URL
        assert mock_openai_sdk.images.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_image_returns_placeholder(
        self,
        openai_client: OpenAIClient,
        mock_openai_sdk: AsyncMock,
        make_images_response: Callable[..., MagicMock],
    ) -> None:
        mock_openai_sdk.images.generate.return_value = make_images_response(None)
        generator = OpenAIImageGenerator(openai_client)

        assert await generator.generate("عدس") == PLACEHOLDER_IMAGE_URL

    @pytest.mark.asyncio
    async def test_custom_placeholder(
        self,
        openai_client: OpenAIClient,
        mock_openai_sdk: AsyncMock,
    ) -> None:
        mock_openai_sdk.images.generate.side_effect = TimeoutError()
        generator = OpenAIImageGenerator(openai_client, placeholder_url="/static/none.png")

        assert await generator.generate("لوز") == "/static/none.png"

    def test_unsupported_format_raises(self, openai_client: OpenAIClient) -> None:
        with pytest.raises(ValueError, match="Unsupported image format"):
            OpenAIImageGenerator(openai_client, output_format="gif")
