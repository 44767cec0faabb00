"""
OpenAI API client for diet plan text and food photo generation.

Async client with structured JSON output and image generation.
Requests are single-attempt: SDK retries are disabled by default.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import structlog
from openai import AsyncOpenAI

if TYPE_CHECKING:
    from openai.types import ImagesResponse
    from openai.types.chat import ChatCompletion

logger = structlog.get_logger(__name__)


class OpenAIClient:
    """
    Async OpenAI client for chat completion and image generation.

    Features:
    - Structured JSON output (json_schema response format)
    - Base64 image generation
    - Context manager for resource cleanup
    - Injectable AsyncOpenAI instance (for testing)

    Example:
        >>> async with OpenAIClient() as client:
        ...     response = await client.complete(
        ...         messages=[{"role": "user", "content": "Hello"}],
        ...         response_format={"type": "json_object"},
        ...     )
        ...     print(response["content"])
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        image_model: str = "gpt-image-1",
        max_retries: int = 0,
        timeout: float = 120.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (reads OPENAI_API_KEY if None)
            model: Chat model for plan generation
            image_model: Image model for food photos
            max_retries: SDK retry attempts (0 = one attempt only)
            timeout: Request timeout in seconds
            client: Optional pre-configured AsyncOpenAI client (for testing)

        Raises:
            ValueError: If API key not found and client not provided
        """
        if client is not None:
            self._client: Optional[AsyncOpenAI] = client
            self.api_key: str = api_key or "test-key"
        else:
            resolved_key = api_key or os.getenv("OPENAI_API_KEY")
            if not resolved_key:
                raise ValueError(
                    "OPENAI_API_KEY not found in environment. "
                    "Set it in .env file or pass as parameter."
                )
            self.api_key = resolved_key
            self._client = None

        self.model = model
        self.image_model = image_model
        self.max_retries = max_retries
        self.timeout = timeout

    async def __aenter__(self) -> OpenAIClient:
        """Async context manager entry."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=self.max_retries,
            )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.close()

    async def complete(
        self,
        messages: List[Dict[str, Any]],
        response_format: Optional[Dict[str, Any]] = None,
        temperature: float = 0.7,
        max_tokens: int = 4000,
    ) -> Dict[str, Any]:
        """
        Complete chat, optionally with structured JSON output.

        Args:
            messages: Chat messages (system, user, assistant)
            response_format: e.g. {"type": "json_schema", "json_schema": {...}}
            temperature: Sampling temperature (0.0-2.0)
            max_tokens: Max tokens in response

        Returns:
            Dict with:
            - content: Response text
            - usage: Token usage stats
            - finish_reason: Completion reason

        Raises:
            RuntimeError: If used outside ``async with``
            openai.OpenAIError: On API failure
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        if response_format:
            params["response_format"] = response_format

        completion: ChatCompletion = await self._client.chat.completions.create(**params)

        choice = completion.choices[0]
        usage = {
            "prompt_tokens": (completion.usage.prompt_tokens if completion.usage else 0),
            "completion_tokens": (completion.usage.completion_tokens if completion.usage else 0),
            "total_tokens": (completion.usage.total_tokens if completion.usage else 0),
        }

        logger.info(
            "OpenAI completion received",
            model=self.model,
            finish_reason=choice.finish_reason,
            **usage,
        )

        return {
            "content": choice.message.content or "",
            "finish_reason": choice.finish_reason,
            "usage": usage,
        }

    async def generate_image(
        self,
        prompt: str,
        size: str = "1536x1024",
        output_format: str = "jpeg",
    ) -> str:
        """
        Generate a single image.

        Args:
            prompt: Image description
            size: Image size (WIDTHxHEIGHT)
            output_format: jpeg, png or webp

        Returns:
            Base64-encoded image bytes

        Raises:
            RuntimeError: If used outside ``async with``
            ValueError: If the response carries no image data
            openai.OpenAIError: On API failure
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        response: ImagesResponse = await self._client.images.generate(
            model=self.image_model,
            prompt=prompt,
            n=1,
            size=size,  # type: ignore[arg-type]
            output_format=output_format,  # type: ignore[arg-type]
        )

        if not response.data or not response.data[0].b64_json:
            raise ValueError("Image response contains no image data")

        return response.data[0].b64_json

    def get_stats(self) -> Dict[str, Any]:
        """
        Get client configuration summary.

        Returns:
            Dict with model names, retries and timeout
        """
        return {
            "model": self.model,
            "image_model": self.image_model,
            "max_retries": self.max_retries,
            "timeout": self.timeout,
        }
