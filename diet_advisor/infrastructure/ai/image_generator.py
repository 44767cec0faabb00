"""
Food photo generator.

OpenAI adapter for IImageGenerator. Degrades instead of failing: any
error is logged and replaced by a fixed placeholder image URL, so one
bad image never aborts a plan.
"""

from __future__ import annotations

import structlog

from diet_advisor.domain.plan.models import PLACEHOLDER_IMAGE_URL
from diet_advisor.domain.plan.prompts import build_image_prompt
from diet_advisor.infrastructure.ai.openai_client import OpenAIClient

logger = structlog.get_logger(__name__)

_MIME_TYPES = {
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
}


class OpenAIImageGenerator:
    """
    Generates one photorealistic dish photo per call.

    Example:
        >>> generator = OpenAIImageGenerator(client)
        >>> url = await generator.generate("سلطة الكينوا")
        >>> url.startswith("data:image/jpeg;base64,") or url == PLACEHOLDER_IMAGE_URL
        True
    """

    def __init__(
        self,
        openai_client: OpenAIClient,
        size: str = "1536x1024",
        output_format: str = "jpeg",
        placeholder_url: str = PLACEHOLDER_IMAGE_URL,
    ):
        """
        Initialize generator.

        Args:
            openai_client: Initialized OpenAI client
            size: Landscape image size
            output_format: jpeg, png or webp
            placeholder_url: Returned whenever generation fails
        """
        if output_format not in _MIME_TYPES:
            raise ValueError(f"Unsupported image format: {output_format}")

        self.openai_client = openai_client
        self.size = size
        self.output_format = output_format
        self.placeholder_url = placeholder_url

    async def generate(self, food_name: str) -> str:
        """
        Generate a photo for the dish.

        Args:
            food_name: Dish name

        Returns:
            ``data:<mime>;base64,...`` URI, or the placeholder URL
        """
        try:
            image_b64 = await self.openai_client.generate_image(
                prompt=build_image_prompt(food_name),
                size=self.size,
                output_format=self.output_format,
            )
        except Exception as e:
            logger.warning(
                "Image generation failed, using placeholder",
                food_name=food_name,
                error=str(e),
            )
            return self.placeholder_url

        return f"data:{_MIME_TYPES[self.output_format]};base64,{image_b64}"
