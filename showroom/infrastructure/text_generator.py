"""Gemini client for product description copywriting.

Turns rough admin notes into a short showroom-grade product description
using Google Gemini.

Example usage:
    generator = DescriptionGenerator(api_key="YOUR_GEMINI_API_KEY")
    text = await generator.enhance(
        name="Black Galaxy Granite",
        category="granite",
        current_text="black, gold flecks, tough",
    )
"""

import google.generativeai as genai
import structlog

from showroom.domain.exceptions import TextGenerationError
from showroom.infrastructure.config import settings

logger = structlog.get_logger()

SHOWROOM_NAME = "varnam Granites"

PROMPT_TEMPLATE = (
    "You are a professional copywriter for a luxury stone showroom called '{showroom}'. "
    "Write a sophisticated, selling product description (max 2 sentences) for a product "
    'named "{name}" which is a "{category}". '
    'Base it on these rough notes: "{notes}". '
    "Focus on durability, elegance, and premium quality. Do not use markdown or * symbols."
)


def build_prompt(name: str | None, category: str | None, current_text: str | None) -> str:
    """Build the copywriting prompt for one product."""
    return PROMPT_TEMPLATE.format(
        showroom=SHOWROOM_NAME,
        name=name or "",
        category=category or "",
        notes=current_text or "",
    )


class DescriptionGenerator:
    """Client for Gemini text generation."""

    def __init__(self, api_key: str | None, model_name: str | None = None) -> None:
        """Initialize generator.

        Args:
            api_key: Gemini API key. Requests fail while it is unset.
            model_name: Gemini model name.
        """
        self.api_key = api_key
        self.model_name = model_name or settings.gemini_model
        self._model: "genai.GenerativeModel | None" = None

    def _get_model(self) -> genai.GenerativeModel:
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(model_name=self.model_name)
        return self._model

    async def enhance(
        self,
        name: str | None,
        category: str | None,
        current_text: str | None,
    ) -> str:
        """Write a polished description from rough notes.

        Args:
            name: Product name.
            category: Product category.
            current_text: Existing description or notes.

        Returns:
            Generated description text.

        Raises:
            TextGenerationError: If the key is missing or the provider fails.
        """
        if not self.api_key:
            raise TextGenerationError("Server missing API Key")

        prompt = build_prompt(name, category, current_text)
        try:
            response = await self._get_model().generate_content_async(prompt)
            text = response.text
        except Exception as e:
            logger.exception(
                "Description generation failed",
                model=self.model_name,
                error=str(e),
            )
            raise TextGenerationError("Failed to generate text") from e

        logger.info(
            "Description generated",
            model=self.model_name,
            length=len(text),
        )
        return text.strip()


_description_generator: DescriptionGenerator | None = None


def get_description_generator() -> DescriptionGenerator:
    """Get description generator singleton."""
    global _description_generator
    if _description_generator is None:
        _description_generator = DescriptionGenerator(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
        )
    return _description_generator


def reset_description_generator() -> None:
    """Reset description generator singleton."""
    global _description_generator
    _description_generator = None
