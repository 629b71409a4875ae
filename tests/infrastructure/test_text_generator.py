"""Tests for the Gemini description generator."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from showroom.domain.exceptions import TextGenerationError
from showroom.infrastructure.text_generator import (
    DescriptionGenerator,
    build_prompt,
    get_description_generator,
)


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_includes_product_details(self) -> None:
        prompt = build_prompt("Black Galaxy Granite", "granite", "gold flecks")
        assert 'named "Black Galaxy Granite"' in prompt
        assert 'which is a "granite"' in prompt
        assert '"gold flecks"' in prompt
        assert "max 2 sentences" in prompt
        assert "varnam Granites" in prompt

    def test_missing_values_become_empty(self) -> None:
        prompt = build_prompt(None, None, None)
        assert "None" not in prompt


class TestDescriptionGenerator:
    """Tests for DescriptionGenerator."""

    @pytest.mark.asyncio
    async def test_missing_key(self) -> None:
        generator = DescriptionGenerator(api_key=None)
        with pytest.raises(TextGenerationError) as exc_info:
            await generator.enhance("Onyx", "marble", "green")
        assert exc_info.value.message == "Server missing API Key"

    @pytest.mark.asyncio
    async def test_configures_gemini_once(self) -> None:
        response = MagicMock(text="  Polished and proud.  ")
        model = MagicMock()
        model.generate_content_async = AsyncMock(return_value=response)

        with patch("showroom.infrastructure.text_generator.genai") as genai:
            genai.GenerativeModel.return_value = model
            generator = DescriptionGenerator(api_key="key-123", model_name="gemini-test")

            first = await generator.enhance("Onyx", "marble", "green")
            await generator.enhance("Onyx", "marble", "green")

        assert first == "Polished and proud."
        genai.configure.assert_called_once_with(api_key="key-123")
        genai.GenerativeModel.assert_called_once_with(model_name="gemini-test")
        assert model.generate_content_async.await_count == 2

    @pytest.mark.asyncio
    async def test_provider_error(self) -> None:
        model = MagicMock()
        model.generate_content_async = AsyncMock(side_effect=ValueError("blocked"))
        generator = DescriptionGenerator(api_key="key-123")
        generator._model = model

        with pytest.raises(TextGenerationError) as exc_info:
            await generator.enhance("Onyx", "marble", "green")
        assert exc_info.value.message == "Failed to generate text"

    def test_singleton(self) -> None:
        assert get_description_generator() is get_description_generator()
