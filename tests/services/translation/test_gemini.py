"""GeminiTranslation 구현체 테스트"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.constants import SEGMENT_DELIMITER
from src.services.translation.base import TranslationError
from src.services.translation.gemini import (
    GeminiTranslation,
    build_segments_prompt,
    build_text_prompt,
)

GEMINI_MODULE = "src.services.translation.gemini"


def _mock_client(mock_genai: MagicMock, text: str | None) -> AsyncMock:
    mock_response = MagicMock()
    mock_response.text = text
    generate = AsyncMock(return_value=mock_response)
    mock_genai.Client.return_value.aio.models.generate_content = generate
    return generate


class TestPrompts:
    def test_text_prompt_with_source(self) -> None:
        prompt = build_text_prompt("fr", "en")
        assert "from en to fr" in prompt
        assert "detect the source language" not in prompt

    def test_text_prompt_auto_detect(self) -> None:
        prompt = build_text_prompt("fr", None)
        assert "to fr" in prompt
        assert "detect the source language" in prompt

    def test_segments_prompt_mentions_delimiter(self) -> None:
        prompt = build_segments_prompt("ja", None, SEGMENT_DELIMITER)
        assert SEGMENT_DELIMITER in prompt
        assert "same number of segments" in prompt


@patch(f"{GEMINI_MODULE}.types")
class TestGeminiTranslation:
    def setup_method(self) -> None:
        self.translator = GeminiTranslation(api_key="test-key", model="test-model")

    async def test_translate_text_returns_response(self, _mock_types: MagicMock) -> None:
        with patch(f"{GEMINI_MODULE}.genai") as mock_genai:
            generate = _mock_client(mock_genai, "Bonjour le monde")
            result = await self.translator.translate_text("Hello world", "fr")

        assert result == "Bonjour le monde"
        assert generate.await_args.kwargs["contents"] == "Hello world"
        assert generate.await_args.kwargs["model"] == "test-model"

    async def test_translate_segments_uses_batch_prompt(self, _mock_types: MagicMock) -> None:
        joined = SEGMENT_DELIMITER.join(["a", "b"])
        with patch(f"{GEMINI_MODULE}.genai") as mock_genai:
            _mock_client(mock_genai, joined)
            result = await self.translator.translate_segments(joined, SEGMENT_DELIMITER, "fr")

        assert result == joined
        config_kwargs = _mock_types.GenerateContentConfig.call_args.kwargs
        assert SEGMENT_DELIMITER in config_kwargs["system_instruction"]
        assert config_kwargs["temperature"] == 0.3

    async def test_no_api_key_raises(self, _mock_types: MagicMock) -> None:
        translator = GeminiTranslation(api_key="", model="test-model")
        with pytest.raises(TranslationError):
            await translator.translate_text("Hello", "fr")

    async def test_empty_response_raises(self, _mock_types: MagicMock) -> None:
        with patch(f"{GEMINI_MODULE}.genai") as mock_genai:
            _mock_client(mock_genai, None)
            with pytest.raises(TranslationError, match="빈 응답"):
                await self.translator.translate_text("Hello", "fr")
