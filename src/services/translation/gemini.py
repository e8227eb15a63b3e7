"""Gemini 기반 번역 구현체"""

# pyright: reportMissingTypeStubs=false

import logging

from google import genai
from google.genai import types

from src.services.translation.base import TranslationError

logger = logging.getLogger(__name__)


def build_text_prompt(target_language: str, source_language: str | None) -> str:
    """단일 텍스트 번역용 system instruction"""
    lines = ["You are a professional translator."]
    if source_language:
        lines.append(f"Translate the following text from {source_language} to {target_language}.")
    else:
        lines.append(f"Translate the following text to {target_language}.")
        lines.append("First detect the source language, then translate to the target language.")
    lines.append("Keep the formatting and structure as close as possible to the original.")
    lines.append("Translate only the text, don't add any comments or explanations.")
    return "\n".join(lines)


def build_segments_prompt(target_language: str, source_language: str | None, delimiter: str) -> str:
    """구분자 배치 번역용 system instruction"""
    lines = ["You are a professional translator."]
    if source_language:
        lines.append(
            f"Translate the following text segments from {source_language} to {target_language}."
        )
    else:
        lines.append(f"Translate the following text segments to {target_language}.")
    lines.append(f"The text segments are separated by the delimiter: {delimiter}")
    lines.append(
        "Translate each segment separately, and keep them separated with the exact same delimiter."
    )
    lines.append("You must return exactly the same number of segments as in the input.")
    lines.append("Keep the formatting and structure as close as possible to the original.")
    lines.append("Translate only the text, don't add any comments or explanations.")
    return "\n".join(lines)


class GeminiTranslation:
    """Google Gemini API를 사용한 텍스트 번역"""

    def __init__(self, api_key: str, model: str, temperature: float = 0.3) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = temperature

    async def translate_text(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        logger.info(f"번역 요청 → {target_language}")
        return await self._call_gemini(text, build_text_prompt(target_language, source_language))

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        prompt = build_segments_prompt(target_language, source_language, delimiter)
        return await self._call_gemini(joined, prompt)

    async def _call_gemini(self, text: str, system_instruction: str) -> str:
        """
        Raises:
            TranslationError: API 키 누락, 빈 응답
        """
        if not self._api_key:
            raise TranslationError("GEMINI_API_KEY가 설정되지 않았습니다")

        client = genai.Client(api_key=self._api_key)
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=text,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=self._temperature,
            ),
        )

        if not response.text:
            raise TranslationError("빈 응답")

        return response.text
