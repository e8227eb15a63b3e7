"""Translation Protocol

교체 가능한 번역 구현을 위한 인터페이스 정의.
"""

from collections.abc import Sequence
from typing import Protocol


class TranslationError(Exception):
    pass


class TranslationBackend(Protocol):
    """번역 API 호출 인터페이스 (프롬프트 단위)

    구현체:
    - GeminiTranslation: Google Gemini API
    - MockTranslation: 개발용 고정 번역
    """

    async def translate_text(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        """단일 텍스트 번역

        Raises:
            TranslationError: 번역 실패 시
        """
        ...

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        """구분자로 이어 붙인 여러 세그먼트를 한 번에 번역

        구분자와 세그먼트 개수를 유지하도록 요청하지만 보장하지는 않음.

        Raises:
            TranslationError: 번역 실패 시
        """
        ...


class Translator(Protocol):
    """파이프라인이 사용하는 번역 인터페이스

    구현체:
    - BatchTranslator: 배치 + 개별 fallback
    """

    async def translate_one(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str: ...

    async def translate_many(
        self,
        texts: Sequence[str],
        target_language: str,
        source_language: str | None = None,
    ) -> list[str]:
        """텍스트 목록 번역

        Returns:
            list[str]: 입력과 같은 길이, result[i]는 texts[i]의 번역

        Raises:
            TranslationError: 번역 실패 시
        """
        ...
