"""Translation 모듈

사용법:
    from src.services.translation import get_translation

    translator = get_translation()
    results = await translator.translate_many(texts, "fr")

백엔드 선택 (.env TRANSLATION_PROVIDER):
    - "gemini": Google Gemini API (기본값)
    - "mock": 개발용 고정 번역
"""

from src.config import get_settings
from src.services.translation.base import TranslationBackend, TranslationError, Translator
from src.services.translation.batch import BatchTranslator
from src.services.translation.gemini import GeminiTranslation

__all__ = [
    "BatchTranslator",
    "TranslationBackend",
    "TranslationError",
    "Translator",
    "get_translation",
    "set_translation",
]

_translator: Translator | None = None


def _create_backend() -> TranslationBackend:
    settings = get_settings()
    if settings.translation_provider == "gemini":
        return GeminiTranslation(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
        )
    if settings.translation_provider == "mock":
        from src.services.translation.mock import MockTranslation

        return MockTranslation()
    raise ValueError(f"Unknown translation provider: {settings.translation_provider!r}")


def get_translation() -> Translator:
    """설정에 따라 translation 백엔드를 감싼 BatchTranslator 반환"""
    global _translator
    if _translator is None:
        _translator = BatchTranslator(_create_backend())
    return _translator


def set_translation(translator: Translator | None) -> None:
    """translation 백엔드 설정 (테스트용)"""
    global _translator
    _translator = translator
