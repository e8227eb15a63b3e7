"""개발용 Mock 번역 구현체"""

import logging

from src.services.translation.base import TranslationError

logger = logging.getLogger(__name__)

PHRASES: dict[str, dict[str, str]] = {
    "Hello world": {
        "es": "Hola mundo",
        "fr": "Bonjour le monde",
        "de": "Hallo Welt",
        "ja": "こんにちは世界",
        "ko": "안녕하세요 세계",
    },
    "This is a test": {
        "es": "Esto es una prueba",
        "fr": "C'est un test",
        "de": "Dies ist ein Test",
        "ja": "これはテストです",
        "ko": "이것은 테스트입니다",
    },
    "Screenshot translation": {
        "es": "Traducción de captura de pantalla",
        "fr": "Traduction de capture d'écran",
        "de": "Bildschirmfoto-Übersetzung",
        "ja": "スクリーンショット翻訳",
        "ko": "스크린샷 번역",
    },
    "Image processing": {
        "es": "Procesamiento de imágenes",
        "fr": "Traitement d'image",
        "de": "Bildverarbeitung",
        "ja": "画像処理",
        "ko": "이미지 처리",
    },
}


def mock_translate(text: str, target_language: str) -> str:
    """고정 번역표 조회, 없으면 [lang] 접두어 (순수 함수)"""
    translation = PHRASES.get(text, {}).get(target_language.lower())
    if translation is not None:
        return translation
    return f"[{target_language}] {text}"


class MockTranslation:
    """API 호출 없이 고정 번역을 반환"""

    async def translate_text(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        if not target_language:
            raise TranslationError("target_language가 비어 있습니다")
        return mock_translate(text, target_language)

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        segments = joined.split(delimiter)
        logger.info(f"Mock 배치 번역: {len(segments)}개 세그먼트")
        return delimiter.join(
            [await self.translate_text(s, target_language, source_language) for s in segments]
        )
