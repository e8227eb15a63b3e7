"""배치 번역

여러 텍스트를 구분자로 이어 한 번에 번역하고, 세그먼트 수가 맞지 않으면
개별 번역으로 fallback. 배치는 지연 시간 최적화일 뿐 1:1 대응은 항상 보장.
"""

import logging
from collections.abc import Sequence

from src.constants import SEGMENT_DELIMITER
from src.services.translation.base import TranslationBackend, TranslationError

logger = logging.getLogger(__name__)


def split_segments(translated: str, delimiter: str = SEGMENT_DELIMITER) -> list[str]:
    """번역 결과를 구분자로 분리 (각 세그먼트 앞뒤 공백 제거, 순수 함수)"""
    return [segment.strip() for segment in translated.split(delimiter)]


class BatchTranslator:
    """TranslationBackend 위에서 동작하는 Translator 구현"""

    def __init__(self, backend: TranslationBackend, delimiter: str = SEGMENT_DELIMITER) -> None:
        self._backend = backend
        self._delimiter = delimiter

    async def translate_one(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        try:
            return await self._backend.translate_text(text, target_language, source_language)
        except TranslationError:
            raise
        except Exception as e:
            raise TranslationError(f"번역 실패: {e}") from e

    async def translate_many(
        self,
        texts: Sequence[str],
        target_language: str,
        source_language: str | None = None,
    ) -> list[str]:
        if not texts:
            return []

        if len(texts) == 1:
            return [await self.translate_one(texts[0], target_language, source_language)]

        logger.info(f"배치 번역: {len(texts)}개 세그먼트 → {target_language}")
        joined = self._delimiter.join(texts)

        try:
            translated = await self._backend.translate_segments(
                joined, self._delimiter, target_language, source_language
            )
        except TranslationError:
            raise
        except Exception as e:
            raise TranslationError(f"배치 번역 실패: {e}") from e

        segments = split_segments(translated, self._delimiter)
        if len(segments) == len(texts):
            return segments

        logger.warning(
            f"배치 번역 세그먼트 수 불일치 (기대: {len(texts)}, 실제: {len(segments)}). "
            "개별 번역으로 전환"
        )
        return [await self.translate_one(text, target_language, source_language) for text in texts]
