"""Process Screenshot API 스키마"""

from pydantic import Field

from src.config import get_settings
from src.schemas.base import BaseSchema
from src.schemas.pipeline import TranslationRequest


class ProcessScreenshotRequest(BaseSchema):
    """스크린샷 번역 요청

    image, target_language 존재 여부는 route에서 직접 검증 (400 + 에러 코드).
    """

    image: str | None = None  # base64
    target_language: str | None = None
    source_language: str | None = None  # 없으면 자동 감지
    filter_low_confidence_results: bool = True
    min_confidence_threshold: float | None = Field(default=None, ge=0.0, le=1.0)  # 없으면 설정값

    def to_translation_request(self, image: bytes, target_language: str) -> TranslationRequest:
        return TranslationRequest(
            image=image,
            target_language=target_language,
            source_language=self.source_language or None,
            filter_low_confidence=self.filter_low_confidence_results,
            min_confidence=(
                self.min_confidence_threshold
                if self.min_confidence_threshold is not None
                else get_settings().default_min_confidence
            ),
        )
