"""파이프라인 데이터 모델

Recognition → Translation → Overlay 전체에서 사용하는 공통 스키마.
요청 하나의 실행 범위 안에서만 생성/수정/폐기되며 요청 간 공유되지 않음.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.constants import PipelineStatus
from src.schemas.base import BaseSchema


class BoundingBox(BaseSchema):
    """정수 픽셀 사각형 (좌상단 원점, 이미지 축 정렬)

    정규화된 박스는 항상 width, height >= 1.
    모델 자체는 임의의 값을 허용하며, 잘못된 박스는 렌더링 단계에서 스킵됨.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def is_valid(self) -> bool:
        """유효한 영역인지 확인 (width > 0 and height > 0)"""
        return self.width > 0 and self.height > 0

    def fits_within(self, image_width: int, image_height: int) -> bool:
        """이미지 캔버스 안에 완전히 포함되는지 확인"""
        return (
            self.x >= 0
            and self.y >= 0
            and self.x + self.width <= image_width
            and self.y + self.height <= image_height
        )

    def to_rect(self) -> tuple[int, int, int, int]:
        """PIL 사각형 좌표 (x1, y1, x2, y2) - 끝점 포함"""
        return (self.x, self.y, self.x + self.width - 1, self.y + self.height - 1)


class TextElement(BaseSchema):
    """인식된 텍스트 단위

    translated_text는 번역 단계가 끝나기 전까지 빈 문자열.
    """

    original_text: str
    translated_text: str = ""
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    bounding_box: BoundingBox = Field(default_factory=BoundingBox)


class TranslationRequest(BaseModel):
    """파이프라인 1회 실행 입력 (불변)"""

    model_config = ConfigDict(frozen=True)

    image: bytes  # 인코딩된 이미지 (PNG 등)
    target_language: str
    source_language: str | None = None  # None이면 번역 백엔드가 자동 감지
    filter_low_confidence: bool = True
    min_confidence: float = Field(default=0.6, ge=0.0, le=1.0)

    @property
    def effective_min_confidence(self) -> float:
        """필터링 비활성화 시 0 (모두 허용)"""
        return self.min_confidence if self.filter_low_confidence else 0.0


class ProcessingMetrics(BaseSchema):
    """단계별 처리 시간 (ms)"""

    recognition_time_ms: int = 0
    translation_time_ms: int = 0
    overlay_time_ms: int = 0
    total_processing_time_ms: int = 0


class TranslationDetails(BaseSchema):
    """인식/번역 상세 결과 (실패 시에도 누적된 만큼 채워져서 반환)"""

    target_language: str = ""
    detected_element_count: int = 0
    processed_element_count: int = 0
    elements: list[TextElement] = Field(default_factory=list)
    metrics: ProcessingMetrics = Field(default_factory=ProcessingMetrics)


class PipelineResult(BaseSchema):
    """전체 파이프라인 결과"""

    status: PipelineStatus
    translated_text: str = ""
    image_with_overlay: str | None = None  # base64
    message: str | None = None
    details: TranslationDetails
