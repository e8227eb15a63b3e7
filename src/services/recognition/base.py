"""Recognition Protocol

교체 가능한 텍스트 인식(OCR) 구현을 위한 인터페이스 정의.
모든 좌표는 원본 이미지 기준 절대 좌표(px).
"""

from typing import Protocol

from src.schemas.pipeline import TextElement


class RecognitionError(Exception):
    pass


class Recognizer(Protocol):
    """텍스트 인식 인터페이스

    구현체:
    - GeminiRecognition: Google Gemini API
    - HFSpaceRecognition: HuggingFace Space API
    - MockRecognition: 개발용 샘플 데이터
    """

    async def recognize(self, image: bytes, min_confidence: float) -> list[TextElement]:
        """이미지에서 텍스트 라인 인식

        Args:
            image: 인코딩된 이미지 바이트
            min_confidence: 최소 신뢰도 (미만은 제외, 0이면 모두 허용)

        Returns:
            list[TextElement]: 빈 텍스트/저신뢰도가 걸러진 인식 결과 (원본 순서 유지)

        Raises:
            RecognitionError: 인식 실패 시
        """
        ...
