"""Recognition 모듈

사용법:
    from src.services.recognition import get_recognition

    recognizer = get_recognition()
    elements = await recognizer.recognize(image_bytes, min_confidence)

백엔드 선택 (.env RECOGNITION_PROVIDER):
    - "gemini": Google Gemini API (기본값)
    - "hf_space": HuggingFace Space OCR API
    - "mock": 개발용 샘플 데이터
"""

from src.config import get_settings
from src.services.recognition.base import RecognitionError, Recognizer
from src.services.recognition.gemini import GeminiRecognition
from src.services.recognition.geometry import normalize_polygon

__all__ = [
    "Recognizer",
    "RecognitionError",
    "get_recognition",
    "normalize_polygon",
    "set_recognition",
]

_recognizer: Recognizer | None = None


def get_recognition() -> Recognizer:
    """설정에 따라 recognition 백엔드 반환"""
    global _recognizer
    if _recognizer is None:
        settings = get_settings()
        if settings.recognition_provider == "gemini":
            _recognizer = GeminiRecognition(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
            )
        elif settings.recognition_provider == "hf_space":
            from src.services.recognition.hf_space import HFSpaceRecognition

            _recognizer = HFSpaceRecognition(
                space_url=settings.hf_space_url,
                api_timeout=settings.hf_api_timeout,
            )
        elif settings.recognition_provider == "mock":
            from src.services.recognition.mock import MockRecognition

            _recognizer = MockRecognition()
        else:
            raise ValueError(f"Unknown recognition provider: {settings.recognition_provider!r}")
    return _recognizer


def set_recognition(recognizer: Recognizer | None) -> None:
    """recognition 백엔드 설정 (테스트용)"""
    global _recognizer
    _recognizer = recognizer
