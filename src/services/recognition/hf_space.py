"""HuggingFace Space OCR 구현체"""

# pyright: reportMissingTypeStubs=false

import asyncio
import io
import logging
import tempfile
import time
from typing import Any

from gradio_client import Client, handle_file
from PIL import Image
from pydantic import BaseModel, ValidationError

from src.schemas.pipeline import TextElement
from src.services.recognition.base import RecognitionError
from src.services.recognition.geometry import normalize_polygon

logger = logging.getLogger(__name__)


class ImageSize(BaseModel):
    width: int
    height: int


class OcrLine(BaseModel):
    text: str
    confidence: float
    polygon: list[float]  # [x1, y1, x2, y2, ...] 페이지 상대 좌표


class OcrResult(BaseModel):
    """Space 응답 스키마

    polygon 좌표는 image_size 기준 0~1 상대값.
    """

    image_size: ImageSize
    lines: list[OcrLine]


class HFSpaceRecognition:
    """HuggingFace Space API를 사용한 텍스트 인식

    Note: HF Space는 슬립 상태일 수 있음. 첫 호출 시 웜업 필요.
    """

    def __init__(self, space_url: str, api_timeout: int = 120, max_retries: int = 3) -> None:
        self._space_url = space_url
        self._api_timeout = api_timeout
        self._max_retries = max_retries

    async def recognize(self, image: bytes, min_confidence: float) -> list[TextElement]:
        """이미지에서 텍스트 라인 인식 (재시도 포함)

        Raises:
            RecognitionError: 이미지 디코딩 실패, API 호출 반복 실패,
                응답 스키마 불일치 (재시도 없이 즉시)
        """
        suffix = self._detect_suffix(image)
        result = await asyncio.to_thread(self._recognize_sync, image, suffix)
        elements = self._map_lines(result, min_confidence)

        logger.info(f"인식 완료: {len(elements)}/{len(result.lines)}개 라인")
        return elements

    def _detect_suffix(self, image: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image)) as img:
                return f".{(img.format or 'PNG').lower()}"
        except Exception as e:
            raise RecognitionError(f"이미지 디코딩 실패: {e}") from e

    def _map_lines(self, result: OcrResult, min_confidence: float) -> list[TextElement]:
        elements: list[TextElement] = []
        width, height = result.image_size.width, result.image_size.height

        for line in result.lines:
            if not line.text.strip() or line.confidence < min_confidence:
                continue
            try:
                elements.append(
                    TextElement(
                        original_text=line.text,
                        confidence=line.confidence,
                        bounding_box=normalize_polygon(line.polygon, width, height),
                    )
                )
            except ValidationError as e:
                logger.warning(f"인식 결과 파싱 실패: {line} - {e}")

        return elements

    def _recognize_sync(self, image: bytes, suffix: str) -> OcrResult:
        client = Client(self._space_url, httpx_kwargs={"timeout": self._api_timeout})

        with tempfile.NamedTemporaryFile(suffix=suffix) as tmp:
            tmp.write(image)
            tmp.flush()
            raw = self._call_with_retry(client, tmp.name)

        try:
            return OcrResult.model_validate(raw)
        except ValidationError as e:
            raise RecognitionError(f"OCR 응답 스키마 불일치: {e}") from e

    def _call_with_retry(self, client: Client, image_path: str) -> Any:
        last_error: Exception | None = None
        for attempt in range(1 + self._max_retries):
            try:
                return client.predict(handle_file(image_path), api_name="/recognize")
            except Exception as e:
                last_error = e
                if attempt < self._max_retries:
                    logger.warning(f"OCR API 호출 실패, 재시도 {attempt + 1}/{self._max_retries}: {e}")
                    time.sleep(2**attempt)

        raise RecognitionError(f"OCR API 호출 실패: {last_error}") from last_error
