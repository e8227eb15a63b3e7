"""Gemini 기반 텍스트 인식 구현체"""

# pyright: reportMissingTypeStubs=false

import io
import json
import logging
from typing import Any, cast

from google import genai
from google.genai import types
from PIL import Image
from pydantic import BaseModel

from src.schemas.pipeline import TextElement
from src.services.recognition.base import RecognitionError
from src.services.recognition.geometry import box_2d_to_polygon, normalize_polygon

logger = logging.getLogger(__name__)

RECOGNIZE_PROMPT = """이미지는 화면을 캡처한 스크린샷입니다.
이미지에 보이는 모든 텍스트를 라인 단위로 추출해주세요.

규칙:
- 위에서 아래, 왼쪽에서 오른쪽 순서
- text: 라인의 텍스트 그대로 (번역하지 말 것)
- confidence: 인식 확신도 (0.0 ~ 1.0)
- box_2d: [ymin, xmin, ymax, xmax], 0~1000 정규화 좌표

JSON 배열로만 응답:
[{"text": "File", "confidence": 0.98, "box_2d": [12, 8, 40, 60]}, ...]"""


class RecognizedLine(BaseModel):
    """Gemini 인식 결과 (단일 라인)"""

    text: str
    confidence: float = 1.0
    box_2d: list[float]


class GeminiRecognition:
    """Google Gemini API를 사용한 텍스트 인식"""

    def __init__(self, api_key: str, model: str) -> None:
        self._api_key = api_key
        self._model = model

    async def recognize(self, image: bytes, min_confidence: float) -> list[TextElement]:
        """이미지 전체를 한 번의 API 호출로 인식

        Raises:
            RecognitionError: API 키 누락, 이미지 디코딩 실패, 빈 응답, 파싱 실패 등
        """
        if not self._api_key:
            raise RecognitionError("GEMINI_API_KEY가 설정되지 않았습니다")

        width, height, mime_type = self._inspect_image(image)
        client = genai.Client(api_key=self._api_key)
        part = types.Part.from_bytes(data=image, mime_type=mime_type)

        raw_lines = await self._call_gemini(client, part)
        elements = self._map_lines(raw_lines, width, height, min_confidence)

        logger.info(f"인식 완료: {len(elements)}/{len(raw_lines)}개 라인")
        return elements

    def _inspect_image(self, image: bytes) -> tuple[int, int, str]:
        try:
            with Image.open(io.BytesIO(image)) as img:
                mime_type = Image.MIME.get(img.format or "PNG", "image/png")
                return img.width, img.height, mime_type
        except Exception as e:
            raise RecognitionError(f"이미지 디코딩 실패: {e}") from e

    async def _call_gemini(self, client: genai.Client, part: types.Part) -> list[dict[str, Any]]:
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=[RECOGNIZE_PROMPT, part],
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )

        if not response.text:
            raise RecognitionError("빈 응답")

        try:
            raw_lines = json.loads(response.text)
        except json.JSONDecodeError as e:
            raise RecognitionError(f"JSON 파싱 실패: {e}") from e

        if not isinstance(raw_lines, list):
            raise RecognitionError(f"응답이 리스트가 아님: {type(raw_lines).__name__}")

        return cast(list[dict[str, Any]], raw_lines)

    def _map_lines(
        self,
        raw_lines: list[dict[str, Any]],
        width: int,
        height: int,
        min_confidence: float,
    ) -> list[TextElement]:
        elements: list[TextElement] = []

        for item in raw_lines:
            try:
                line = RecognizedLine.model_validate(item)
                if not line.text.strip() or line.confidence < min_confidence:
                    continue

                polygon = box_2d_to_polygon(line.box_2d)
                elements.append(
                    TextElement(
                        original_text=line.text,
                        confidence=line.confidence,
                        bounding_box=normalize_polygon(polygon, width, height),
                    )
                )
            except Exception as e:
                logger.warning(f"인식 결과 파싱 실패: {item} - {e}")

        return elements
