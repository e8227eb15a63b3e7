"""개발용 Mock 인식 구현체"""

import io
import logging
import random

from PIL import Image

from src.schemas.pipeline import BoundingBox, TextElement
from src.services.recognition.base import RecognitionError

logger = logging.getLogger(__name__)

SAMPLE_TEXTS = [
    "Hello world",
    "This is a test",
    "Screenshot translation",
    "Image processing",
    "REST API",
]


class MockRecognition:
    """이미지 안의 임의 위치에 샘플 문구를 배치 (3~7개, 신뢰도 0.7~1.0)"""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed

    async def recognize(self, image: bytes, min_confidence: float) -> list[TextElement]:
        try:
            with Image.open(io.BytesIO(image)) as img:
                width, height = img.size
        except Exception as e:
            raise RecognitionError(f"이미지 디코딩 실패: {e}") from e

        rng = random.Random(self._seed)
        elements: list[TextElement] = []

        for _ in range(rng.randint(3, 7)):
            box_width = min(width, rng.randint(100, 300))
            box_height = min(height, rng.randint(20, 50))
            element = TextElement(
                original_text=rng.choice(SAMPLE_TEXTS),
                confidence=rng.uniform(0.7, 1.0),
                bounding_box=BoundingBox(
                    x=rng.randint(0, width - box_width),
                    y=rng.randint(0, height - box_height),
                    width=box_width,
                    height=box_height,
                ),
            )
            if element.confidence >= min_confidence:
                elements.append(element)

        logger.info(f"Mock 인식: {len(elements)}개 라인")
        return elements
