"""Pillow 기반 오버레이 렌더링

박스마다 배경을 흰색으로 덮고, 박스 너비에 맞춰 줄바꿈한 번역 텍스트를
좌상단 정렬로 그림. 폰트 크기는 작은 값부터 1pt씩 키우며 박스를 넘기 직전 크기를 선택.
"""

import io
import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from src.constants import FontFit
from src.schemas.pipeline import BoundingBox, TextElement
from src.services.overlay.base import OverlayError

logger = logging.getLogger(__name__)

FONT_PATHS = [
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

LINE_SPACING = 2
DRAWABLE_MODES = ("RGB", "RGBA", "L")
BACKGROUND_COLOR = "white"
TEXT_COLOR = "black"

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont
MeasureFunc = Callable[[str, int, int], tuple[float, float]]


@lru_cache(maxsize=128)
def _get_font(size: int) -> Font:
    for font_path in FONT_PATHS:
        if Path(font_path).exists():
            try:
                return ImageFont.truetype(font_path, size)
            except OSError:
                continue
    return ImageFont.load_default(size=size)


def _split_long_word(word: str, max_width: float, font: Font) -> list[str]:
    """글자 단위 강제 줄바꿈 (박스보다 긴 단어용)"""
    pieces: list[str] = []
    current = ""

    for char in word:
        test = current + char
        if current and font.getlength(test) > max_width:
            pieces.append(current)
            current = char
        else:
            current = test

    if current:
        pieces.append(current)

    return pieces


def wrap_text(text: str, max_width: float, font: Font) -> list[str]:
    """단어 단위로 max_width에 맞춰 줄바꿈 (기존 개행 유지)"""
    lines: list[str] = []

    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if font.getlength(candidate) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
            if font.getlength(word) <= max_width:
                current = word
            else:
                *full, current = _split_long_word(word, max_width, font)
                lines.extend(full)
        lines.append(current)

    return lines


def measure_text(text: str, font_size: int, box_width: int) -> tuple[float, float]:
    """box_width로 줄바꿈했을 때 텍스트 블록의 (너비, 높이)"""
    font = _get_font(font_size)
    lines = wrap_text(text, box_width, font)
    draw = ImageDraw.Draw(Image.new("L", (1, 1)))
    _, _, right, bottom = draw.multiline_textbbox(
        (0, 0), "\n".join(lines), font=font, spacing=LINE_SPACING
    )
    return right, bottom


def _fits_in_box(text_width: float, text_height: float, box_width: int, box_height: int) -> bool:
    """텍스트가 박스 안에 들어가는지 확인 (순수 함수, 테스트 용이)"""
    return (
        text_height <= box_height * FontFit.FIT_HEIGHT_RATIO
        and text_width <= box_width * FontFit.FIT_WIDTH_RATIO
    )


def fit_font_size(
    text: str,
    box_width: int,
    box_height: int,
    max_font_size: int = FontFit.MAX_SIZE,
    measure: MeasureFunc = measure_text,
) -> int:
    """박스에 들어가는 가장 큰 폰트 크기 (선형 탐색)

    상한은 min(max_font_size, box_height * 0.8). 상한이 최소 크기보다 작으면
    최소 크기를 바로 반환 (넘치더라도 사라지지는 않도록).
    """
    upper = min(max_font_size, box_height * FontFit.UPPER_HEIGHT_RATIO)
    if upper < FontFit.MIN_SIZE:
        return FontFit.MIN_SIZE

    size = min(FontFit.BASE_SIZE, int(upper))
    while size + 1 <= upper:
        text_width, text_height = measure(text, size + 1, box_width)
        if not _fits_in_box(text_width, text_height, box_width, box_height):
            break
        size += 1

    return max(FontFit.MIN_SIZE, size)


class PillowOverlay:
    """Pillow로 번역 텍스트를 원본 위치에 렌더링"""

    def __init__(self, max_font_size: int = FontFit.MAX_SIZE) -> None:
        self._max_font_size = max_font_size

    def render(self, image: bytes, elements: list[TextElement]) -> bytes:
        try:
            with Image.open(io.BytesIO(image)) as source:
                image_format = source.format or "PNG"
                if source.mode in DRAWABLE_MODES:
                    canvas = source.copy()
                else:
                    canvas = source.convert("RGB")
        except Exception as e:
            raise OverlayError(f"이미지 디코딩 실패: {e}") from e

        draw = ImageDraw.Draw(canvas)
        rendered = 0

        for element in elements:
            if not element.translated_text.strip():
                continue

            box = element.bounding_box
            if not box.is_valid() or not box.fits_within(canvas.width, canvas.height):
                logger.warning(
                    f"유효하지 않은 bbox 스킵: x={box.x}, y={box.y}, "
                    f"width={box.width}, height={box.height}"
                )
                continue

            self._draw_element(draw, element.translated_text, box)
            rendered += 1

        buffer = io.BytesIO()
        try:
            canvas.save(buffer, format=image_format)
        except Exception as e:
            raise OverlayError(f"이미지 인코딩 실패: {e}") from e

        logger.info(f"렌더링 완료: {rendered}/{len(elements)}개 영역")
        return buffer.getvalue()

    def _draw_element(self, draw: ImageDraw.ImageDraw, text: str, box: BoundingBox) -> None:
        font_size = fit_font_size(text, box.width, box.height, self._max_font_size)
        font = _get_font(font_size)
        lines = wrap_text(text, box.width, font)

        draw.rectangle(box.to_rect(), fill=BACKGROUND_COLOR)
        draw.multiline_text(
            (box.x, box.y),
            "\n".join(lines),
            font=font,
            fill=TEXT_COLOR,
            spacing=LINE_SPACING,
        )
