"""인식기 좌표 → 픽셀 바운딩 박스 정규화 (순수 함수)"""

import math
from collections.abc import Sequence

from src.schemas.pipeline import BoundingBox

GEMINI_BOX_SCALE = 1000


def normalize_polygon(
    polygon: Sequence[float],
    page_width: float | None = None,
    page_height: float | None = None,
) -> BoundingBox:
    """페이지 상대 좌표 폴리곤을 축 정렬 픽셀 사각형으로 변환

    회전 정보는 버리고 모든 점을 감싸는 사각형만 계산.
    width/height가 0 이하로 떨어지면 좌상단을 유지한 채 1px로 클램핑.
    예외를 던지지 않음.

    Args:
        polygon: [x1, y1, x2, y2, ...] 평탄화된 좌표 (짝이 없는 마지막 값은 무시)
        page_width: 페이지 너비 (None이면 1.0)
        page_height: 페이지 높이 (None이면 1.0)
    """
    xs = list(polygon[0 : len(polygon) - 1 : 2])
    ys = list(polygon[1::2])[: len(xs)]

    if not xs:
        return BoundingBox(x=0, y=0, width=1, height=1)

    scale_x = page_width if page_width is not None else 1.0
    scale_y = page_height if page_height is not None else 1.0

    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    return BoundingBox(
        x=math.floor(min_x * scale_x),
        y=math.floor(min_y * scale_y),
        width=max(1, math.floor((max_x - min_x) * scale_x)),
        height=max(1, math.floor((max_y - min_y) * scale_y)),
    )


def box_2d_to_polygon(box_2d: Sequence[float], scale: float = GEMINI_BOX_SCALE) -> list[float]:
    """Gemini box_2d [ymin, xmin, ymax, xmax] (0~scale) → 페이지 상대 폴리곤

    Raises:
        ValueError: 좌표 개수가 4개가 아닌 경우
    """
    if len(box_2d) != 4:
        raise ValueError(f"box_2d requires 4 coordinates, got {len(box_2d)}")

    y_min, x_min, y_max, x_max = (c / scale for c in box_2d)
    return [x_min, y_min, x_max, y_min, x_max, y_max, x_min, y_max]
