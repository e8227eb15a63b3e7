from typing import Literal

PipelineStatus = Literal["success", "warning", "error"]


class Status:
    SUCCESS: PipelineStatus = "success"
    WARNING: PipelineStatus = "warning"
    ERROR: PipelineStatus = "error"


class Messages:
    NO_TEXT_DETECTED = "No text detected in the image"
    ERROR_PREFIX = "Error processing image"


class FontFit:
    MIN_SIZE = 6  # 가독성 하한 (박스를 넘치더라도 유지)
    BASE_SIZE = 12
    MAX_SIZE = 72
    UPPER_HEIGHT_RATIO = 0.8  # 상한 = min(max, box_h * 0.8)
    FIT_HEIGHT_RATIO = 0.9
    FIT_WIDTH_RATIO = 0.95


# 자연어 텍스트에 등장할 가능성이 거의 없는 구분자
SEGMENT_DELIMITER = "|||SEGMENT_DELIMITER|||"
