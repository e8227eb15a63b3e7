"""Process Screenshot API 라우트

요청 검증 후 파이프라인을 실행하고 결과를 그대로 응답 본문으로 반환.
파이프라인 status="error"는 500, warning/success는 200.
"""

import base64
import binascii
import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from src.constants import Status
from src.schemas.pipeline import PipelineResult
from src.schemas.screenshot import ProcessScreenshotRequest
from src.services.pipeline import build_pipeline

router = APIRouter(tags=["process-screenshot"])
logger = logging.getLogger(__name__)


def _bad_request(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"code": code, "message": message},
    )


def _decode_image(image: str) -> bytes:
    try:
        return base64.b64decode(image, validate=True)
    except (binascii.Error, ValueError):
        raise _bad_request("INVALID_IMAGE", "이미지가 올바른 base64가 아닙니다") from None


@router.post("/process-screenshot", response_model=PipelineResult)
async def process_screenshot(request: ProcessScreenshotRequest) -> JSONResponse:
    """스크린샷 번역"""
    if not request.image or not request.image.strip():
        raise _bad_request("MISSING_IMAGE", "이미지가 필요합니다")

    if not request.target_language or not request.target_language.strip():
        raise _bad_request("MISSING_TARGET_LANGUAGE", "대상 언어가 필요합니다")

    image = _decode_image(request.image)
    translation_request = request.to_translation_request(image, request.target_language.strip())

    result = await build_pipeline().run(translation_request)

    status_code = status.HTTP_200_OK
    if result.status == Status.ERROR:
        logger.error(f"스크린샷 번역 실패: {result.message}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )
