"""이미지 번역 파이프라인

Recognition → Translation → Overlay 순서로 실행.
각 단계는 Protocol 기반 모듈을 팩토리에서 가져옴.

단계 실패는 예외로 새어 나가지 않고 항상 status="error" 결과로 반환되며,
그때까지 누적된 TranslationDetails(단계별 시간 포함)를 함께 담음.
"""

import asyncio
import base64
import logging
import time

from src.constants import Messages, Status
from src.schemas.pipeline import PipelineResult, TextElement, TranslationDetails, TranslationRequest
from src.services.overlay import Overlay, get_overlay
from src.services.recognition import Recognizer, get_recognition
from src.services.translation import Translator, get_translation

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return round((time.perf_counter() - started) * 1000)


def _encode_image(image: bytes) -> str:
    return base64.b64encode(image).decode()


def _with_metrics(details: TranslationDetails, **metrics: int) -> TranslationDetails:
    """metrics 일부를 갱신한 새 details 반환"""
    return details.model_copy(update={"metrics": details.metrics.model_copy(update=metrics)})


class TranslationPipeline:
    """요청 1건을 처리하는 오케스트레이터 (요청마다 새로 생성, 상태 없음)"""

    def __init__(self, recognizer: Recognizer, translator: Translator, overlay: Overlay) -> None:
        self._recognizer = recognizer
        self._translator = translator
        self._overlay = overlay

    async def run(self, request: TranslationRequest) -> PipelineResult:
        """이미지를 번역하여 결과 반환

        Returns:
            PipelineResult: success / warning(텍스트 없음) / error(단계 실패)
        """
        started = time.perf_counter()
        details = TranslationDetails(target_language=request.target_language)
        logger.info("이미지 번역 시작")

        try:
            # 1. Recognition
            elements, details = await self._recognize(request, details)
            if not elements:
                return PipelineResult(
                    status=Status.WARNING,
                    translated_text="",
                    image_with_overlay=_encode_image(request.image),
                    message=Messages.NO_TEXT_DETECTED,
                    details=_with_metrics(details, total_processing_time_ms=_elapsed_ms(started)),
                )

            # 2. Translation
            elements, details = await self._translate(request, elements, details)

            # 3. Overlay
            rendered, details = await self._render(request.image, elements, details)
        except Exception as e:
            logger.exception("이미지 번역 실패")
            return PipelineResult(
                status=Status.ERROR,
                message=f"{Messages.ERROR_PREFIX}: {e}",
                details=_with_metrics(details, total_processing_time_ms=_elapsed_ms(started)),
            )

        details = details.model_copy(update={"elements": elements})
        return PipelineResult(
            status=Status.SUCCESS,
            translated_text="\n".join(e.translated_text for e in elements),
            image_with_overlay=_encode_image(rendered),
            details=_with_metrics(details, total_processing_time_ms=_elapsed_ms(started)),
        )

    async def _recognize(
        self, request: TranslationRequest, details: TranslationDetails
    ) -> tuple[list[TextElement], TranslationDetails]:
        started = time.perf_counter()
        elements = await self._recognizer.recognize(
            request.image, request.effective_min_confidence
        )
        logger.info(f"Recognition 완료: {len(elements)}개 텍스트")

        details = details.model_copy(
            update={
                "detected_element_count": len(elements),
                "processed_element_count": len(elements),
            }
        )
        return elements, _with_metrics(details, recognition_time_ms=_elapsed_ms(started))

    async def _translate(
        self,
        request: TranslationRequest,
        elements: list[TextElement],
        details: TranslationDetails,
    ) -> tuple[list[TextElement], TranslationDetails]:
        started = time.perf_counter()
        translations = await self._translator.translate_many(
            [e.original_text for e in elements],
            request.target_language,
            request.source_language,
        )
        logger.info(f"번역 결과: {len(translations)}/{len(elements)}개")

        # 길이가 어긋나도 IndexError 없이 앞에서부터 채움
        for element, translation in zip(elements, translations):
            element.translated_text = translation

        return elements, _with_metrics(details, translation_time_ms=_elapsed_ms(started))

    async def _render(
        self, image: bytes, elements: list[TextElement], details: TranslationDetails
    ) -> tuple[bytes, TranslationDetails]:
        started = time.perf_counter()
        rendered = await asyncio.to_thread(self._overlay.render, image, elements)
        logger.info("Overlay 완료")
        return rendered, _with_metrics(details, overlay_time_ms=_elapsed_ms(started))


def build_pipeline() -> TranslationPipeline:
    """설정된 백엔드로 새 파이프라인 생성"""
    return TranslationPipeline(
        recognizer=get_recognition(),
        translator=get_translation(),
        overlay=get_overlay(),
    )
