"""Overlay 모듈

사용법:
    from src.services.overlay import get_overlay

    overlay = get_overlay()
    rendered = overlay.render(image_bytes, elements)

백엔드 선택 (.env OVERLAY_PROVIDER):
    - "pillow": Pillow 렌더링 (기본값)
    - "passthrough": 원본 이미지 그대로 반환
"""

from src.config import get_settings
from src.services.overlay.base import Overlay, OverlayError, PassthroughOverlay
from src.services.overlay.pillow import PillowOverlay, fit_font_size

__all__ = [
    "Overlay",
    "OverlayError",
    "PillowOverlay",
    "fit_font_size",
    "get_overlay",
    "set_overlay",
]

_overlay: Overlay | None = None


def get_overlay() -> Overlay:
    """설정에 따라 overlay 백엔드 반환"""
    global _overlay
    if _overlay is None:
        settings = get_settings()
        if settings.overlay_provider == "pillow":
            _overlay = PillowOverlay(max_font_size=settings.max_font_size)
        elif settings.overlay_provider == "passthrough":
            _overlay = PassthroughOverlay()
        else:
            raise ValueError(f"Unknown overlay provider: {settings.overlay_provider!r}")
    return _overlay


def set_overlay(overlay: Overlay | None) -> None:
    """overlay 백엔드 설정 (테스트용)"""
    global _overlay
    _overlay = overlay
