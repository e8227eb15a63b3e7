"""Overlay Protocol

번역 텍스트를 원본 이미지 위에 렌더링하는 구현을 위한 인터페이스 정의.
"""

from typing import Protocol

from src.schemas.pipeline import TextElement


class OverlayError(Exception):
    pass


class Overlay(Protocol):
    """오버레이 렌더링 인터페이스

    구현체:
    - PillowOverlay: Pillow 기반 렌더링 (기본값)
    - PassthroughOverlay: 원본 이미지 그대로 반환 (개발용)
    """

    def render(self, image: bytes, elements: list[TextElement]) -> bytes:
        """각 요소의 박스를 지우고 번역 텍스트를 그림

        Args:
            image: 인코딩된 원본 이미지
            elements: translated_text가 채워진 텍스트 요소

        Returns:
            원본과 같은 크기, 같은 포맷으로 인코딩된 이미지

        Raises:
            OverlayError: 이미지 디코딩/인코딩 실패 시
        """
        ...


class PassthroughOverlay:
    """렌더링 없이 원본 이미지를 반환"""

    def render(self, image: bytes, elements: list[TextElement]) -> bytes:
        return image
