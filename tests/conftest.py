import base64
from collections.abc import Generator
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from src.main import app
from src.services.overlay import set_overlay
from src.services.recognition import set_recognition
from src.services.translation import set_translation


def make_test_image(
    width: int = 200, height: int = 100, color: str = "blue", fmt: str = "PNG"
) -> bytes:
    """테스트용 실제 이미지 바이트 생성"""
    img = Image.new("RGB", (width, height), color=color)
    buf = BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def load_image(data: bytes) -> Image.Image:
    with Image.open(BytesIO(data)) as img:
        return img.convert("RGB")


@pytest.fixture
def test_image() -> bytes:
    """200x100 파란색 PNG"""
    return make_test_image()


@pytest.fixture
def test_image_b64(test_image: bytes) -> str:
    return base64.b64encode(test_image).decode()


@pytest.fixture
def reset_backends() -> Generator[None, None, None]:
    set_recognition(None)
    set_translation(None)
    set_overlay(None)
    yield
    set_recognition(None)
    set_translation(None)
    set_overlay(None)


@pytest.fixture
def client(reset_backends: None) -> Generator[TestClient, None, None]:
    yield TestClient(app)
