"""Recognition 팩토리 테스트"""

from unittest.mock import patch

import pytest

from src.schemas.pipeline import TextElement
from src.services.recognition import get_recognition, set_recognition
from src.services.recognition.gemini import GeminiRecognition
from src.services.recognition.hf_space import HFSpaceRecognition
from src.services.recognition.mock import MockRecognition


class TestGetRecognition:
    def setup_method(self) -> None:
        set_recognition(None)

    def teardown_method(self) -> None:
        set_recognition(None)

    def test_default_returns_gemini(self) -> None:
        recognizer = get_recognition()
        assert isinstance(recognizer, GeminiRecognition)

    def test_get_recognition_returns_cached_instance(self) -> None:
        assert get_recognition() is get_recognition()

    def test_set_recognition_overrides_factory(self) -> None:
        mock = FakeRecognizer()
        set_recognition(mock)
        assert get_recognition() is mock

    def test_set_recognition_none_resets(self) -> None:
        set_recognition(FakeRecognizer())
        set_recognition(None)

        assert isinstance(get_recognition(), GeminiRecognition)

    @pytest.mark.parametrize(
        ("provider", "expected"),
        [("hf_space", HFSpaceRecognition), ("mock", MockRecognition)],
    )
    def test_provider_selection(self, provider: str, expected: type) -> None:
        with patch("src.services.recognition.get_settings") as mock_settings:
            mock_settings.return_value.recognition_provider = provider
            mock_settings.return_value.hf_space_url = "test/space"
            mock_settings.return_value.hf_api_timeout = 10
            assert isinstance(get_recognition(), expected)

    def test_unknown_provider_raises(self) -> None:
        with patch("src.services.recognition.get_settings") as mock_settings:
            mock_settings.return_value.recognition_provider = "unknown"
            with pytest.raises(ValueError, match="Unknown recognition provider"):
                get_recognition()


class FakeRecognizer:
    async def recognize(self, image: bytes, min_confidence: float) -> list[TextElement]:
        return []
