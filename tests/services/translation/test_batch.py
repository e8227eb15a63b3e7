"""BatchTranslator 테스트"""

import pytest

from src.constants import SEGMENT_DELIMITER
from src.services.translation.base import TranslationError
from src.services.translation.batch import BatchTranslator, split_segments


class FakeBackend:
    """입력을 대문자로 바꾸는 번역기 (호출 기록)"""

    def __init__(self) -> None:
        self.text_calls: list[str] = []
        self.segment_calls: list[str] = []

    async def translate_text(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        self.text_calls.append(text)
        return text.upper()

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        self.segment_calls.append(joined)
        return delimiter.join(s.upper() for s in joined.split(delimiter))


class MergingBackend(FakeBackend):
    """배치 응답에서 구분자를 하나 빠뜨림"""

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        self.segment_calls.append(joined)
        segments = [s.upper() for s in joined.split(delimiter)]
        return " ".join(segments[:2]) + delimiter + delimiter.join(segments[2:])


class FailingBackend(FakeBackend):
    async def translate_text(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> str:
        raise ConnectionError("backend down")

    async def translate_segments(
        self,
        joined: str,
        delimiter: str,
        target_language: str,
        source_language: str | None = None,
    ) -> str:
        raise TranslationError("quota exceeded")


class TestSplitSegments:
    def test_strips_whitespace(self) -> None:
        translated = f" a \n{SEGMENT_DELIMITER}\nb {SEGMENT_DELIMITER}c"
        assert split_segments(translated) == ["a", "b", "c"]

    def test_trailing_delimiter_adds_empty_segment(self) -> None:
        assert split_segments(f"a{SEGMENT_DELIMITER}") == ["a", ""]


class TestTranslateMany:
    async def test_empty_input_skips_backend(self) -> None:
        backend = FakeBackend()
        result = await BatchTranslator(backend).translate_many([], "fr")

        assert result == []
        assert backend.text_calls == []
        assert backend.segment_calls == []

    async def test_single_input_uses_single_call(self) -> None:
        backend = FakeBackend()
        result = await BatchTranslator(backend).translate_many(["hello"], "fr")

        assert result == ["HELLO"]
        assert backend.text_calls == ["hello"]
        assert backend.segment_calls == []

    async def test_multiple_inputs_use_one_batch_call(self) -> None:
        backend = FakeBackend()
        result = await BatchTranslator(backend).translate_many(["a", "b", "c"], "fr")

        assert result == ["A", "B", "C"]
        assert backend.segment_calls == [SEGMENT_DELIMITER.join(["a", "b", "c"])]
        assert backend.text_calls == []

    @pytest.mark.parametrize("count", [0, 1, 2, 5, 12])
    async def test_length_preserved(self, count: int) -> None:
        texts = [f"text {i}" for i in range(count)]
        result = await BatchTranslator(FakeBackend()).translate_many(texts, "fr")

        assert result == [t.upper() for t in texts]

    async def test_segment_mismatch_falls_back_to_individual(self) -> None:
        backend = MergingBackend()
        result = await BatchTranslator(backend).translate_many(["one", "two", "three"], "fr")

        assert result == ["ONE", "TWO", "THREE"]
        assert len(backend.segment_calls) == 1
        assert backend.text_calls == ["one", "two", "three"]

    async def test_batch_error_propagates(self) -> None:
        with pytest.raises(TranslationError, match="quota exceeded"):
            await BatchTranslator(FailingBackend()).translate_many(["a", "b"], "fr")

    async def test_single_error_wrapped(self) -> None:
        with pytest.raises(TranslationError, match="backend down"):
            await BatchTranslator(FailingBackend()).translate_many(["a"], "fr")

    async def test_passes_languages(self) -> None:
        class RecordingBackend(FakeBackend):
            languages: tuple[str, str | None] | None = None

            async def translate_text(
                self, text: str, target_language: str, source_language: str | None = None
            ) -> str:
                self.languages = (target_language, source_language)
                return text

        backend = RecordingBackend()
        await BatchTranslator(backend).translate_one("hi", "de", "en")

        assert backend.languages == ("de", "en")
