"""Unit tests for the repetition generator."""

import asyncio
import math

import pytest

from repeater.config import settings
from repeater.core.exceptions import GenerationCancelledError
from repeater.core.generator import RepetitionGenerator, generate, percent_of
from repeater.models.generation import GenerationOptions, GenerationRequest


def reference_generate(base_text: str, repetitions: int, options: GenerationOptions) -> str:
    """Single-pass join of every occurrence, no batching."""
    if not base_text or repetitions <= 0:
        return ""

    text = base_text
    if options.add_period and not text.endswith("."):
        text += "."

    separator = ("\n" if options.add_new_line else "") + (" " if options.add_space else "")

    occurrences = []
    for i in range(1, repetitions + 1):
        if options.add_numbers:
            occurrences.append(f"{i}. {text}")
        elif options.add_percentages:
            occurrences.append(f"{math.floor(i / repetitions * 100 + 0.5)}% {text}")
        else:
            occurrences.append(text)
    return separator.join(occurrences)


OPTION_SETS = [
    GenerationOptions(),
    GenerationOptions(add_space=True),
    GenerationOptions(add_new_line=True),
    GenerationOptions(add_new_line=True, add_space=True, add_period=True),
    GenerationOptions(add_numbers=True),
    GenerationOptions(add_numbers=True, add_new_line=True),
    GenerationOptions(add_percentages=True, add_space=True),
    GenerationOptions(add_numbers=True, add_percentages=True, add_space=True),
]


class TestDegenerateInput:
    """Empty text and non-positive counts give empty output."""

    def test_zero_repetitions(self):
        assert generate("hello", 0) == ""

    def test_negative_repetitions(self):
        assert generate("hello", -5, GenerationOptions(add_numbers=True)) == ""

    def test_empty_base_text(self):
        assert generate("", 10, GenerationOptions(add_space=True)) == ""

    def test_empty_result_keeps_separator(self):
        generator = RepetitionGenerator()
        result = generator.generate(
            GenerationRequest(
                base_text="",
                repetitions=3,
                options=GenerationOptions(add_new_line=True),
            )
        )

        assert result.repeated_text == ""
        assert result.is_empty
        assert result.separator == "\n"


class TestRepetitionRules:
    """Tests for joiners, enumerators and the period rule."""

    def test_plain_concatenation(self):
        assert generate("ab", 5) == "ab" * 5

    def test_newline_separator(self):
        options = GenerationOptions(add_new_line=True)
        assert generate("line", 4, options) == "\n".join(["line"] * 4)

    def test_space_separator(self):
        assert generate("Hi", 3, GenerationOptions(add_space=True)) == "Hi Hi Hi"

    def test_newline_then_space(self):
        options = GenerationOptions(add_new_line=True, add_space=True)
        assert generate("x", 3, options) == "x\n x\n x"

    def test_numbers_without_separator(self):
        options = GenerationOptions(add_numbers=True)
        assert generate("hi", 3, options) == "1. hi2. hi3. hi"

    def test_percentages(self):
        options = GenerationOptions(add_percentages=True, add_new_line=True)
        output = generate("go", 4, options)

        assert output.split("\n") == ["25% go", "50% go", "75% go", "100% go"]

    def test_percentages_round_half_up(self):
        options = GenerationOptions(add_percentages=True, add_space=True)
        output = generate("x", 8, options)
        percents = [part for part in output.split(" ") if part.endswith("%")]

        # 12.5 and 37.5 round up, unlike banker's rounding
        assert percents[:3] == ["13%", "25%", "38%"]
        assert percents[-1] == "100%"

    def test_percent_of(self):
        assert percent_of(1, 3) == 33
        assert percent_of(2, 3) == 67
        assert percent_of(1, 8) == 13
        assert percent_of(5, 5) == 100

    def test_numbers_take_precedence(self):
        options = GenerationOptions(add_numbers=True, add_percentages=True, add_space=True)
        assert generate("a", 2, options) == "1. a 2. a"

    def test_period_appended(self):
        options = GenerationOptions(add_period=True, add_space=True)
        assert generate("Hello", 2, options) == "Hello. Hello."

    def test_period_not_doubled(self):
        options = GenerationOptions(add_period=True)
        assert generate("Done.", 3, options) == "Done.Done.Done."

    def test_single_repetition(self):
        options = GenerationOptions(add_numbers=True, add_new_line=True)
        assert generate("only", 1, options) == "1. only"


class TestChunking:
    """Batched construction must not change the output."""

    @pytest.mark.parametrize("repetitions", [999, 1000, 1001, 2500])
    @pytest.mark.parametrize("options", OPTION_SETS)
    def test_matches_reference(self, repetitions: int, options: GenerationOptions):
        assert generate("ab c", repetitions, options) == reference_generate(
            "ab c", repetitions, options
        )

    def test_numbering_continues_across_batches(self):
        options = GenerationOptions(add_numbers=True, add_new_line=True)
        lines = generate("n", 2500, options).split("\n")

        assert len(lines) == 2500
        assert lines[999] == "1000. n"
        assert lines[1000] == "1001. n"
        assert lines[-1] == "2500. n"

    def test_single_separator_between_batches(self):
        output = generate("w", 2001, GenerationOptions(add_space=True))

        assert "  " not in output
        assert output.count(" ") == 2000

    def test_small_chunk_size(self):
        generator = RepetitionGenerator(chunk_size=3)
        options = GenerationOptions(add_percentages=True, add_space=True)
        result = generator.generate(
            GenerationRequest(base_text="q", repetitions=7, options=options)
        )

        assert result.repeated_text == reference_generate("q", 7, options)

    def test_iter_chunks_yields_batches_and_separators(self):
        generator = RepetitionGenerator(chunk_size=2)
        request = GenerationRequest(
            base_text="a",
            repetitions=5,
            options=GenerationOptions(add_new_line=True),
        )

        assert list(generator.iter_chunks(request)) == ["a\na", "\n", "a\na", "\n", "a"]

    def test_iter_chunks_fast_path_is_one_piece(self):
        generator = RepetitionGenerator(chunk_size=2)
        request = GenerationRequest(base_text="ab", repetitions=5)

        assert list(generator.iter_chunks(request)) == ["ab" * 5]

    def test_is_chunked(self):
        generator = RepetitionGenerator(chunk_size=1000)

        assert not generator.is_chunked(1000)
        assert generator.is_chunked(1001)

    @pytest.mark.parametrize("chunk_size", [0, -3])
    def test_rejects_chunk_size_below_one(self, chunk_size: int):
        with pytest.raises(ValueError, match="chunk_size"):
            RepetitionGenerator(chunk_size=chunk_size)

    def test_default_chunk_size_from_settings(self):
        assert RepetitionGenerator().chunk_size == settings.chunk_size
        assert RepetitionGenerator(chunk_size=None).chunk_size == settings.chunk_size


class TestRepetitionValidation:
    """Repetition counts must be real integers."""

    @pytest.mark.parametrize("value", [2.5, 2.0, float("nan"), True, "3", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            GenerationRequest(base_text="a", repetitions=value)

    def test_generate_rejects_float(self):
        with pytest.raises(ValueError):
            generate("a", 1.5)

    def test_accepts_negative_integer(self):
        request = GenerationRequest(base_text="a", repetitions=-1)
        assert request.repetitions == -1


class TestAsyncGeneration:
    """Tests for the cooperative async wrapper."""

    @pytest.mark.asyncio
    async def test_agenerate_matches_generate(self):
        generator = RepetitionGenerator(chunk_size=10)
        request = GenerationRequest(
            base_text="hey",
            repetitions=35,
            options=GenerationOptions(add_numbers=True, add_space=True),
        )

        result = await generator.agenerate(request)

        assert result.repeated_text == generator.generate(request).repeated_text
        assert result.repetitions == 35
        assert result.separator == " "

    @pytest.mark.asyncio
    async def test_agenerate_degenerate(self):
        generator = RepetitionGenerator()
        result = await generator.agenerate(GenerationRequest(base_text="x", repetitions=0))

        assert result.repeated_text == ""

    @pytest.mark.asyncio
    async def test_cancelled_before_start(self):
        generator = RepetitionGenerator(chunk_size=10)
        cancel = asyncio.Event()
        cancel.set()

        with pytest.raises(GenerationCancelledError) as exc_info:
            await generator.agenerate(
                GenerationRequest(base_text="x", repetitions=50), cancel
            )

        assert exc_info.value.produced == 0
        assert exc_info.value.repetitions == 50
        assert exc_info.value.details == {"produced": 0, "repetitions": 50}
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_cancelled_between_batches(self):
        generator = RepetitionGenerator(chunk_size=10)
        cancel = asyncio.Event()
        request = GenerationRequest(
            base_text="x",
            repetitions=1000,
            options=GenerationOptions(add_space=True),
        )

        async def cancel_soon() -> None:
            await asyncio.sleep(0)
            cancel.set()

        canceller = asyncio.create_task(cancel_soon())
        with pytest.raises(GenerationCancelledError) as exc_info:
            await generator.agenerate(request, cancel)
        await canceller

        assert 0 < exc_info.value.produced < 1000
