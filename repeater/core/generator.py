"""Repetition generator.

Expands a base string into one long output string. Counts above the batch
size are built batch by batch, so at most ``chunk_size`` occurrences are
held in an intermediate list at any time. Batching never changes the output:
the result is byte-identical to joining every occurrence in one pass.
"""

import asyncio
import math
import time
from functools import lru_cache
from typing import Iterator

from repeater.config import settings
from repeater.core.exceptions import GenerationCancelledError
from repeater.models.generation import (
    GenerationOptions,
    GenerationRequest,
    GenerationResult,
)
from repeater.utils.logging import get_logger

logger = get_logger(__name__)

PERIOD = "."


def process_text(base_text: str, options: GenerationOptions) -> str:
    """Apply the period rule to the base text."""
    if options.add_period and not base_text.endswith(PERIOD):
        return base_text + PERIOD
    return base_text


def percent_of(index: int, total: int) -> int:
    """Percentage of ``index`` in ``total``, rounded half up."""
    return math.floor(index / total * 100 + 0.5)


def build_occurrences(
    text: str,
    options: GenerationOptions,
    first: int,
    last: int,
    total: int,
) -> list[str]:
    """Occurrences ``first`` through ``last`` (1-based, inclusive)."""
    if options.add_numbers:
        return [f"{i}. {text}" for i in range(first, last + 1)]
    if options.add_percentages:
        return [f"{percent_of(i, total)}% {text}" for i in range(first, last + 1)]
    return [text] * (last - first + 1)


class RepetitionGenerator:
    """Builds repeated text from a base string and formatting options."""

    def __init__(self, chunk_size: int | None = None):
        chunk_size = settings.chunk_size if chunk_size is None else chunk_size
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.chunk_size = chunk_size

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Materialize the full output for a request."""
        if not request.base_text or request.repetitions <= 0:
            logger.debug(
                "generation.skipped",
                repetitions=request.repetitions,
                has_text=bool(request.base_text),
            )
            return GenerationResult(separator=request.options.separator)

        start_time = time.perf_counter()
        repeated_text = "".join(self.iter_chunks(request))
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "generation.completed",
            repetitions=request.repetitions,
            chunked=self.is_chunked(request.repetitions),
            length=len(repeated_text),
            duration_ms=round(duration_ms, 2),
        )

        return GenerationResult(
            repeated_text=repeated_text,
            repetitions=request.repetitions,
            separator=request.options.separator,
        )

    async def agenerate(
        self,
        request: GenerationRequest,
        cancel_event: asyncio.Event | None = None,
    ) -> GenerationResult:
        """Generate while yielding to the event loop between batches.

        Raises GenerationCancelledError as soon as ``cancel_event`` is set.
        """
        if not request.base_text or request.repetitions <= 0:
            return GenerationResult(separator=request.options.separator)

        start_time = time.perf_counter()
        parts: list[str] = []
        produced = 0

        for count, piece in self._iter_batches(request):
            if cancel_event is not None and cancel_event.is_set():
                logger.info(
                    "generation.cancelled",
                    produced=produced,
                    repetitions=request.repetitions,
                )
                raise GenerationCancelledError(produced, request.repetitions)

            parts.append(piece)
            produced += count
            await asyncio.sleep(0)

        repeated_text = "".join(parts)
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "generation.completed",
            repetitions=request.repetitions,
            chunked=self.is_chunked(request.repetitions),
            length=len(repeated_text),
            duration_ms=round(duration_ms, 2),
        )

        return GenerationResult(
            repeated_text=repeated_text,
            repetitions=request.repetitions,
            separator=request.options.separator,
        )

    def iter_chunks(self, request: GenerationRequest) -> Iterator[str]:
        """Yield the output in pieces: batches and the separators between them."""
        for _, piece in self._iter_batches(request):
            yield piece

    def is_chunked(self, repetitions: int) -> bool:
        return repetitions > self.chunk_size

    def _iter_batches(self, request: GenerationRequest) -> Iterator[tuple[int, str]]:
        """Yield ``(occurrence_count, piece)`` pairs making up the output."""
        options = request.options
        total = request.repetitions

        if not request.base_text or total <= 0:
            return

        text = process_text(request.base_text, options)
        separator = options.separator

        # Fast path: plain concatenation
        if not options.has_enumerator and not separator:
            yield total, text * total
            return

        if not self.is_chunked(total):
            yield total, separator.join(build_occurrences(text, options, 1, total, total))
            return

        batches = math.ceil(total / self.chunk_size)
        for batch in range(batches):
            first = batch * self.chunk_size + 1
            last = min(first + self.chunk_size - 1, total)
            yield last - first + 1, separator.join(
                build_occurrences(text, options, first, last, total)
            )

            if batch < batches - 1 and separator:
                yield 0, separator


@lru_cache
def get_generator() -> RepetitionGenerator:
    """Get the shared generator."""
    return RepetitionGenerator()


def generate(
    base_text: str,
    repetitions: int,
    options: GenerationOptions | None = None,
) -> str:
    """Generate repeated text and return it as a plain string."""
    request = GenerationRequest(
        base_text=base_text,
        repetitions=repetitions,
        options=options or GenerationOptions(),
    )
    return get_generator().generate(request).repeated_text
