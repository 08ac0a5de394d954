"""Text generation endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from repeater.api.deps import ApplicatorDep, GeneratorDep, SettingsDep
from repeater.core.exceptions import LargeRepetitionError, RepetitionLimitError
from repeater.core.options import ensure_exclusive_enumerators
from repeater.core.stats import display_text, text_stats
from repeater.core.styles import NORMAL_STYLE
from repeater.models.generation import DisplayText, GenerationRequest, TextStats
from repeater.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class GenerateRequest(GenerationRequest):
    """Request to generate, and optionally style, repeated text."""

    style: str | None = None
    confirm_large: bool = False


class GenerateResponse(BaseModel):
    """Generated text with its styled form and statistics."""

    repeated_text: str
    styled_text: str
    style: str
    separator: str
    stats: TextStats
    display: DisplayText


@router.post(
    "",
    response_model=GenerateResponse,
    summary="Generate repeated text",
    description="Repeat the base text with the given options. Counts above the "
    "large repetition threshold must be confirmed with confirm_large.",
)
async def generate_text(
    data: GenerateRequest,
    settings: SettingsDep,
    generator: GeneratorDep,
    applicator: ApplicatorDep,
) -> GenerateResponse:
    """Generate repeated text and apply the requested style."""
    ensure_exclusive_enumerators(data.options)

    if data.repetitions > settings.max_repetitions:
        raise RepetitionLimitError(data.repetitions, settings.max_repetitions)

    if data.repetitions > settings.large_repetition_threshold and not data.confirm_large:
        raise LargeRepetitionError(data.repetitions, settings.large_repetition_threshold)

    result = await generator.agenerate(data)

    style = data.style or NORMAL_STYLE
    styled_text = applicator.apply(result.repeated_text, style, result.separator)

    logger.info(
        "generate.completed",
        repetitions=data.repetitions,
        style=style,
        length=len(styled_text),
    )

    return GenerateResponse(
        repeated_text=result.repeated_text,
        styled_text=styled_text,
        style=style,
        separator=result.separator,
        stats=text_stats(result.repeated_text),
        display=display_text(
            result.repeated_text,
            threshold=settings.large_text_threshold,
            edge=settings.display_edge_chars,
        ),
    )
