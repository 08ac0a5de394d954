"""Generation option endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from repeater.core.options import toggle_option
from repeater.models.generation import GenerationOptions

router = APIRouter()


class ToggleOptionRequest(BaseModel):
    """Switch one option, keeping the enumerators exclusive."""

    options: GenerationOptions = Field(default_factory=GenerationOptions)
    key: str
    value: bool


@router.post(
    "/toggle",
    response_model=GenerationOptions,
    summary="Toggle a generation option",
)
async def toggle(data: ToggleOptionRequest) -> GenerationOptions:
    """Return the options after switching ``key``."""
    return toggle_option(data.options, data.key, data.value)
