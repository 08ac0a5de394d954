"""Style catalog endpoints."""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from repeater.api.deps import ApplicatorDep, RegistryDep, SettingsDep
from repeater.core.exceptions import StyleNotFoundError
from repeater.core.styles import StyleRegistry
from repeater.core.styling import StyleApplicator
from repeater.models.generation import GenerationOptions
from repeater.models.style import StyleCategoryInfo, StyleInfo

router = APIRouter()


class ApplyStyleRequest(BaseModel):
    """Request to style already generated text.

    ``separator`` wins over ``options``; with neither, the text is wrapped once.
    """

    text: str
    style: str
    separator: str | None = None
    options: GenerationOptions | None = None

    @property
    def effective_separator(self) -> str:
        if self.separator is not None:
            return self.separator
        if self.options is not None:
            return self.options.separator
        return ""


class ApplyStyleResponse(BaseModel):
    text: str
    style: str


class PreviewRequest(BaseModel):
    style: str
    sample_text: str | None = Field(default=None, description="Defaults to the configured preview text")


class PreviewResponse(BaseModel):
    preview: str
    style: str


def _style_info(
    name: str,
    registry: StyleRegistry,
    applicator: StyleApplicator,
    preview_text: str,
) -> StyleInfo:
    template = registry.get(name)
    if template is None:
        raise StyleNotFoundError(name)
    return StyleInfo(
        name=name,
        category=registry.category_of(name),
        template=template.describe(),
        is_live=template.is_live,
        preview=applicator.preview(preview_text, name),
    )


@router.get(
    "",
    response_model=list[StyleInfo],
    summary="List all styles",
)
async def list_styles(
    registry: RegistryDep,
    applicator: ApplicatorDep,
    settings: SettingsDep,
    preview_text: str | None = Query(default=None),
) -> list[StyleInfo]:
    """Return every style in catalog order with a live preview."""
    sample = preview_text if preview_text is not None else settings.preview_text
    return [
        _style_info(name, registry, applicator, sample)
        for name, _ in registry.list_styles()
    ]


@router.get(
    "/categories",
    response_model=list[StyleCategoryInfo],
    summary="List style categories",
)
async def list_categories(registry: RegistryDep) -> list[StyleCategoryInfo]:
    """Return categories in display order."""
    return [
        StyleCategoryInfo(name=name, styles=list(styles))
        for name, styles in registry.list_categories().items()
    ]


@router.post(
    "/apply",
    response_model=ApplyStyleResponse,
    summary="Apply a style to text",
)
async def apply_style(data: ApplyStyleRequest, applicator: ApplicatorDep) -> ApplyStyleResponse:
    """Style text; unknown styles leave it unchanged."""
    return ApplyStyleResponse(
        text=applicator.apply(data.text, data.style, data.effective_separator),
        style=data.style,
    )


@router.post(
    "/preview",
    response_model=PreviewResponse,
    summary="Preview a style",
)
async def preview_style(
    data: PreviewRequest,
    applicator: ApplicatorDep,
    settings: SettingsDep,
) -> PreviewResponse:
    """Preview a style word by word on sample text."""
    sample = data.sample_text if data.sample_text is not None else settings.preview_text
    return PreviewResponse(preview=applicator.preview(sample, data.style), style=data.style)


@router.get(
    "/{name}",
    response_model=StyleInfo,
    summary="Get a single style",
)
async def get_style(
    name: str,
    registry: RegistryDep,
    applicator: ApplicatorDep,
    settings: SettingsDep,
) -> StyleInfo:
    """Fetch one style with a preview."""
    return _style_info(name, registry, applicator, settings.preview_text)
