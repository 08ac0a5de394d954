"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends

from repeater.config import Settings, get_settings
from repeater.core.generator import RepetitionGenerator, get_generator
from repeater.core.styles import StyleRegistry, get_style_registry
from repeater.core.styling import StyleApplicator


async def get_registry() -> StyleRegistry:
    """Get the style catalog."""
    return get_style_registry()


async def get_applicator(
    registry: Annotated[StyleRegistry, Depends(get_registry)],
) -> StyleApplicator:
    """Get a style applicator over the catalog."""
    return StyleApplicator(registry)


async def get_repetition_generator() -> RepetitionGenerator:
    """Get the shared generator."""
    return get_generator()


# Type aliases for cleaner signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
RegistryDep = Annotated[StyleRegistry, Depends(get_registry)]
ApplicatorDep = Annotated[StyleApplicator, Depends(get_applicator)]
GeneratorDep = Annotated[RepetitionGenerator, Depends(get_repetition_generator)]
