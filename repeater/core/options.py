"""Option boundary: where the enumerator exclusivity rule lives.

The generator accepts any combination of options. Callers that build
options from user input go through this module instead, so numbering and
percentages are never both switched on.
"""

from repeater.core.exceptions import ValidationError
from repeater.models.generation import GenerationOptions

OPTION_KEYS = tuple(GenerationOptions.model_fields)

# Turning one of these on turns the other off
EXCLUSIVE_OPTIONS = {
    "add_numbers": "add_percentages",
    "add_percentages": "add_numbers",
}


def toggle_option(options: GenerationOptions, key: str, value: bool) -> GenerationOptions:
    """Return a copy of ``options`` with ``key`` set to ``value``."""
    if key not in OPTION_KEYS:
        raise ValidationError(
            f"Unknown option: {key}",
            {"key": key, "allowed": list(OPTION_KEYS)},
        )

    update = {key: value}
    if value and key in EXCLUSIVE_OPTIONS:
        update[EXCLUSIVE_OPTIONS[key]] = False

    return GenerationOptions(**{**options.model_dump(), **update})


def ensure_exclusive_enumerators(options: GenerationOptions) -> GenerationOptions:
    """Reject options with both numbering and percentages enabled."""
    if options.add_numbers and options.add_percentages:
        raise ValidationError(
            "add_numbers and add_percentages are mutually exclusive",
            {"add_numbers": True, "add_percentages": True},
        )
    return options
