"""Auxiliary input providers for md-compose."""

from mdcompose.inputs.base import AuxiliaryInput
from mdcompose.inputs.console import ConsoleInput
from mdcompose.inputs.scripted import DecliningInput, ScriptedInput

__all__ = [
    "AuxiliaryInput",
    "ConsoleInput",
    "DecliningInput",
    "ScriptedInput",
]

# Map provider names to classes that need no constructor arguments
PROVIDER_MAP: dict[str, type[AuxiliaryInput]] = {
    "none": DecliningInput,
    "console": ConsoleInput,
}

SUPPORTED_PROVIDERS = tuple(PROVIDER_MAP.keys())


def get_provider(name: str) -> type[AuxiliaryInput]:
    """Get the input provider class registered under a name."""
    key = name.lower()
    if key not in PROVIDER_MAP:
        raise ValueError(
            f"Unsupported input provider: {key}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    return PROVIDER_MAP[key]
