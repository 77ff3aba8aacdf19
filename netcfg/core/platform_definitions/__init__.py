from .models import PlatformDefinition
from .registry import PlatformDefinitionRegistry

__all__ = [
    "PlatformDefinition",
    "PlatformDefinitionRegistry",
]
