"""Infrastructure domain — project configuration and reference registry."""

from docloom.infrastructure.config import DocloomConfig, config_path, load_config
from docloom.infrastructure.registry import ReferenceRegistry

__all__ = [
    "DocloomConfig",
    "ReferenceRegistry",
    "config_path",
    "load_config",
]
