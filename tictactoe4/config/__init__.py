"""Config package exports."""

from .schema import OUTPUT_FORMATS, AppConfig, OutputConfig, PatternConfig, load_config

__all__ = [
    "OUTPUT_FORMATS",
    "AppConfig",
    "OutputConfig",
    "PatternConfig",
    "load_config",
]
