"""Configuration schema for board evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

import tictactoe4.board  # noqa: F401 - ensures default pattern tables are registered
from tictactoe4.registry import list_pattern_tables

OUTPUT_FORMATS = ("text", "json")


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section)}")
    return section


@dataclass
class PatternConfig:
    table: str = "standard"


@dataclass
class OutputConfig:
    format: str = "text"
    show_board: bool = False


@dataclass
class AppConfig:
    patterns: PatternConfig = field(default_factory=PatternConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        patterns_data = _section(data, "patterns")
        patterns = PatternConfig(table=str(patterns_data.get("table", "standard")))
        if patterns.table not in list_pattern_tables():
            raise ValueError(
                f"Unknown pattern table: {patterns.table} "
                f"(expected one of {', '.join(list_pattern_tables())})"
            )

        output_data = _section(data, "output")
        output = OutputConfig(
            format=str(output_data.get("format", "text")),
            show_board=bool(output_data.get("show_board", False)),
        )
        if output.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output.format} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        return cls(patterns=patterns, output=output)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
