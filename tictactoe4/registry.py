"""Central registry of winning-pattern tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Sequence, Tuple

if TYPE_CHECKING:
    from .board.types import WinningState

PatternTable = Tuple["WinningState", ...]

_PATTERN_TABLE_REGISTRY: Dict[str, PatternTable] = {}


def register_pattern_table(table_id: str, patterns: Sequence[WinningState]) -> None:
    """Register a pattern table under ``table_id``."""
    if table_id in _PATTERN_TABLE_REGISTRY:
        raise ValueError(f"Pattern table id '{table_id}' is already registered.")
    _PATTERN_TABLE_REGISTRY[table_id] = tuple(patterns)


def get_pattern_table(table_id: str) -> PatternTable:
    """Retrieve a registered pattern table."""
    if table_id not in _PATTERN_TABLE_REGISTRY:
        raise KeyError(f"Pattern table id '{table_id}' is not registered.")
    return _PATTERN_TABLE_REGISTRY[table_id]


def list_pattern_tables() -> Iterable[str]:
    """Return iterable of registered pattern table identifiers."""
    return tuple(_PATTERN_TABLE_REGISTRY.keys())
