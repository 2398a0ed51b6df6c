"""Registry of corner cabinet strategies by corner type."""

from __future__ import annotations

from typing import Callable, Protocol

from ...value_objects import CornerType, GeneratedPart
from ._common import CornerBuild


class CornerStrategy(Protocol):
    def __call__(self, build: CornerBuild) -> list[GeneratedPart]: ...


_strategies: dict[CornerType, CornerStrategy] = {}


def register_corner_strategy(
    corner_type: CornerType,
) -> Callable[[CornerStrategy], CornerStrategy]:
    """Decorator registering the strategy that builds one corner type.

    Raises:
        ValueError: If the corner type already has a strategy.
    """

    def decorator(strategy: CornerStrategy) -> CornerStrategy:
        if corner_type in _strategies:
            raise ValueError(f"Corner strategy '{corner_type.value}' already registered")
        _strategies[corner_type] = strategy
        return strategy

    return decorator


def get_corner_strategy(corner_type: CornerType) -> CornerStrategy:
    """Get the strategy for a corner type.

    Raises:
        KeyError: If no strategy is registered for the type.
    """
    if corner_type not in _strategies:
        raise KeyError(f"No corner strategy registered for '{corner_type.value}'")
    return _strategies[corner_type]


def list_corner_strategies() -> list[CornerType]:
    return [t for t in CornerType if t in _strategies]
