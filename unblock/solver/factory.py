"""
Strategy Factory Module - Registry of search strategies by name.
"""

from typing import Dict, List, Optional, Type

from .base import SolverStrategy

# Strategy used when the caller does not name one
DEFAULT_STRATEGY = "bfs"

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under its `name`.

    Raises:
        TypeError: If cls is not a SolverStrategy
        ValueError: If another class already uses the same name
    """
    if not issubclass(cls, SolverStrategy):
        raise TypeError(f"{cls.__name__} must subclass SolverStrategy")
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name '{cls.name}' is already taken by {existing.__name__}")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: Optional[str] = None) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name; None or "" selects DEFAULT_STRATEGY

    Raises:
        ValueError: If no strategy is registered under the name
    """
    name = name or DEFAULT_STRATEGY
    try:
        return _STRATEGIES[name]()
    except KeyError:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None


def get_strategy_names() -> List[str]:
    """Registered strategy names, in registration order (used for --strategy choices)."""
    return list(_STRATEGIES)
