"""
Strategy lookup table.

Maps strategy names to factories so the aggregator can build a fresh,
independent strategy instance for every simulation run.
"""

from collections.abc import Callable
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import UnknownStrategyError
from .base import SignalStrategy
from .composite import HeuristicScoreStrategy
from .mean_reversion import MeanReversionStrategy
from .momentum import MomentumStrategy
from .random_baseline import RandomSource, RandomStrategy

StrategyFactory = Callable[[DefaultConfig, Optional[RandomSource]], SignalStrategy]

_REGISTRY: dict[str, StrategyFactory] = {
    MomentumStrategy.name: lambda config, source: MomentumStrategy(config.momentum),
    MeanReversionStrategy.name: lambda config, source: MeanReversionStrategy(config.mean_reversion),
    HeuristicScoreStrategy.name: lambda config, source: HeuristicScoreStrategy(config.composite),
    RandomStrategy.name: lambda config, source: RandomStrategy(config.random, source=source),
}


def register_strategy(name: str, factory: StrategyFactory, replace: bool = False) -> None:
    """
    Register a strategy factory under ``name``.

    Raises:
        ValueError: If the name is taken and ``replace`` is False
    """
    if name in _REGISTRY and not replace:
        raise ValueError(f"Strategy '{name}' is already registered")
    _REGISTRY[name] = factory


def unregister_strategy(name: str) -> None:
    """Remove a strategy factory; unknown names are ignored."""
    _REGISTRY.pop(name, None)


def available_strategies() -> list[str]:
    """Names of all registered strategies."""
    return list(_REGISTRY)


def create_strategy(
    name: str,
    config: Optional[DefaultConfig] = None,
    source: Optional[RandomSource] = None,
) -> SignalStrategy:
    """
    Build a new strategy instance by name.

    Args:
        name: Registered strategy name
        config: Configuration to draw parameters from (defaults if None)
        source: Random source handed to strategies that need one

    Raises:
        UnknownStrategyError: If no factory is registered under ``name``
    """
    factory = _REGISTRY.get(name)
    if factory is None:
        raise UnknownStrategyError(
            f"Unknown strategy '{name}'",
            strategy=name,
            available=available_strategies(),
        )
    return factory(config or get_default_config(), source)
