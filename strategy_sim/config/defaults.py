"""Default configuration parameters for the strategy simulator."""

from dataclasses import dataclass, field
from typing import Optional

EQUITY_CURVE_FINAL_STATE = "final_state"
EQUITY_CURVE_PER_STEP = "per_step"
EQUITY_CURVE_MODES = (EQUITY_CURVE_FINAL_STATE, EQUITY_CURVE_PER_STEP)

DEFAULT_STRATEGIES = ("momentum", "mean-reversion", "composite", "random")


@dataclass(frozen=True)
class MomentumParams:
    """Moving-average band strategy parameters."""
    window: int = 20                 # Moving average length, also min history
    upper_band: float = 1.02         # BUY above ma * upper_band
    lower_band: float = 0.98         # SELL below ma * lower_band


@dataclass(frozen=True)
class MeanReversionParams:
    """Z-score strategy parameters."""
    min_history: int = 30            # Observations before the first signal
    entry_z: float = 1.5             # |z| beyond which a signal fires


@dataclass(frozen=True)
class CompositeParams:
    """Heuristic composite score parameters."""
    short_window: int = 5
    long_window: int = 20            # Also the minimum history
    volatility_window: int = 10
    momentum_weight: float = 100.0
    volatility_weight: float = 50.0
    score_threshold: float = 5.0


@dataclass(frozen=True)
class RandomParams:
    """Random baseline parameters."""
    seed: Optional[int] = None       # None draws from an unseeded source


@dataclass(frozen=True)
class PortfolioParams:
    """Simulated portfolio parameters."""
    initial_asset_units: float = 1000.0
    equity_curve: str = EQUITY_CURVE_FINAL_STATE


@dataclass(frozen=True)
class FeedParams:
    """Historical price provider parameters."""
    base_url: str = "https://benchmarks.pyth.network/v1/shims/historical/price"
    feed_id: str = "0xff61491a931112ddf1bd8147cd1b641375f79f5825126d665480874634fd0ace"
    resolution: str = "60"
    lookback_minutes: int = 200
    timeout_seconds: float = 10.0
    max_retries: int = 3
    retry_delay_seconds: float = 1.0


@dataclass(frozen=True)
class RunParams:
    """Aggregator run parameters."""
    strategies: tuple[str, ...] = field(default=DEFAULT_STRATEGIES)
    parallel: bool = False
    max_workers: Optional[int] = None
    output_path: str = "strategy_sim_results.json"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    momentum: MomentumParams
    mean_reversion: MeanReversionParams
    composite: CompositeParams
    random: RandomParams
    portfolio: PortfolioParams
    feed: FeedParams
    run: RunParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        momentum=MomentumParams(),
        mean_reversion=MeanReversionParams(),
        composite=CompositeParams(),
        random=RandomParams(),
        portfolio=PortfolioParams(),
        feed=FeedParams(),
        run=RunParams(),
    )
