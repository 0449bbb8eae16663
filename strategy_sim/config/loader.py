"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CompositeParams,
    DefaultConfig,
    FeedParams,
    MeanReversionParams,
    MomentumParams,
    PortfolioParams,
    RandomParams,
    RunParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "momentum": MomentumParams,
    "mean_reversion": MeanReversionParams,
    "composite": CompositeParams,
    "random": RandomParams,
    "portfolio": PortfolioParams,
    "feed": FeedParams,
    "run": RunParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_pair_config(self, pair: str) -> dict[str, Any]:
        """Load pair-specific configuration overrides."""
        pairs_file = self.config_dir / "pairs.yaml"

        if not pairs_file.exists():
            return {}

        try:
            with open(pairs_file) as f:
                pairs_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {pairs_file}: {e}",
                context={"path": str(pairs_file)},
            )

        if not isinstance(pairs_config, dict):
            raise ConfigurationError(
                f"{pairs_file} must contain a mapping",
                context={"path": str(pairs_file)},
            )

        pairs = pairs_config.get("pairs") or {}
        if not isinstance(pairs, dict):
            raise ConfigurationError(
                f"'pairs' in {pairs_file} must be a mapping of pair names",
                context={"path": str(pairs_file)},
            )

        pair_config = pairs.get(pair) or {}
        if not isinstance(pair_config, dict):
            raise ConfigurationError(
                f"Overrides for {pair} in {pairs_file} must be a mapping",
                context={"path": str(pairs_file), "pair": pair},
            )

        return pair_config

    def merge_config(
        self,
        pair: str,
        run_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-run overrides (highest priority)
        2. Pair-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        pair_config = self.load_pair_config(pair)
        config = self._deep_merge(config, pair_config)

        if run_overrides:
            config = self._deep_merge(config, run_overrides)

        return config

    def load(
        self,
        pair: str,
        run_overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge, validate and build a typed configuration.

        Raises:
            ConfigurationError: If any merged parameter is invalid
        """
        merged = self.merge_config(pair, run_overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigurationError(
                f"Invalid configuration for {pair}: {details}",
                errors=errors,
                context={"pair": pair},
            )

        return self._build_config(merged)

    def _build_config(self, merged: dict[str, Any]) -> DefaultConfig:
        """Turn a merged dictionary back into frozen dataclasses."""
        sections = {}
        for name, section_type in _SECTION_TYPES.items():
            known = {f.name for f in fields(section_type)}
            values = {k: v for k, v in merged.get(name, {}).items() if k in known}
            if "strategies" in values:
                values["strategies"] = tuple(values["strategies"])
            sections[name] = section_type(**values)
        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, tuple):
                    result[field_name] = list(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
