"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import EQUITY_CURVE_MODES


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_positive_int(params: dict[str, Any], name: str, prefix: str,
                        errors: list[ValidationError]) -> None:
    if name in params:
        value = params[name]
        if not _is_int(value) or value <= 0:
            errors.append(ValidationError(
                field=f"{prefix}.{name}",
                message="Must be a positive integer",
                value=value
            ))


def _check_positive_number(params: dict[str, Any], name: str, prefix: str,
                           errors: list[ValidationError]) -> None:
    if name in params:
        value = params[name]
        if not _is_number(value) or value <= 0:
            errors.append(ValidationError(
                field=f"{prefix}.{name}",
                message="Must be a positive number",
                value=value
            ))


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_momentum_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate momentum parameters."""
        errors: list[ValidationError] = []

        _check_positive_int(params, "window", "momentum", errors)

        # Bands must straddle the moving average
        if "upper_band" in params:
            value = params["upper_band"]
            if not _is_number(value) or value < 1:
                errors.append(ValidationError(
                    field="momentum.upper_band",
                    message="Must be a number >= 1",
                    value=value
                ))

        if "lower_band" in params:
            value = params["lower_band"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="momentum.lower_band",
                    message="Must be a positive number <= 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_mean_reversion_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate mean reversion parameters."""
        errors: list[ValidationError] = []

        if "min_history" in params:
            value = params["min_history"]
            if not _is_int(value) or value < 2:
                errors.append(ValidationError(
                    field="mean_reversion.min_history",
                    message="Must be an integer >= 2",
                    value=value
                ))

        _check_positive_number(params, "entry_z", "mean_reversion", errors)

        return errors

    @staticmethod
    def validate_composite_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate composite score parameters."""
        errors: list[ValidationError] = []

        for name in ("short_window", "long_window", "volatility_window"):
            _check_positive_int(params, name, "composite", errors)

        for name in ("momentum_weight", "score_threshold"):
            _check_positive_number(params, name, "composite", errors)

        if "volatility_weight" in params:
            value = params["volatility_weight"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="composite.volatility_weight",
                    message="Must be a non-negative number",
                    value=value
                ))

        short_window = params.get("short_window")
        volatility_window = params.get("volatility_window")
        long_window = params.get("long_window")
        if _is_int(short_window) and _is_int(long_window) and _is_int(volatility_window):
            if max(short_window, volatility_window) > long_window:
                errors.append(ValidationError(
                    field="composite.long_window",
                    message="Must be >= short_window and volatility_window",
                    value=long_window
                ))

        return errors

    @staticmethod
    def validate_random_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random baseline parameters."""
        errors: list[ValidationError] = []

        if "seed" in params:
            value = params["seed"]
            if value is not None and not _is_int(value):
                errors.append(ValidationError(
                    field="random.seed",
                    message="Must be an integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_portfolio_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate portfolio parameters."""
        errors: list[ValidationError] = []

        _check_positive_number(params, "initial_asset_units", "portfolio", errors)

        if "equity_curve" in params:
            value = params["equity_curve"]
            if value not in EQUITY_CURVE_MODES:
                errors.append(ValidationError(
                    field="portfolio.equity_curve",
                    message=f"Must be one of {', '.join(EQUITY_CURVE_MODES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_feed_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price feed parameters."""
        errors: list[ValidationError] = []

        for name in ("base_url", "feed_id"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=f"feed.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        _check_positive_int(params, "lookback_minutes", "feed", errors)
        _check_positive_number(params, "timeout_seconds", "feed", errors)

        if "max_retries" in params:
            value = params["max_retries"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="feed.max_retries",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "retry_delay_seconds" in params:
            value = params["retry_delay_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="feed.retry_delay_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_run_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate aggregator run parameters."""
        errors: list[ValidationError] = []

        if "strategies" in params:
            value = params["strategies"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(name, str) and name for name in value)):
                errors.append(ValidationError(
                    field="run.strategies",
                    message="Must be a non-empty list of strategy names",
                    value=value
                ))
            elif len(set(value)) != len(value):
                errors.append(ValidationError(
                    field="run.strategies",
                    message="Must not contain duplicates",
                    value=value
                ))

        if "parallel" in params:
            value = params["parallel"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="run.parallel",
                    message="Must be a boolean",
                    value=value
                ))

        if params.get("max_workers") is not None:
            _check_positive_int(params, "max_workers", "run", errors)

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors: list[ValidationError] = []

        validators = {
            "momentum": ConfigValidator.validate_momentum_params,
            "mean_reversion": ConfigValidator.validate_mean_reversion_params,
            "composite": ConfigValidator.validate_composite_params,
            "random": ConfigValidator.validate_random_params,
            "portfolio": ConfigValidator.validate_portfolio_params,
            "feed": ConfigValidator.validate_feed_params,
            "run": ConfigValidator.validate_run_params,
        }

        for section, validate in validators.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validate(config[section]))

        return errors
