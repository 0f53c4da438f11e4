"""Centralized configuration validation for macroabm."""

from __future__ import annotations

import warnings
from typing import Any


class ConfigValidator:
    """
    Centralized validation for model configuration.

    All validation happens once at Model.init() so that no state is built
    from a bad configuration:
    - Type correctness
    - Valid parameter ranges
    - Relationship constraints between parameters
    - Logging configuration
    """

    VALID_LOG_LEVELS = {"DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    @staticmethod
    def validate_config(cfg: dict[str, Any]) -> None:
        """
        Validate all configuration parameters.

        Raises
        ------
        ValueError
            If any validation check fails.
        """
        ConfigValidator._validate_types(cfg)
        ConfigValidator._validate_ranges(cfg)
        ConfigValidator._validate_relationships(cfg)

        if "logging" in cfg:
            ConfigValidator._validate_logging(cfg["logging"])

    @staticmethod
    def _validate_types(cfg: dict[str, Any]) -> None:
        int_params = ["n_cons", "n_cap", "n_workers"]
        float_params = [
            "k",
            "alpha",
            "r_f",
            "price_k",
            "wb",
            "liquidity_init",
            "capital_init",
            "price_init",
            "output_init",
            "equity_init",
        ]

        for key in int_params:
            if key not in cfg:
                continue
            val = cfg[key]
            # bool is an int subclass but never a valid population size
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(
                    f"Config parameter '{key}' must be int, got {type(val).__name__}"
                )

        for key in float_params:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Config parameter '{key}' must be float, got {type(val).__name__}"
                )

    @staticmethod
    def _validate_ranges(cfg: dict[str, Any]) -> None:
        # (min, max, min is exclusive); None means unbounded
        constraints: dict[str, tuple[float | None, float | None, bool]] = {
            "n_cons": (1, None, False),
            "n_cap": (1, None, False),
            "n_workers": (1, None, False),
            "k": (0.0, None, True),
            "alpha": (0.0, None, True),
            "r_f": (0.0, 1.0, False),
            "price_k": (0.0, None, False),
            "wb": (0.0, None, True),
            "liquidity_init": (0.0, None, False),
            "capital_init": (0.0, None, False),
            "price_init": (0.0, None, True),
            "output_init": (0.0, None, False),
            "equity_init": (0.0, None, False),
        }

        for key, (min_val, max_val, exclusive) in constraints.items():
            if key not in cfg or cfg[key] is None:
                continue
            val = cfg[key]

            if min_val is not None:
                if exclusive and val <= min_val:
                    raise ValueError(
                        f"Config parameter '{key}' must be > {min_val}, got {val}"
                    )
                if not exclusive and val < min_val:
                    raise ValueError(
                        f"Config parameter '{key}' must be >= {min_val}, got {val}"
                    )

            if max_val is not None and val > max_val:
                raise ValueError(
                    f"Config parameter '{key}' must be <= {max_val}, got {val}"
                )

    @staticmethod
    def _validate_relationships(cfg: dict[str, Any]) -> None:
        n_firms = cfg.get("n_cons", 0) + cfg.get("n_cap", 0)
        n_workers = cfg.get("n_workers", 0)

        if n_firms > 0 and n_workers > 0 and n_workers < n_firms:
            warnings.warn(
                f"n_workers ({n_workers}) < n_cons + n_cap ({n_firms}). "
                "Some firms will never be able to hire.",
                UserWarning,
                stacklevel=3,
            )

        # a firm with no capital cannot compute its utilisation target
        if cfg.get("capital_init", 1.0) == 0.0:
            warnings.warn(
                "capital_init is 0: reborn consumption firms get x = 0.",
                UserWarning,
                stacklevel=3,
            )

    @staticmethod
    def _validate_logging(log_config: dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Parameters
        ----------
        log_config : dict
            Logging configuration dictionary with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - events: dict[str, str] (per-event overrides)

        Raises
        ------
        ValueError
            If logging configuration is invalid.
        """
        if not isinstance(log_config, dict):
            raise ValueError(
                f"Logging config must be dict, got {type(log_config).__name__}"
            )

        if "default_level" in log_config:
            ConfigValidator._validate_level(log_config["default_level"], "default_level")

        if "events" in log_config:
            events = log_config["events"]
            if not isinstance(events, dict):
                raise ValueError(
                    f"Logging events must be dict, got {type(events).__name__}"
                )
            for event_name, level in events.items():
                if not isinstance(event_name, str):
                    raise ValueError(
                        f"Event name must be str, got {type(event_name).__name__}"
                    )
                ConfigValidator._validate_level(level, f"event '{event_name}'")

    @staticmethod
    def _validate_level(level: Any, where: str) -> None:
        if not isinstance(level, str):
            raise ValueError(
                f"Log level for {where} must be str, got {type(level).__name__}"
            )
        if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{level}' for {where}. "
                f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
            )
