"""Configuration module."""

from .config import (
    PricingConfig,
    ScenarioConfig,
    AnalysisConfig,
    CalculatorConfig,
    get_default_config,
)

__all__ = [
    "PricingConfig",
    "ScenarioConfig",
    "AnalysisConfig",
    "CalculatorConfig",
    "get_default_config",
]
