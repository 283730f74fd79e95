"""
Configuration settings for the Newsvendor Profit Matrix Calculator.

This module centralizes pricing parameters, the demand scenario set and
analysis options. Defaults reproduce the reference scenario.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# =============================================================================
# PRICING PARAMETERS
# =============================================================================

@dataclass
class PricingConfig:
    """Two-tier pricing parameters."""
    primary_price: float = 49_000.00    # units that meet demand
    secondary_price: float = 15_000.00  # surplus units (clearance)
    unit_cost: float = 25_000.00    # paid on every ordered unit

    def to_parameters(self):
        """Validated, immutable pricing parameters."""
        # Imported here because newsvendor_profit.pipeline imports this package
        from newsvendor_profit.optimization.profit import PricingParameters

        return PricingParameters(
            primary_price=self.primary_price,
            secondary_price=self.secondary_price,
            unit_cost=self.unit_cost,
        )


# =============================================================================
# SCENARIO CONFIGURATION
# =============================================================================

@dataclass
class ScenarioConfig:
    """Candidate order quantities and demand scenarios."""
    orders: List[int] = field(default_factory=lambda: [100, 150, 200, 250, 300])
    demands: List[int] = field(default_factory=lambda: [100, 150, 200, 250, 300])
    probabilities: List[float] = field(default_factory=lambda: [0.1, 0.15, 0.25, 0.3, 0.2])


# =============================================================================
# ANALYSIS CONFIGURATION
# =============================================================================

@dataclass
class AnalysisConfig:
    """Probability validation settings."""
    strict_probabilities: bool = False  # raise instead of warn on non-normalised vectors
    probability_tolerance: float = 1e-9


# =============================================================================
# CALCULATOR CONFIGURATION
# =============================================================================

@dataclass
class CalculatorConfig:
    """Main calculator configuration."""
    pricing: PricingConfig = field(default_factory=PricingConfig)
    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    # Output settings
    plot_dir: Optional[str] = None
    verbose: bool = True


def get_default_config() -> CalculatorConfig:
    """Get default calculator configuration."""
    return CalculatorConfig()
