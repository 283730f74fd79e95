"""
Newsvendor Profit Matrix Calculator

Expected-profit analysis of a discrete newsvendor decision: profit of every
(order, demand) pair under two-tier pricing, probability weighting, and
selection of the order quantity with the highest expected profit.

Modules:
- core: Grid type, input validation and exceptions
- optimization: Profit function, matrix builder, expectation, optimizer
- evaluation: Decision metrics and results summary
- reporting: Console tables
- visualization: Plotting utilities
- pipeline: End-to-end analysis
"""

__version__ = "1.0.0"

from . import core
from . import optimization
from . import evaluation
from . import reporting
from .pipeline import ProfitAnalysis, run_profit_analysis
