from .math_tools import MathTools
from .one_rm import OneRMCalculator
from .percentile import PercentileCalculator, calculate_strength_percentile
from .strength_standards import DEFAULT_STANDARDS, StandardsTable, StrengthStandard
from .tiers import StrengthTier, get_next_tier_info, get_strength_tier
from .weight_converter import WeightConverter

__all__ = [
    "MathTools",
    "OneRMCalculator",
    "PercentileCalculator",
    "calculate_strength_percentile",
    "DEFAULT_STANDARDS",
    "StandardsTable",
    "StrengthStandard",
    "StrengthTier",
    "get_next_tier_info",
    "get_strength_tier",
    "WeightConverter",
]
