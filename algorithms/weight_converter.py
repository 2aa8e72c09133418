from .math_tools import MathTools


class WeightConverter:
    """Utility for converting between kg and lbs."""

    KG_TO_LB = 2.20462
    UNITS = ("lbs", "kg")

    @staticmethod
    def kg_to_lb(kg: float) -> float:
        return round(kg * WeightConverter.KG_TO_LB, 2)

    @staticmethod
    def lb_to_kg(lb: float) -> float:
        return round(lb / WeightConverter.KG_TO_LB, 2)

    @staticmethod
    def to_lbs(weight: float, unit: str) -> float:
        """Return ``weight`` in whole pounds; pound values pass through."""
        if unit == "kg":
            return MathTools.round_half_up(weight * WeightConverter.KG_TO_LB)
        return weight

    @staticmethod
    def as_lbs(weight: float, unit: str) -> float:
        """Return ``weight`` in pounds without rounding."""
        if unit == "kg":
            return weight * WeightConverter.KG_TO_LB
        return weight

    @staticmethod
    def to_kg(weight: float, unit: str) -> float:
        """Return ``weight`` in whole kilograms; kilogram values pass through."""
        if unit == "lbs":
            return MathTools.round_half_up(weight / WeightConverter.KG_TO_LB)
        return weight

    @staticmethod
    def for_preference(weight: float, from_unit: str, preference: str) -> float:
        """Convert ``weight`` from ``from_unit`` into the preferred unit."""
        if preference == "kg":
            return WeightConverter.to_kg(weight, from_unit)
        return WeightConverter.to_lbs(weight, from_unit)
