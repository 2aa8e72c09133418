from .math_tools import MathTools


class OneRMCalculator:
    """Estimate one-rep maxes and percentage-based training weights."""

    MAX_ESTIMATE_REPS: int = 15
    BRZYCKI_LIMIT: int = 37
    DEFAULT_PERCENTAGE: int = 70
    PERCENTAGES: dict[int, int] = {
        1: 100,
        2: 95,
        3: 93,
        4: 90,
        5: 87,
        6: 85,
        7: 83,
        8: 80,
        9: 77,
        10: 75,
        11: 73,
        12: 70,
    }

    @staticmethod
    def epley(weight: float, reps: int) -> int:
        """Return the Epley estimate ``weight * (1 + reps / 30)``."""
        return MathTools.round_half_up(weight * (1 + reps / 30))

    @classmethod
    def brzycki(cls, weight: float, reps: int) -> float:
        """Return the Brzycki estimate ``weight * 36 / (37 - reps)``."""
        if reps >= cls.BRZYCKI_LIMIT:
            return weight
        return MathTools.round_half_up(weight * (36 / (37 - reps)))

    @staticmethod
    def lombardi(weight: float, reps: int) -> int:
        """Return the Lombardi estimate ``weight * reps ** 0.1``."""
        return MathTools.round_half_up(weight * reps**0.1)

    @classmethod
    def estimate(cls, weight: float, reps: int) -> float:
        """Return the averaged one-rep max estimate for ``weight`` x ``reps``.

        A single rep is its own max and high rep counts are not extrapolated,
        so both return ``weight`` unchanged. Invalid input is passed through
        the same way.
        """
        if reps == 1 or reps > cls.MAX_ESTIMATE_REPS:
            return weight
        if reps < 1 or weight <= 0:
            return weight
        total = cls.epley(weight, reps) + cls.brzycki(weight, reps) + cls.lombardi(weight, reps)
        return MathTools.round_half_up(total / 3)

    @classmethod
    def get_percentage_for(cls, reps: int) -> int:
        """Return the percentage of 1RM typically lifted for ``reps`` reps."""
        return cls.PERCENTAGES.get(reps, cls.DEFAULT_PERCENTAGE)

    @staticmethod
    def get_weight_for_percentage(one_rm: float, percentage: float) -> int:
        """Return ``percentage`` percent of ``one_rm`` rounded to a whole unit."""
        return MathTools.round_half_up(one_rm * percentage / 100)
