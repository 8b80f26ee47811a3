"""Domain models for daily goals and energy planning."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_CALORIE_GOAL = 2000.0
DEFAULT_PROTEIN_GOAL = 150.0
DEFAULT_EXERCISE_GOAL = 500.0


@dataclass(frozen=True)
class Goals:
    """Daily nutrition and exercise targets."""

    calorie_goal: float = DEFAULT_CALORIE_GOAL
    protein_goal: float = DEFAULT_PROTEIN_GOAL
    exercise_goal: float = DEFAULT_EXERCISE_GOAL


class Sex(StrEnum):
    """Sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Activity levels with their TDEE multipliers."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    ATHLETE = "athlete"

    @property
    def multiplier(self) -> float:
        """Return the TDEE multiplier for this level."""
        return _ACTIVITY_MULTIPLIERS[self]


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HEAVY: 1.725,
    ActivityLevel.ATHLETE: 1.9,
}


@dataclass(frozen=True)
class BodyProfile:
    """Body metrics used to derive energy needs."""

    weight: float
    height: float
    age: float
    sex: Sex
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    metric: bool = True


@dataclass(frozen=True)
class EnergyPlan:
    """Computed energy needs."""

    bmr: float
    tdee: float
    recommended_protein_g: float
