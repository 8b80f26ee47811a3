"""Energy needs calculator."""

from food_diary.domain.goals import ActivityLevel, BodyProfile, EnergyPlan, Sex

POUNDS_TO_KG = 0.453592
INCHES_TO_CM = 2.54
PROTEIN_G_PER_KG = 1.8


def calculate_bmr(weight_kg: float, height_cm: float, age: float, sex: Sex) -> float:
    """Return basal metabolic rate using the Mifflin-St Jeor equation."""
    adjustment = 5 if sex == Sex.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + adjustment


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Return total daily energy expenditure for an activity level."""
    return bmr * activity_level.multiplier


def calculate_energy_plan(profile: BodyProfile) -> EnergyPlan:
    """Compute BMR, TDEE and protein needs for a body profile.

    Imperial profiles are given in pounds and inches.
    """
    if profile.weight <= 0 or profile.height <= 0 or profile.age <= 0:
        raise ValueError("Weight, height and age must be positive")
    weight_kg = profile.weight if profile.metric else profile.weight * POUNDS_TO_KG
    height_cm = profile.height if profile.metric else profile.height * INCHES_TO_CM
    bmr = calculate_bmr(weight_kg, height_cm, profile.age, profile.sex)
    return EnergyPlan(
        bmr=bmr,
        tdee=calculate_tdee(bmr, profile.activity_level),
        recommended_protein_g=weight_kg * PROTEIN_G_PER_KG,
    )
