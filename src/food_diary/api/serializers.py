"""JSON serialization helpers for API responses."""

from food_diary.domain.foods import FoodEntry
from food_diary.domain.goals import EnergyPlan, Goals
from food_diary.domain.nutrition import FoodAnalysis
from food_diary.domain.progress import CalendarDay, DailyAggregate, MonthStats
from food_diary.domain.weights import WeightEntry
from food_diary.services.progress import is_goal_met


def serialize_food(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fats": entry.fats,
        "serving_size": entry.serving_size,
        "timestamp": entry.timestamp.isoformat(),
        "meal_category": entry.meal_category.value,
    }


def serialize_analysis(analysis: FoodAnalysis) -> dict[str, object]:
    return analysis.model_dump(mode="json")


def serialize_weight(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "weight": entry.weight,
        "date": entry.date.isoformat(),
        "note": entry.note,
    }


def serialize_goals(goals: Goals) -> dict[str, object]:
    return {
        "calorie_goal": goals.calorie_goal,
        "protein_goal": goals.protein_goal,
        "exercise_goal": goals.exercise_goal,
    }


def serialize_energy_plan(plan: EnergyPlan) -> dict[str, object]:
    return {
        "bmr": round(plan.bmr, 1),
        "tdee": round(plan.tdee, 1),
        "recommended_protein_g": round(plan.recommended_protein_g, 1),
    }


def serialize_aggregate(
    aggregate: DailyAggregate, goals: Goals
) -> dict[str, object]:
    """Serialize a day with its goal progress ratios."""
    exercise = aggregate.exercise
    return {
        "day": aggregate.day.isoformat(),
        "total_calories": aggregate.total_calories,
        "total_protein": aggregate.total_protein,
        "calorie_ratio": _ratio(aggregate.total_calories, goals.calorie_goal),
        "protein_ratio": _ratio(aggregate.total_protein, goals.protein_goal),
        "goal_met": is_goal_met(aggregate, goals.calorie_goal),
        "exercise": {
            "active_calories": exercise.active_calories,
            "active_calorie_goal": exercise.active_calorie_goal,
            "active_minutes": exercise.active_minutes,
            "minutes_goal": exercise.minutes_goal,
        },
    }


def serialize_month_stats(stats: MonthStats) -> dict[str, object]:
    return {
        "successful_days": stats.successful_days,
        "total_tracked_days": stats.total_tracked_days,
        "longest_streak_in_month": stats.longest_streak_in_month,
    }


def serialize_calendar_day(day: CalendarDay) -> dict[str, object]:
    aggregate = day.aggregate
    return {
        "day": day.day.isoformat(),
        "tracked": aggregate is not None,
        "total_calories": aggregate.total_calories if aggregate else None,
        "total_protein": aggregate.total_protein if aggregate else None,
        "goal_met": day.goal_met,
        "part_of_streak": day.part_of_streak,
        "is_future": day.is_future,
    }


def _ratio(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return round(value / goal, 3)
