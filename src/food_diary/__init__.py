"""Food diary service: food logging, weight tracking and progress streaks."""
