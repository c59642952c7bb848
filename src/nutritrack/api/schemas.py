"""Request bodies and response serializers for the REST API.

Field names follow the JSON keys existing clients already send and read.
Body fields are optional so missing values reach the services, which report
them with the standard error envelope.
"""

from pydantic import BaseModel, ConfigDict, Field

from nutritrack.domain.appointments import AppointmentView, Dietician
from nutritrack.domain.catalog import Meal
from nutritrack.domain.goals import Goal
from nutritrack.domain.logs import ExerciseLogEntry, MealLogView
from nutritrack.domain.reports import DailyTotal, RangeReport
from nutritrack.domain.users import UserRecord


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(_Body):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(_Body):
    email: str | None = None
    password: str | None = None


class MealLogRequest(_Body):
    meal_id: str | None = Field(default=None, alias="mealId")
    meal_type: str | None = Field(default=None, alias="mealType")
    date: str | None = None


class ExerciseLogRequest(_Body):
    activity_type: str | None = Field(default=None, alias="ActivityType")
    duration: str | int | float | None = Field(default=None, alias="Duration")
    date: str | None = Field(default=None, alias="Date")
    calories_burned: float | str | None = Field(default=None, alias="CaloriesBurned")


class GoalRequest(_Body):
    nutritional_goal: str | None = Field(default=None, alias="nutritionalGoal")
    exercise_level: str | None = Field(default=None, alias="exerciseLevel")


class HealthProfileRequest(_Body):
    height: float | str | None = None
    weight: float | str | None = None


class AppointmentRequest(_Body):
    dietician_id: str | None = Field(default=None, alias="dieticianId")
    date: str | None = None
    time: str | None = None


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }


def serialize_catalog_meal(meal: Meal) -> dict[str, object]:
    return {
        "MealID": meal.id,
        "MealName": meal.name,
        "Calories": meal.calories,
        "NutritionalValue": meal.nutritional_value,
        "Type": meal.diet_type,
    }


def serialize_recommendation(meal: Meal) -> dict[str, object]:
    return {
        "mealId": meal.id,
        "mealName": meal.name,
        "calories": meal.calories,
        "nutritionalValue": meal.nutritional_value,
        "type": meal.diet_type,
    }


def serialize_meal_log(view: MealLogView) -> dict[str, object]:
    return {
        "MealLogID": view.entry.id,
        "Date": view.entry.logged_at.isoformat(),
        "MealType": view.entry.meal_type,
        "CalorieIntake": view.entry.calorie_intake,
        "MealName": view.meal_name or "Unknown",
        "NutritionalValue": view.nutritional_value or "Unknown",
        "Type": view.diet_type or "Unknown",
    }


def serialize_exercise_log(entry: ExerciseLogEntry) -> dict[str, object]:
    return {
        "ExerciseLogID": entry.id,
        "Date": entry.logged_at.isoformat(),
        "ActivityType": entry.activity_type,
        "Duration": entry.duration,
        "CaloriesBurned": entry.calories_burned,
        "UserID": entry.user_id,
    }


def serialize_goal(goal: Goal) -> dict[str, object]:
    return {
        "nutritionalGoal": goal.nutritional_goal,
        "dailyCalorieLimit": goal.daily_calorie_limit,
        "exerciseLevel": goal.exercise_level,
    }


def serialize_daily_total(total: DailyTotal) -> dict[str, object]:
    return {
        "date": total.day.isoformat(),
        "calorieIntake": total.calorie_intake,
        "calorieBurned": total.calorie_burned,
        "progress": total.progress,
    }


def serialize_report(report_type: str, report: RangeReport) -> dict[str, object]:
    summary = report.summary
    return {
        "reportType": report_type,
        "dateRange": {
            "startDate": report.start.isoformat(),
            "endDate": report.end.isoformat(),
        },
        "dailyData": [serialize_daily_total(day) for day in report.daily_data],
        "summary": {
            "totalIntake": summary.total_intake,
            "totalBurned": summary.total_burned,
            "netCalories": summary.net_calories,
            "avgIntake": summary.avg_intake,
            "avgBurned": summary.avg_burned,
            "netProgress": summary.net_progress,
            "daysTracked": summary.days_tracked,
        },
    }


def serialize_dietician(dietician: Dietician) -> dict[str, object]:
    return {
        "DieticianID": dietician.id,
        "Name": dietician.name,
        "Specialization": dietician.specialization,
    }


def serialize_appointment(view: AppointmentView) -> dict[str, object]:
    return {
        "AppointmentID": view.appointment.id,
        "Date": view.appointment.day.isoformat(),
        "Time": view.appointment.time,
        "DieticianName": view.dietician_name or "Unknown",
        "Specialization": view.specialization or "Unknown",
    }


def serialize_health_profile(user: UserRecord) -> dict[str, object]:
    return {"height": user.height, "weight": user.weight, "bmi": user.bmi}
