"""Domain models for registered users."""

from dataclasses import dataclass

ROLES = ("patient", "admin")
DEFAULT_ROLE = "patient"
MAX_HEIGHT_CM = 300
MAX_WEIGHT_KG = 1000


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database.

    Height is in centimetres and weight in kilograms; 0 means not set.
    """

    id: str
    name: str
    email: str
    role: str
    password_hash: str
    height: float = 0.0
    weight: float = 0.0
    bmi: float = 0.0


@dataclass(frozen=True)
class AuthSession:
    """Access token issued for a user."""

    token: str
    user: UserRecord


def compute_bmi(height: float, weight: float) -> float:
    """Return BMI rounded to two decimals, or 0 when either value is unset."""
    if height <= 0 or weight <= 0:
        return 0.0
    meters = height / 100
    return round(weight / (meters * meters), 2)
