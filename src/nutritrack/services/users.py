"""User registration, login and health profile."""

import logging
import math
import re
from dataclasses import dataclass
from typing import Protocol

from passlib.context import CryptContext

from nutritrack.domain.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from nutritrack.domain.ids import is_object_id
from nutritrack.domain.users import (
    DEFAULT_ROLE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    ROLES,
    AuthSession,
    UserRecord,
    compute_bmi,
)
from nutritrack.services.tokens import TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
_EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
_BAD_CREDENTIALS = "Invalid credentials. Please check your email and password."
_EXISTING_USER = "User already exists with this email"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with a normalized email, if present."""

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user by id, if present."""

    def create_user(
        self, name: str, email: str, password_hash: str, role: str
    ) -> UserRecord:
        """Create a user; raise ConflictError when the email is taken."""

    def update_health_profile(
        self, user_id: str, height: float, weight: float, bmi: float
    ) -> UserRecord | None:
        """Store height, weight and BMI; return None when the user is gone."""


@dataclass
class UserService:
    """Application service for registration and authentication."""

    repository: UserRepository
    tokens: TokenService

    def register(
        self,
        name: object,
        email: object,
        password: object,
        role: object = DEFAULT_ROLE,
    ) -> AuthSession:
        """Create a user and return a token for them."""
        if not name or not email or not password:
            raise ValidationError("Please provide name, email and password")
        if not isinstance(email, str) or not _EMAIL_PATTERN.match(email.strip()):
            raise ValidationError("Please provide a valid email address")
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("Password must be at least 6 characters long")
        if role not in ROLES:
            raise ValidationError("Role must be one of: patient, admin")

        normalized_email = email.strip().lower()
        if self.repository.get_by_email(normalized_email) is not None:
            raise ConflictError(_EXISTING_USER)
        try:
            user = self.repository.create_user(
                name=str(name).strip(),
                email=normalized_email,
                password_hash=pwd_context.hash(password),
                role=str(role),
            )
        except ConflictError as exc:
            raise ConflictError(_EXISTING_USER) from exc
        logger.info("Registered user", extra={"user_id": user.id})
        return AuthSession(token=self.tokens.issue(user), user=user)

    def login(self, email: object, password: object) -> AuthSession:
        """Check credentials and return a fresh token."""
        if not email or not password:
            raise ValidationError("Please provide email and password")
        user = self.repository.get_by_email(str(email).strip().lower())
        if user is None or not pwd_context.verify(str(password), user.password_hash):
            raise UnauthorizedError(_BAD_CREDENTIALS)
        return AuthSession(token=self.tokens.issue(user), user=user)

    def get_profile(self, user_id: str) -> UserRecord:
        """Return the user's record."""
        if not is_object_id(user_id):
            raise ValidationError("Invalid user ID")
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_health_profile(self, user_id: str) -> UserRecord:
        """Return the user's record with height, weight and BMI."""
        return self.get_profile(user_id)

    def update_health_profile(
        self, user_id: str, height: object = None, weight: object = None
    ) -> UserRecord:
        """Update height and/or weight and recompute BMI.

        A value left as None keeps what is stored.
        """
        if height is None and weight is None:
            raise ValidationError(
                "Please provide at least height or weight to update"
            )
        new_height = _parse_measure(
            height,
            MAX_HEIGHT_CM,
            "Height must be a positive number between 1 and 300 cm",
        )
        new_weight = _parse_measure(
            weight,
            MAX_WEIGHT_KG,
            "Weight must be a positive number between 1 and 1000 kg",
        )
        current = self.get_profile(user_id)
        resolved_height = current.height if new_height is None else new_height
        resolved_weight = current.weight if new_weight is None else new_weight
        updated = self.repository.update_health_profile(
            user_id,
            height=resolved_height,
            weight=resolved_weight,
            bmi=compute_bmi(resolved_height, resolved_weight),
        )
        if updated is None:
            raise NotFoundError("User not found")
        logger.info("Updated health profile", extra={"user_id": user_id})
        return updated


def _parse_measure(value: object, upper: float, message: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(message)
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(message) from exc
    if not math.isfinite(number) or number <= 0 or number > upper:
        raise ValidationError(message)
    return number
