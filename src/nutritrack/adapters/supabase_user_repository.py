"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.errors import InternalError
from nutritrack.domain.ids import new_object_id
from nutritrack.domain.users import UserRecord
from nutritrack.services.users import UserRepository

_USER_COLUMNS = "id, name, email, role, password_hash, height, weight, bmi"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email, if present."""
        response = execute(
            self.client.table("users").select(_USER_COLUMNS).eq("email", email).limit(1),
            "fetch user",
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user by id, if present."""
        response = execute(
            self.client.table("users").select(_USER_COLUMNS).eq("id", user_id).limit(1),
            "fetch user",
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(
        self, name: str, email: str, password_hash: str, role: str
    ) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert(
                {
                    "id": new_object_id(),
                    "name": name,
                    "email": email,
                    "password_hash": password_hash,
                    "role": role,
                }
            ),
            "create user",
        )
        if not response.data:
            raise InternalError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_health_profile(
        self, user_id: str, height: float, weight: float, bmi: float
    ) -> UserRecord | None:
        """Store new measurements and BMI; None when the user is gone."""
        response = execute(
            self.client.table("users")
            .update({"height": height, "weight": weight, "bmi": bmi})
            .eq("id", user_id),
            "update health profile",
        )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        role=str(row.get("role", "patient")),
        password_hash=str(row.get("password_hash", "")),
        height=float(row.get("height") or 0.0),
        weight=float(row.get("weight") or 0.0),
        bmi=float(row.get("bmi") or 0.0),
    )
