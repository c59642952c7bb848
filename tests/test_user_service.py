"""Tests for registration, login and tokens."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from nutritrack.domain.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from nutritrack.domain.ids import is_object_id
from nutritrack.domain.users import UserRecord, compute_bmi
from nutritrack.services.tokens import TokenService
from nutritrack.services.users import UserService
from tests.conftest import InMemoryUserRepository


def _service() -> UserService:
    return UserService(InMemoryUserRepository(), TokenService(secret="secret"))


def test_register_then_login() -> None:
    service = _service()

    session = service.register("Asha", " Asha@Example.com ", "secret1")
    login = service.login("asha@example.com", "secret1")

    assert session.user.email == "asha@example.com"
    assert session.user.role == "patient"
    assert session.user.password_hash != "secret1"
    assert is_object_id(session.user.id)
    assert service.tokens.verify(login.token).user_id == session.user.id


def test_register_rejects_existing_email() -> None:
    service = _service()
    service.register("Asha", "asha@example.com", "secret1")

    with pytest.raises(ConflictError):
        service.register("Other", "ASHA@example.com", "secret2")


@pytest.mark.parametrize(
    ("name", "email", "password", "role"),
    [
        ("", "a@example.com", "secret1", "patient"),
        ("Asha", "not-an-email", "secret1", "patient"),
        ("Asha", "a@example.com", "short", "patient"),
        ("Asha", "a@example.com", "secret1", "superuser"),
    ],
)
def test_register_rejects_bad_input(name, email, password, role) -> None:
    with pytest.raises(ValidationError):
        _service().register(name, email, password, role)


def test_login_rejects_bad_credentials() -> None:
    service = _service()
    service.register("Asha", "asha@example.com", "secret1")

    with pytest.raises(UnauthorizedError):
        service.login("asha@example.com", "wrong-password")
    with pytest.raises(UnauthorizedError):
        service.login("nobody@example.com", "secret1")


def test_token_round_trip_carries_role() -> None:
    tokens = TokenService(secret="secret")
    user = UserRecord(
        id="650000000000000000000001",
        name="Admin",
        email="admin@example.com",
        role="admin",
        password_hash="",
    )

    claims = tokens.verify(tokens.issue(user))

    assert claims.role == "admin"
    assert claims.email == "admin@example.com"


def test_verify_rejects_expired_and_forged_tokens() -> None:
    tokens = TokenService(secret="secret")
    past = datetime.now(tz=UTC) - timedelta(days=2)
    expired = jwt.encode(
        {"id": "650000000000000000000001", "exp": past}, "secret", algorithm="HS256"
    )
    forged = jwt.encode({"id": "650000000000000000000001"}, "other", algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        tokens.verify(expired)
    with pytest.raises(UnauthorizedError):
        tokens.verify(forged)
    with pytest.raises(UnauthorizedError):
        tokens.verify("garbage")


@pytest.mark.parametrize(
    ("height", "weight", "expected"),
    [(170, 65, 22.49), (180, 81, 25.0), (0, 70, 0.0), (170, 0, 0.0)],
)
def test_compute_bmi(height, weight, expected) -> None:
    assert compute_bmi(height, weight) == expected


def test_update_health_profile_recomputes_bmi() -> None:
    service = _service()
    user = service.register("Asha", "asha@example.com", "secret1").user

    with_height = service.update_health_profile(user.id, height="170")
    updated = service.update_health_profile(user.id, weight=65)

    assert with_height.bmi == 0.0
    assert updated.height == 170
    assert updated.weight == 65
    assert updated.bmi == 22.49
    assert service.get_health_profile(user.id).bmi == 22.49


@pytest.mark.parametrize(
    ("height", "weight"),
    [
        (None, None),
        (0, None),
        (301, None),
        ("tall", None),
        (float("inf"), None),
        (None, -1),
        (None, 1001),
        (None, True),
    ],
)
def test_update_health_profile_rejects_out_of_range(height, weight) -> None:
    service = _service()
    user = service.register("Asha", "asha@example.com", "secret1").user

    with pytest.raises(ValidationError):
        service.update_health_profile(user.id, height=height, weight=weight)

    assert service.get_health_profile(user.id).height == 0.0


def test_update_health_profile_accepts_upper_bounds() -> None:
    service = _service()
    user = service.register("Asha", "asha@example.com", "secret1").user

    updated = service.update_health_profile(user.id, height=300, weight=1000)

    assert updated.bmi == 111.11


def test_update_health_profile_for_unknown_user() -> None:
    with pytest.raises(NotFoundError):
        _service().update_health_profile("650000000000000000000009", height=170)
