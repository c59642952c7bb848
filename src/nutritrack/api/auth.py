"""Registration and login endpoints."""

from fastapi import APIRouter, Depends, status

from nutritrack.api.deps import get_container, require_user
from nutritrack.api.schemas import LoginRequest, RegisterRequest, serialize_user
from nutritrack.containers import AppContainer
from nutritrack.domain.users import DEFAULT_ROLE
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Create a user and return an access token."""
    session = container.user_service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role or DEFAULT_ROLE,
    )
    return {"success": True, "token": session.token, "user": serialize_user(session.user)}


@router.post("/login")
async def login(
    body: LoginRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Exchange credentials for an access token."""
    session = container.user_service.login(body.email, body.password)
    return {"success": True, "token": session.token, "user": serialize_user(session.user)}


@router.get("/me")
async def me(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the authenticated user's profile."""
    user = container.user_service.get_profile(claims.user_id)
    return {"success": True, "user": serialize_user(user)}
