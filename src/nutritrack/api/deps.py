"""Request dependencies shared by the API routers."""

from fastapi import Depends, Header, Request

from nutritrack.containers import AppContainer
from nutritrack.domain.errors import ForbiddenError, UnauthorizedError
from nutritrack.services.tokens import TokenClaims


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the application."""
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> TokenClaims:
    """Ensure requests carry a valid bearer token and return its claims."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise UnauthorizedError(
            "Not authorized to access this route. Please provide a valid token."
        )
    return container.tokens.verify(token.strip())


async def require_patient(claims: TokenClaims = Depends(require_user)) -> TokenClaims:
    """Ensure the caller has the patient role."""
    if claims.role != "patient":
        raise ForbiddenError(
            f"User role {claims.role} is not authorized to access this route"
        )
    return claims
