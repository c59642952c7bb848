"""Error categories raised by NutriTrack services."""


class NutriTrackError(Exception):
    """Base class for failures reported back to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(NutriTrackError):
    """Malformed or missing input."""

    status_code = 400


class UnauthorizedError(NutriTrackError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ForbiddenError(NutriTrackError):
    """Authenticated caller lacks the required role."""

    status_code = 403


class NotFoundError(NutriTrackError):
    """Referenced entity is absent or not owned by the caller."""

    status_code = 404


class ConflictError(NutriTrackError):
    """A uniqueness constraint was violated."""

    status_code = 409


class InternalError(NutriTrackError):
    """Unexpected storage failure."""

    status_code = 500
