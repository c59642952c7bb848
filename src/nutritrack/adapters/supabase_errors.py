"""Translation of Supabase query failures into service errors."""

import logging
from typing import Any, Protocol

from postgrest.exceptions import APIError

from nutritrack.domain.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class ExecutableQuery(Protocol):
    """Any PostgREST request builder."""

    def execute(self) -> Any:  # noqa: ANN401
        """Run the request."""


def execute(query: ExecutableQuery, action: str) -> Any:  # noqa: ANN401
    """Run a query, raising ConflictError or InternalError on failure."""
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError("Duplicate entry. This record already exists.") from exc
        logger.exception("Supabase request failed", extra={"action": action})
        raise InternalError(f"Failed to {action}") from exc
