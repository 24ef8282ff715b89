"""Guards for use cases that record who performed them."""

from __future__ import annotations

from uuid import UUID

from ims.domain.exceptions import UnauthorizedError


def require_actor(actor_id: UUID | None, action: str) -> UUID:
    """Return ``actor_id`` or raise if no user is signed in."""
    if actor_id is None:
        raise UnauthorizedError(f"User must be authenticated to {action}")
    return actor_id
