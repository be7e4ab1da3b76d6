"""Helpers shared by the service modules."""

from typing import TypeVar

from backend.ai import ContentType, GenerationInvoker, GenerationRequest, ValidatedOutput, resolve
from backend.db.tables import User
from backend.errors import Forbidden, NotFound

T = TypeVar("T")


def require_owned(entity: T | None, user: User, name: str) -> T:
    """Return the entity if it exists and belongs to the user."""
    if entity is None:
        raise NotFound(f"{name} not found")
    if entity.user_id != user.id:
        raise Forbidden(f"You do not have permission to access this {name.lower()}")
    return entity


def run_generation(
    invoker: GenerationInvoker,
    content_type: ContentType,
    variables: dict[str, str],
    structured: bool = True,
) -> ValidatedOutput:
    """Call the provider once and validate the output. Raises GenerationError on failure."""
    request = GenerationRequest.for_content(content_type, variables, structured=structured)
    return resolve(request, invoker.generate(request))
