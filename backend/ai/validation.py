"""
Result validation and mock fallback.

A generation either yields a fully validated model or fails with a
GenerationError. Mock content replaces a failed generation only when
``settings.mock_fallback_enabled`` is on.
"""

import logging
import typing
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from backend.ai.fallback import build_mock
from backend.ai.invoker import GenerationRequest, GenerationResult
from backend.ai.prompts import ContentType, get_prompt
from backend.config import settings
from backend.errors import GenerationError, GenerationErrorKind

logger = logging.getLogger(__name__)


@dataclass
class ValidatedOutput:
    content_type: ContentType | None
    data: BaseModel
    used_fallback: bool = False


def validate(
    result: GenerationResult,
    schema: type[BaseModel],
    content_type: ContentType | None = None,
) -> ValidatedOutput:
    """
    Validate a generation result against its output model.

    Raises:
        GenerationError: the result failed, or its payload does not fit the model
    """
    if not result.succeeded:
        raise result.error

    payload = _coerce(result.parsed, schema)
    try:
        data = schema.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "Schema mismatch for %s: %d error(s) | raw=%r",
            schema.__name__,
            e.error_count(),
            result.raw[:500],
        )
        raise GenerationError(
            GenerationErrorKind.SCHEMA_MISMATCH,
            "Failed to generate content. Please try again.",
            raw=result.raw,
        ) from e

    return ValidatedOutput(content_type=content_type, data=data)


def resolve(request: GenerationRequest, result: GenerationResult) -> ValidatedOutput:
    """
    Validate the result of a request, substituting mock content when enabled.

    The output model comes from the request, or from the prompt library when
    the request ran in free-text mode.
    """
    schema = request.response_schema or get_prompt(request.content_type).schema
    try:
        return validate(result, schema, request.content_type)
    except GenerationError as e:
        if not settings.mock_fallback_enabled:
            raise
        logger.warning(
            "Serving mock %s after %s", request.content_type.value, e.kind.value
        )
        data = schema.model_validate(build_mock(request.content_type, request.variables))
        return ValidatedOutput(content_type=request.content_type, data=data, used_fallback=True)


def _coerce(payload: Any, schema: type[BaseModel]) -> Any:
    """Fix light shape drift: a bare list, or the object wrapped in one key."""
    if isinstance(payload, list):
        list_fields = [
            name
            for name, field in schema.model_fields.items()
            if field.is_required() and typing.get_origin(field.annotation) is list
        ]
        if len(list_fields) == 1:
            return {list_fields[0]: payload}
        return payload

    if (
        isinstance(payload, dict)
        and len(payload) == 1
        and next(iter(payload)) not in schema.model_fields
    ):
        inner = next(iter(payload.values()))
        if isinstance(inner, dict):
            return inner

    return payload
