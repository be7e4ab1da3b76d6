"""
Generation invoker.

Turns a GenerationRequest into one provider call and reports what came back.
Structured mode hands the output model to the provider as its only tool and
reads the tool-call arguments. Free-text mode (and structured mode when the
provider ignores the tool) extracts the first JSON span from the reply.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from pydantic import BaseModel

from backend.ai.prompts import ContentType, get_prompt, render
from backend.config import settings
from backend.errors import GenerationError, GenerationErrorKind
from backend.utils.parser import find_json_span

logger = logging.getLogger(__name__)

RAW_LOG_LIMIT = 500


@dataclass
class GenerationRequest:
    content_type: ContentType
    variables: dict[str, str]
    response_schema: type[BaseModel] | None = None
    temperature: float = 0.2

    @classmethod
    def for_content(
        cls,
        content_type: ContentType,
        variables: dict[str, str],
        structured: bool = True,
    ) -> "GenerationRequest":
        """Build a request from the prompt library entry for a content type."""
        prompt = get_prompt(content_type)
        return cls(
            content_type=content_type,
            variables=variables,
            response_schema=prompt.schema if structured else None,
            temperature=settings.generation_temperature,
        )


@dataclass
class GenerationResult:
    raw: str
    parsed: Any | None = None
    succeeded: bool = False
    error_reason: str | None = None
    error: GenerationError | None = None

    @classmethod
    def ok(cls, raw: str, parsed: Any) -> "GenerationResult":
        return cls(raw=raw, parsed=parsed, succeeded=True)

    @classmethod
    def failed(cls, kind: GenerationErrorKind, reason: str, raw: str = "") -> "GenerationResult":
        return cls(
            raw=raw,
            error_reason=reason,
            error=GenerationError(kind, "Failed to generate content. Please try again.", raw=raw),
        )


class GenerationInvoker:
    """Calls the chat model for one generation request."""

    def __init__(self, chat_model: BaseChatModel):
        self.chat_model = chat_model

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Run a single provider call.

        Never raises for provider or output failures; the returned result
        records the error kind instead.
        """
        prompt = get_prompt(request.content_type)
        messages = [
            SystemMessage(content=render(prompt.system, request.variables)),
            HumanMessage(content=render(prompt.template, request.variables)),
        ]

        structured = request.response_schema is not None
        logger.info(
            "Generating %s (%s mode, model=%s)",
            request.content_type.value,
            "structured" if structured else "free-text",
            getattr(self.chat_model, "model_name", type(self.chat_model).__name__),
        )

        try:
            if structured:
                schema = request.response_schema
                runnable = self.chat_model.bind_tools(
                    [schema],
                    tool_choice=schema.__name__,
                    temperature=request.temperature,
                )
            else:
                runnable = self.chat_model.bind(temperature=request.temperature)
            message = runnable.invoke(messages)
        except Exception as e:
            logger.warning("Provider call failed for %s: %s", request.content_type.value, e)
            return GenerationResult.failed(GenerationErrorKind.PROVIDER_UNAVAILABLE, str(e))

        if structured:
            result = self._read_tool_call(message)
            if result is not None:
                return self._logged(request, result)
            logger.warning("No tool call for %s, extracting from message text", request.content_type.value)

        return self._logged(request, self._read_text(_message_text(message)))

    def _read_tool_call(self, message: AIMessage) -> GenerationResult | None:
        """Read the first tool call, or None when the provider made none."""
        tool_calls = getattr(message, "tool_calls", None) or []
        if tool_calls:
            args = tool_calls[0]["args"]
            return GenerationResult.ok(json.dumps(args), args)

        invalid = getattr(message, "invalid_tool_calls", None) or []
        if invalid:
            raw = invalid[0].get("args") or ""
            return GenerationResult.failed(
                GenerationErrorKind.MALFORMED_JSON,
                invalid[0].get("error") or "Tool call arguments are not valid JSON",
                raw=raw,
            )
        return None

    def _read_text(self, text: str) -> GenerationResult:
        span = find_json_span(text)
        if span is None:
            return GenerationResult.failed(
                GenerationErrorKind.NO_STRUCTURED_OUTPUT, "Response contains no JSON", raw=text
            )
        try:
            parsed = json.loads(span)
        except json.JSONDecodeError as e:
            return GenerationResult.failed(GenerationErrorKind.MALFORMED_JSON, str(e), raw=span)
        return GenerationResult.ok(span, parsed)

    def _logged(self, request: GenerationRequest, result: GenerationResult) -> GenerationResult:
        if not result.succeeded:
            logger.warning(
                "Generation of %s failed (%s): %s | raw=%r",
                request.content_type.value,
                result.error.kind.value,
                result.error_reason,
                result.raw[:RAW_LOG_LIMIT],
            )
        return result


def _message_text(message: Any) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    # Content blocks: keep the text parts
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
