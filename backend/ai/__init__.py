"""
AI generation.

- prompts: prompt library per content type
- invoker: one provider call per request, tool-call or free-text extraction
- validation: output models, mock fallback behind a flag
"""

from backend.ai.invoker import GenerationInvoker, GenerationRequest, GenerationResult
from backend.ai.prompts import ContentType, get_prompt, get_template, render
from backend.ai.validation import ValidatedOutput, resolve, validate

__all__ = [
    "ContentType",
    "GenerationInvoker",
    "GenerationRequest",
    "GenerationResult",
    "ValidatedOutput",
    "get_prompt",
    "get_template",
    "render",
    "resolve",
    "validate",
]
