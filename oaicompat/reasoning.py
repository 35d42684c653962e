"""Checks on requests sent to o-series reasoning models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_REASONING_PREFIXES = ("o1", "o3")


class ReasoningModelError(ValueError):
    """A request uses a parameter that reasoning models do not accept."""

    default_message = "this model has beta-limitations"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MaxTokensDeprecatedError(ReasoningModelError):
    default_message = "this model is not supported MaxTokens, please use MaxCompletionTokens"


class LogprobsNotSupportedError(ReasoningModelError):
    default_message = "this model has beta-limitations, logprobs not supported"


class FixedParametersError(ReasoningModelError):
    default_message = (
        "this model has beta-limitations, temperature, top_p and n are fixed at 1, "
        "while presence_penalty and frequency_penalty are fixed at 0"
    )


def _field(request: Any, name: str) -> Any:
    if isinstance(request, Mapping):
        value = request.get(name)
    else:
        value = getattr(request, name, None)
    return 0 if value is None else value


class ReasoningValidator:
    """Validates chat requests aimed at o1 and o3 series models."""

    def validate(self, request: Any) -> None:
        """Raise a ReasoningModelError if the request breaks a reasoning-model limit."""
        model = _field(request, "model") or ""
        if not str(model).startswith(_REASONING_PREFIXES):
            return

        if _field(request, "max_tokens") > 0:
            raise MaxTokensDeprecatedError()
        if _field(request, "logprobs"):
            raise LogprobsNotSupportedError()
        for name in ("temperature", "top_p", "n"):
            value = _field(request, name)
            if value > 0 and value != 1:
                raise FixedParametersError()
        for name in ("presence_penalty", "frequency_penalty"):
            if _field(request, name) > 0:
                raise FixedParametersError()