"""The moderation endpoint: checking text against usage policies."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .endpoint import ApiRequest

MODERATION_OMNI_LATEST = "omni-moderation-latest"
MODERATION_OMNI_20240926 = "omni-moderation-2024-09-26"
MODERATION_TEXT_STABLE = "text-moderation-stable"
MODERATION_TEXT_LATEST = "text-moderation-latest"
MODERATION_TEXT_001 = "text-moderation-001"  # deprecated

_VALID_MODELS = frozenset(
    {
        MODERATION_OMNI_LATEST,
        MODERATION_OMNI_20240926,
        MODERATION_TEXT_STABLE,
        MODERATION_TEXT_LATEST,
    }
)


class InvalidModerationModelError(ValueError):
    """The requested model cannot be used for moderation."""

    def __init__(self) -> None:
        super().__init__(
            "this model is not supported with moderation, please use "
            "text-moderation-stable or text-moderation-latest instead"
        )


@dataclass
class ModerationRequest:
    """Text to moderate and, optionally, the model to use."""

    input: str = ""
    model: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.input:
            out["input"] = self.input
        if self.model:
            out["model"] = self.model
        return out


def _key(name: str) -> dict[str, str]:
    return {"json": name}


def _from_json(cls: type, data: Mapping[str, Any], convert: type) -> Any:
    values = {}
    for f in dataclasses.fields(cls):
        raw = data.get(f.metadata.get("json", f.name))
        values[f.name] = convert(raw) if raw is not None else convert()
    return cls(**values)


@dataclass
class ResultCategories:
    """Which categories the input was flagged for."""

    hate: bool = field(default=False, metadata=_key("hate"))
    hate_threatening: bool = field(default=False, metadata=_key("hate/threatening"))
    harassment: bool = field(default=False, metadata=_key("harassment"))
    harassment_threatening: bool = field(default=False, metadata=_key("harassment/threatening"))
    self_harm: bool = field(default=False, metadata=_key("self-harm"))
    self_harm_intent: bool = field(default=False, metadata=_key("self-harm/intent"))
    self_harm_instructions: bool = field(default=False, metadata=_key("self-harm/instructions"))
    sexual: bool = field(default=False, metadata=_key("sexual"))
    sexual_minors: bool = field(default=False, metadata=_key("sexual/minors"))
    violence: bool = field(default=False, metadata=_key("violence"))
    violence_graphic: bool = field(default=False, metadata=_key("violence/graphic"))


@dataclass
class ResultCategoryScores:
    """The score the input received in each category."""

    hate: float = field(default=0.0, metadata=_key("hate"))
    hate_threatening: float = field(default=0.0, metadata=_key("hate/threatening"))
    harassment: float = field(default=0.0, metadata=_key("harassment"))
    harassment_threatening: float = field(default=0.0, metadata=_key("harassment/threatening"))
    self_harm: float = field(default=0.0, metadata=_key("self-harm"))
    self_harm_intent: float = field(default=0.0, metadata=_key("self-harm/intent"))
    self_harm_instructions: float = field(default=0.0, metadata=_key("self-harm/instructions"))
    sexual: float = field(default=0.0, metadata=_key("sexual"))
    sexual_minors: float = field(default=0.0, metadata=_key("sexual/minors"))
    violence: float = field(default=0.0, metadata=_key("violence"))
    violence_graphic: float = field(default=0.0, metadata=_key("violence/graphic"))


@dataclass
class Result:
    """One moderation result."""

    categories: ResultCategories = field(default_factory=ResultCategories)
    category_scores: ResultCategoryScores = field(default_factory=ResultCategoryScores)
    flagged: bool = False


@dataclass
class ModerationResponse:
    """The response of the moderation endpoint."""

    id: str = ""
    model: str = ""
    results: list[Result] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModerationResponse:
        results = [
            Result(
                categories=_from_json(ResultCategories, item.get("categories") or {}, bool),
                category_scores=_from_json(
                    ResultCategoryScores, item.get("category_scores") or {}, float
                ),
                flagged=bool(item.get("flagged")),
            )
            for item in data.get("results") or []
        ]
        return cls(id=data.get("id") or "", model=data.get("model") or "", results=results)


def moderations(request: ModerationRequest) -> ApiRequest:
    """Request moderation of a text; an empty model lets the server choose."""
    if request.model and request.model not in _VALID_MODELS:
        raise InvalidModerationModelError()
    return ApiRequest("POST", "/moderations", body=request.to_dict(), model=request.model)