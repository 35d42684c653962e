"""Models endpoints: listing, retrieving and deleting models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .endpoint import ApiRequest


@dataclass
class Permission:
    """Permissions attached to a model."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    allow_create_engine: bool = False
    allow_sampling: bool = False
    allow_logprobs: bool = False
    allow_search_indices: bool = False
    allow_view: bool = False
    allow_fine_tuning: bool = False
    organization: str = ""
    group: Any = None
    is_blocking: bool = False


def _permission_from_dict(data: Mapping[str, Any]) -> Permission:
    return Permission(
        created_at=int(data.get("created") or 0),
        id=data.get("id") or "",
        object=data.get("object") or "",
        allow_create_engine=bool(data.get("allow_create_engine")),
        allow_sampling=bool(data.get("allow_sampling")),
        allow_logprobs=bool(data.get("allow_logprobs")),
        allow_search_indices=bool(data.get("allow_search_indices")),
        allow_view=bool(data.get("allow_view")),
        allow_fine_tuning=bool(data.get("allow_fine_tuning")),
        organization=data.get("organization") or "",
        group=data.get("group"),
        is_blocking=bool(data.get("is_blocking")),
    )


@dataclass
class Model:
    """A model available to the account."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    owned_by: str = ""
    permission: list[Permission] = field(default_factory=list)
    root: str = ""
    parent: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Model:
        return cls(
            created_at=int(data.get("created") or 0),
            id=data.get("id") or "",
            object=data.get("object") or "",
            owned_by=data.get("owned_by") or "",
            permission=[_permission_from_dict(p) for p in data.get("permission") or []],
            root=data.get("root") or "",
            parent=data.get("parent") or "",
        )


@dataclass
class FineTuneModelDeleteResponse:
    """The deletion status of a fine-tuned model."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FineTuneModelDeleteResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


@dataclass
class ModelsList:
    """The models visible to the user or organization."""

    models: list[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModelsList:
        return cls(models=[Model.from_dict(m) for m in data.get("data") or []])


def list_models() -> ApiRequest:
    """Request listing the currently available models."""
    return ApiRequest("GET", "/models")


def get_model(model_id: str) -> ApiRequest:
    """Request one model's details."""
    return ApiRequest("GET", f"/models/{model_id}")


def delete_fine_tune_model(model_id: str) -> ApiRequest:
    """Request deletion of a fine-tuned model."""
    return ApiRequest("DELETE", f"/models/{model_id}")