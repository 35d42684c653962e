"""Thread endpoints and the request and response shapes they use."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .endpoint import ApiRequest

_THREADS = "/threads"


def _value(item: Any) -> Any:
    return item.value if isinstance(item, Enum) else item


def _put(out: dict[str, Any], key: str, value: Any) -> None:
    """Add a value unless it is empty, like an omitempty field."""
    if value:
        out[key] = list(value) if isinstance(value, (list, tuple)) else value


class ChunkingStrategyType(str, Enum):
    AUTO = "auto"
    STATIC = "static"


@dataclass
class StaticChunkingStrategy:
    """Fixed chunk sizes for splitting files."""

    max_chunk_size_tokens: int = 0
    chunk_overlap_tokens: int = 0


@dataclass
class ChunkingStrategy:
    """How files are split into chunks."""

    type: ChunkingStrategyType | str
    static: StaticChunkingStrategy | None = None


def _chunking_to_dict(strategy: ChunkingStrategy) -> dict[str, Any]:
    out: dict[str, Any] = {"type": _value(strategy.type)}
    if strategy.static is not None:
        out["static"] = {
            "max_chunk_size_tokens": strategy.static.max_chunk_size_tokens,
            "chunk_overlap_tokens": strategy.static.chunk_overlap_tokens,
        }
    return out


@dataclass
class VectorStoreToolResources:
    """A vector store to create alongside a thread."""

    file_ids: list[str] = field(default_factory=list)
    chunking_strategy: ChunkingStrategy | None = None
    metadata: dict[str, Any] | None = None


def _vector_store_to_dict(store: VectorStoreToolResources) -> dict[str, Any]:
    out: dict[str, Any] = {}
    _put(out, "file_ids", store.file_ids)
    if store.chunking_strategy is not None:
        out["chunking_strategy"] = _chunking_to_dict(store.chunking_strategy)
    _put(out, "metadata", store.metadata)
    return out


@dataclass
class CodeInterpreterToolResources:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class FileSearchToolResources:
    vector_store_ids: list[str] = field(default_factory=list)


@dataclass
class ToolResources:
    """Resources made available to the tools of a thread."""

    code_interpreter: CodeInterpreterToolResources | None = None
    file_search: FileSearchToolResources | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.code_interpreter is not None:
            inner: dict[str, Any] = {}
            _put(inner, "file_ids", self.code_interpreter.file_ids)
            out["code_interpreter"] = inner
        if self.file_search is not None:
            inner = {}
            _put(inner, "vector_store_ids", self.file_search.vector_store_ids)
            out["file_search"] = inner
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ToolResources:
        data = data or {}
        code = data.get("code_interpreter")
        search = data.get("file_search")
        return cls(
            code_interpreter=(
                CodeInterpreterToolResources(file_ids=list(code.get("file_ids") or []))
                if code is not None
                else None
            ),
            file_search=(
                FileSearchToolResources(
                    vector_store_ids=list(search.get("vector_store_ids") or [])
                )
                if search is not None
                else None
            ),
        )


@dataclass
class CodeInterpreterToolResourcesRequest:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class FileSearchToolResourcesRequest:
    vector_store_ids: list[str] = field(default_factory=list)
    vector_stores: list[VectorStoreToolResources] = field(default_factory=list)


@dataclass
class ToolResourcesRequest:
    """Tool resources to set up when a thread is created."""

    code_interpreter: CodeInterpreterToolResourcesRequest | None = None
    file_search: FileSearchToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.code_interpreter is not None:
            inner: dict[str, Any] = {}
            _put(inner, "file_ids", self.code_interpreter.file_ids)
            out["code_interpreter"] = inner
        if self.file_search is not None:
            inner = {}
            _put(inner, "vector_store_ids", self.file_search.vector_store_ids)
            if self.file_search.vector_stores:
                inner["vector_stores"] = [
                    _vector_store_to_dict(store) for store in self.file_search.vector_stores
                ]
            out["file_search"] = inner
        return out


class ThreadMessageRole(str, Enum):
    ASSISTANT = "assistant"
    USER = "user"


@dataclass
class ThreadAttachmentTool:
    type: str


@dataclass
class ThreadAttachment:
    """A file attached to a message, and the tools it is added to."""

    file_id: str
    tools: list[ThreadAttachmentTool] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id, "tools": [{"type": t.type} for t in self.tools]}


@dataclass
class ThreadMessage:
    """A message to place in a thread."""

    role: ThreadMessageRole | str
    content: str
    file_ids: list[str] = field(default_factory=list)
    attachments: list[ThreadAttachment] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": _value(self.role), "content": self.content}
        _put(out, "file_ids", self.file_ids)
        if self.attachments:
            out["attachments"] = [a.to_dict() for a in self.attachments]
        _put(out, "metadata", self.metadata)
        return out


@dataclass
class ThreadRequest:
    """The body of a thread creation request."""

    messages: list[ThreadMessage] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.messages:
            out["messages"] = [m.to_dict() for m in self.messages]
        _put(out, "metadata", self.metadata)
        if self.tool_resources is not None:
            out["tool_resources"] = self.tool_resources.to_dict()
        return out


@dataclass
class ModifyThreadRequest:
    """The body of a thread modification request."""

    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"metadata": self.metadata}
        if self.tool_resources is not None:
            out["tool_resources"] = self.tool_resources.to_dict()
        return out


@dataclass
class Thread:
    """A conversation thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources = field(default_factory=ToolResources)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Thread:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            metadata=data.get("metadata"),
            tool_resources=ToolResources.from_dict(data.get("tool_resources")),
        )


@dataclass
class ThreadDeleteResponse:
    """The deletion status of a thread."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadDeleteResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


def create_thread(request: ThreadRequest, assistant_version: str | None = None) -> ApiRequest:
    """Request creation of a thread."""
    return ApiRequest(
        "POST", _THREADS, body=request.to_dict(), assistant_version=assistant_version
    )


def retrieve_thread(thread_id: str, assistant_version: str | None = None) -> ApiRequest:
    """Request a thread."""
    return ApiRequest("GET", f"{_THREADS}/{thread_id}", assistant_version=assistant_version)


def modify_thread(
    thread_id: str, request: ModifyThreadRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request modification of a thread."""
    return ApiRequest(
        "POST",
        f"{_THREADS}/{thread_id}",
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def delete_thread(thread_id: str, assistant_version: str | None = None) -> ApiRequest:
    """Request deletion of a thread."""
    return ApiRequest("DELETE", f"{_THREADS}/{thread_id}", assistant_version=assistant_version)