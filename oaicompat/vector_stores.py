"""Vector store endpoints and the request and response shapes they use."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .endpoint import ApiRequest, Pagination

_VECTOR_STORES = "/vector_stores"
_FILES = "/files"
_FILE_BATCHES = "/file_batches"


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class VectorStoreFileCount:
    """How many files of a store or batch are in each state."""

    in_progress: int = 0
    completed: int = 0
    failed: int = 0
    cancelled: int = 0
    total: int = 0

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any] | None) -> VectorStoreFileCount:
        data = data or {}
        return cls(
            in_progress=int(data.get("in_progress") or 0),
            completed=int(data.get("completed") or 0),
            failed=int(data.get("failed") or 0),
            cancelled=int(data.get("cancelled") or 0),
            total=int(data.get("total") or 0),
        )

    def _to_dict(self) -> dict[str, int]:
        return {
            "in_progress": self.in_progress,
            "completed": self.completed,
            "failed": self.failed,
            "cancelled": self.cancelled,
            "total": self.total,
        }


@dataclass
class VectorStoreExpires:
    """When a vector store expires, counted in days from an anchor."""

    anchor: str = ""
    days: int = 0

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any] | None) -> VectorStoreExpires | None:
        if data is None:
            return None
        return cls(anchor=data.get("anchor") or "", days=int(data.get("days") or 0))

    def _to_dict(self) -> dict[str, Any]:
        return {"anchor": self.anchor, "days": self.days}


@dataclass
class VectorStore:
    """A vector store."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    name: str = ""
    usage_bytes: int = 0
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)
    status: str = ""
    expires_after: VectorStoreExpires | None = None
    expires_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStore:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            name=data.get("name") or "",
            usage_bytes=int(data.get("usage_bytes") or 0),
            file_counts=VectorStoreFileCount._from_dict(data.get("file_counts")),
            status=data.get("status") or "",
            expires_after=VectorStoreExpires._from_dict(data.get("expires_after")),
            expires_at=_optional_int(data.get("expires_at")),
            metadata=data.get("metadata"),
        )


@dataclass
class VectorStoreRequest:
    """The body of a vector store creation or modification request."""

    name: str = ""
    file_ids: list[str] = field(default_factory=list)
    expires_after: VectorStoreExpires | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.expires_after is not None:
            out["expires_after"] = self.expires_after._to_dict()
        if self.metadata:
            out["metadata"] = self.metadata
        return out


@dataclass
class VectorStoresList:
    """A page of vector stores."""

    vector_stores: list[VectorStore] = field(default_factory=list)
    last_id: str | None = None
    first_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoresList:
        return cls(
            vector_stores=[VectorStore.from_dict(v) for v in data.get("data") or []],
            last_id=data.get("last_id"),
            first_id=data.get("first_id"),
            has_more=bool(data.get("has_more")),
        )


@dataclass
class VectorStoreDeleteResponse:
    """The deletion status of a vector store."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreDeleteResponse:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


@dataclass
class VectorStoreFile:
    """A file in a vector store."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    usage_bytes: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFile:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            vector_store_id=data.get("vector_store_id") or "",
            usage_bytes=int(data.get("usage_bytes") or 0),
            status=data.get("status") or "",
        )


@dataclass
class VectorStoreFileRequest:
    """The body of a request adding a file to a vector store."""

    file_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id}


@dataclass
class VectorStoreFilesList:
    """A page of vector store files."""

    vector_store_files: list[VectorStoreFile] = field(default_factory=list)
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFilesList:
        return cls(
            vector_store_files=[VectorStoreFile.from_dict(f) for f in data.get("data") or []],
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more")),
        )


@dataclass
class VectorStoreFileBatch:
    """A batch of files being added to a vector store."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    status: str = ""
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFileBatch:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            vector_store_id=data.get("vector_store_id") or "",
            status=data.get("status") or "",
            file_counts=VectorStoreFileCount._from_dict(data.get("file_counts")),
        )


@dataclass
class VectorStoreFileBatchRequest:
    """The body of a file batch creation request."""

    file_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file_ids": list(self.file_ids)}


def _store_path(vector_store_id: str) -> str:
    return f"{_VECTOR_STORES}/{vector_store_id}"


def _query(pagination: Pagination | None) -> tuple[tuple[str, str], ...]:
    return tuple((pagination or Pagination()).to_query())


def create_vector_store(
    request: VectorStoreRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request creation of a vector store."""
    return ApiRequest(
        "POST", _VECTOR_STORES, body=request.to_dict(), assistant_version=assistant_version
    )


def retrieve_vector_store(
    vector_store_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one vector store."""
    return ApiRequest("GET", _store_path(vector_store_id), assistant_version=assistant_version)


def modify_vector_store(
    vector_store_id: str, request: VectorStoreRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request modification of a vector store."""
    return ApiRequest(
        "POST",
        _store_path(vector_store_id),
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def delete_vector_store(vector_store_id: str, assistant_version: str | None = None) -> ApiRequest:
    """Request deletion of a vector store."""
    return ApiRequest("DELETE", _store_path(vector_store_id), assistant_version=assistant_version)


def list_vector_stores(
    pagination: Pagination | None = None, assistant_version: str | None = None
) -> ApiRequest:
    """Request a page of vector stores."""
    return ApiRequest(
        "GET", _VECTOR_STORES, query=_query(pagination), assistant_version=assistant_version
    )


def create_vector_store_file(
    vector_store_id: str, request: VectorStoreFileRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request adding a file to a vector store."""
    return ApiRequest(
        "POST",
        f"{_store_path(vector_store_id)}{_FILES}",
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def retrieve_vector_store_file(
    vector_store_id: str, file_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one file of a vector store."""
    return ApiRequest(
        "GET",
        f"{_store_path(vector_store_id)}{_FILES}/{file_id}",
        assistant_version=assistant_version,
    )


def delete_vector_store_file(
    vector_store_id: str, file_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request removal of a file from a vector store; the response body is not read."""
    return ApiRequest(
        "DELETE",
        f"{_store_path(vector_store_id)}{_FILES}/{file_id}",
        assistant_version=assistant_version,
    )


def list_vector_store_files(
    vector_store_id: str,
    pagination: Pagination | None = None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request a page of the files of a vector store."""
    return ApiRequest(
        "GET",
        f"{_store_path(vector_store_id)}{_FILES}",
        query=_query(pagination),
        assistant_version=assistant_version,
    )


def create_vector_store_file_batch(
    vector_store_id: str,
    request: VectorStoreFileBatchRequest,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request creation of a file batch in a vector store."""
    return ApiRequest(
        "POST",
        f"{_store_path(vector_store_id)}{_FILE_BATCHES}",
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def retrieve_vector_store_file_batch(
    vector_store_id: str, batch_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one file batch of a vector store."""
    return ApiRequest(
        "GET",
        f"{_store_path(vector_store_id)}{_FILE_BATCHES}/{batch_id}",
        assistant_version=assistant_version,
    )


def cancel_vector_store_file_batch(
    vector_store_id: str, batch_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request cancellation of a file batch."""
    return ApiRequest(
        "POST",
        f"{_store_path(vector_store_id)}{_FILE_BATCHES}/{batch_id}/cancel",
        assistant_version=assistant_version,
    )


def list_vector_store_files_in_batch(
    vector_store_id: str,
    batch_id: str,
    pagination: Pagination | None = None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request a page of the files in a file batch."""
    return ApiRequest(
        "GET",
        f"{_store_path(vector_store_id)}{_FILE_BATCHES}/{batch_id}/files",
        query=_query(pagination),
        assistant_version=assistant_version,
    )