"""Message endpoints of threads and the shapes they use."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .endpoint import ApiRequest
from .threads import ThreadAttachment

_MESSAGES = "messages"


@dataclass
class MessageText:
    value: str = ""
    annotations: list[Any] | None = None


@dataclass
class ImageFile:
    file_id: str = ""


@dataclass
class ImageURL:
    url: str = ""
    detail: str = ""


@dataclass
class MessageContent:
    """One part of a message's content."""

    type: str = ""
    text: MessageText | None = None
    image_file: ImageFile | None = None
    image_url: ImageURL | None = None


def _content_from_dict(data: Mapping[str, Any]) -> MessageContent:
    text = data.get("text")
    image_file = data.get("image_file")
    image_url = data.get("image_url")
    return MessageContent(
        type=data.get("type") or "",
        text=(
            MessageText(value=text.get("value") or "", annotations=text.get("annotations"))
            if text is not None
            else None
        ),
        image_file=ImageFile(image_file.get("file_id") or "") if image_file is not None else None,
        image_url=(
            ImageURL(url=image_url.get("url") or "", detail=image_url.get("detail") or "")
            if image_url is not None
            else None
        ),
    )


@dataclass
class Message:
    """A message in a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: list[MessageContent] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    assistant_id: str | None = None
    run_id: str | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            thread_id=data.get("thread_id") or "",
            role=data.get("role") or "",
            content=[_content_from_dict(c) for c in data.get("content") or []],
            file_ids=list(data.get("file_ids") or []),
            assistant_id=data.get("assistant_id"),
            run_id=data.get("run_id"),
            metadata=data.get("metadata"),
        )


@dataclass
class MessagesList:
    """A page of messages."""

    messages: list[Message] = field(default_factory=list)
    object: str = ""
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessagesList:
        return cls(
            messages=[Message.from_dict(m) for m in data.get("data") or []],
            object=data.get("object") or "",
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more")),
        )


@dataclass
class MessageRequest:
    """The body of a message creation request."""

    role: str
    content: str
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    attachments: list[ThreadAttachment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = self.metadata
        if self.attachments:
            out["attachments"] = [a.to_dict() for a in self.attachments]
        return out


@dataclass
class MessageFile:
    """A file attached to a message."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageFile:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            message_id=data.get("message_id") or "",
        )


@dataclass
class MessageFilesList:
    message_files: list[MessageFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageFilesList:
        return cls(message_files=[MessageFile.from_dict(f) for f in data.get("data") or []])


@dataclass
class MessageDeletionStatus:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageDeletionStatus:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


def _messages_path(thread_id: str) -> str:
    return f"/threads/{thread_id}/{_MESSAGES}"


def create_message(
    thread_id: str, request: MessageRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request creation of a message in a thread."""
    return ApiRequest(
        "POST",
        _messages_path(thread_id),
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def list_messages(
    thread_id: str,
    limit: int | None = None,
    order: str | None = None,
    after: str | None = None,
    before: str | None = None,
    run_id: str | None = None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request the messages of a thread, with optional paging and run filter."""
    query: list[tuple[str, str]] = []
    if limit is not None:
        query.append(("limit", str(int(limit))))
    for key, value in (("order", order), ("after", after), ("before", before), ("run_id", run_id)):
        if value is not None:
            query.append((key, value))
    return ApiRequest(
        "GET", _messages_path(thread_id), query=tuple(query), assistant_version=assistant_version
    )


def retrieve_message(
    thread_id: str, message_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one message."""
    return ApiRequest(
        "GET", f"{_messages_path(thread_id)}/{message_id}", assistant_version=assistant_version
    )


def modify_message(
    thread_id: str,
    message_id: str,
    metadata: Mapping[str, str] | None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request replacing a message's metadata."""
    return ApiRequest(
        "POST",
        f"{_messages_path(thread_id)}/{message_id}",
        body={"metadata": dict(metadata) if metadata is not None else None},
        assistant_version=assistant_version,
    )


def retrieve_message_file(
    thread_id: str, message_id: str, file_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one file of a message."""
    return ApiRequest(
        "GET",
        f"{_messages_path(thread_id)}/{message_id}/files/{file_id}",
        assistant_version=assistant_version,
    )


def list_message_files(
    thread_id: str, message_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request the files attached to a message."""
    return ApiRequest(
        "GET",
        f"{_messages_path(thread_id)}/{message_id}/files",
        assistant_version=assistant_version,
    )


def delete_message(
    thread_id: str, message_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request deletion of a message."""
    return ApiRequest(
        "DELETE", f"{_messages_path(thread_id)}/{message_id}", assistant_version=assistant_version
    )