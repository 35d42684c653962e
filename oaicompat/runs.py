"""Run endpoints of threads and the request and response shapes they use."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from .endpoint import ApiRequest, Pagination
from .threads import ThreadMessage, ThreadRequest

E = TypeVar("E", bound=Enum)


class RunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    FAILED = "failed"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class RequiredActionType(str, Enum):
    SUBMIT_TOOL_OUTPUTS = "submit_tool_outputs"


class RunError(str, Enum):
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


class TruncationStrategy(str, Enum):
    """How a thread is cut down to fit the model's context."""

    AUTO = "auto"
    LAST_MESSAGES = "last_messages"


class RunStepStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    CANCELLING = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"


class RunStepType(str, Enum):
    MESSAGE_CREATION = "message_creation"
    TOOL_CALLS = "tool_calls"


def _enum(cls: type[E], value: Any) -> E | str:
    """The enum member for a value, or the value itself when it is unknown."""
    if value is None:
        return ""
    try:
        return cls(value)
    except ValueError:
        return value


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: _jsonable(v) for k, v in dataclasses.asdict(value).items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    return value


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class SubmitToolOutputs:
    """The tool calls a run waits on."""

    tool_calls: list[Any] = field(default_factory=list)


@dataclass
class RunRequiredAction:
    """The action a run needs before it can continue."""

    type: RequiredActionType | str = ""
    submit_tool_outputs: SubmitToolOutputs | None = None

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> RunRequiredAction:
        outputs = data.get("submit_tool_outputs")
        return cls(
            type=_enum(RequiredActionType, data.get("type")),
            submit_tool_outputs=(
                SubmitToolOutputs(tool_calls=list(outputs.get("tool_calls") or []))
                if outputs is not None
                else None
            ),
        )


@dataclass
class RunLastError:
    """The last error a run or step met."""

    code: RunError | str = ""
    message: str = ""

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any] | None) -> RunLastError | None:
        if data is None:
            return None
        return cls(code=_enum(RunError, data.get("code")), message=data.get("message") or "")


@dataclass
class ThreadTruncationStrategy:
    """The truncation strategy of a thread; last_messages goes with LAST_MESSAGES."""

    type: TruncationStrategy | str = ""
    last_messages: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = _jsonable(self.type)
        if self.last_messages is not None:
            out["last_messages"] = self.last_messages
        return out

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any] | None) -> ThreadTruncationStrategy | None:
        if data is None:
            return None
        return cls(
            type=_enum(TruncationStrategy, data.get("type")),
            last_messages=_optional_int(data.get("last_messages")),
        )


@dataclass
class ResponseFormat:
    """The format the model must output: "text" or "json_object"."""

    type: str = ""


@dataclass
class Run:
    """An execution of an assistant on a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    assistant_id: str = ""
    status: RunStatus | str = ""
    required_action: RunRequiredAction | None = None
    last_error: RunLastError | None = None
    expires_at: int = 0
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str = ""
    instructions: str = ""
    tools: list[Any] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    usage: dict[str, Any] = field(default_factory=dict)
    temperature: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Run:
        action = data.get("required_action")
        temperature = data.get("temperature")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            thread_id=data.get("thread_id") or "",
            assistant_id=data.get("assistant_id") or "",
            status=_enum(RunStatus, data.get("status")),
            required_action=RunRequiredAction._from_dict(action) if action is not None else None,
            last_error=RunLastError._from_dict(data.get("last_error")),
            expires_at=int(data.get("expires_at") or 0),
            started_at=_optional_int(data.get("started_at")),
            cancelled_at=_optional_int(data.get("cancelled_at")),
            failed_at=_optional_int(data.get("failed_at")),
            completed_at=_optional_int(data.get("completed_at")),
            model=data.get("model") or "",
            instructions=data.get("instructions") or "",
            tools=list(data.get("tools") or []),
            file_ids=list(data.get("file_ids") or []),
            metadata=data.get("metadata"),
            usage=dict(data.get("usage") or {}),
            temperature=float(temperature) if temperature is not None else None,
            max_prompt_tokens=int(data.get("max_prompt_tokens") or 0),
            max_completion_tokens=int(data.get("max_completion_tokens") or 0),
            truncation_strategy=ThreadTruncationStrategy._from_dict(
                data.get("truncation_strategy")
            ),
        )


@dataclass
class RunRequest:
    """The body of a run creation request.

    tool_choice and response_format take a string or an object; parallel_tool_calls
    set to False turns off parallel tool calls.
    """

    assistant_id: str
    model: str = ""
    instructions: str = ""
    additional_instructions: str = ""
    additional_messages: list[ThreadMessage] = field(default_factory=list)
    tools: list[Any] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    temperature: float | None = None
    top_p: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None
    tool_choice: Any = None
    response_format: Any = None
    parallel_tool_calls: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"assistant_id": self.assistant_id}
        for key in ("model", "instructions", "additional_instructions"):
            value = getattr(self, key)
            if value:
                out[key] = value
        if self.additional_messages:
            out["additional_messages"] = [m.to_dict() for m in self.additional_messages]
        if self.tools:
            out["tools"] = _jsonable(list(self.tools))
        if self.metadata:
            out["metadata"] = self.metadata
        if self.temperature is not None:
            out["temperature"] = self.temperature
        if self.top_p is not None:
            out["top_p"] = self.top_p
        if self.max_prompt_tokens:
            out["max_prompt_tokens"] = self.max_prompt_tokens
        if self.max_completion_tokens:
            out["max_completion_tokens"] = self.max_completion_tokens
        if self.truncation_strategy is not None:
            out["truncation_strategy"] = self.truncation_strategy.to_dict()
        for key in ("tool_choice", "response_format", "parallel_tool_calls"):
            value = getattr(self, key)
            if value is not None:
                out[key] = _jsonable(value)
        return out


@dataclass
class RunModifyRequest:
    """The body of a run modification request."""

    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"metadata": self.metadata} if self.metadata else {}


@dataclass
class RunList:
    """A list of runs."""

    runs: list[Run] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunList:
        return cls(runs=[Run.from_dict(r) for r in data.get("data") or []])


@dataclass
class ToolOutput:
    """The output of one tool call."""

    tool_call_id: str
    output: Any = None


@dataclass
class SubmitToolOutputsRequest:
    """The body of a tool outputs submission."""

    tool_outputs: list[ToolOutput] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool_outputs": [
                {"tool_call_id": o.tool_call_id, "output": _jsonable(o.output)}
                for o in self.tool_outputs
            ]
        }


@dataclass
class CreateThreadAndRunRequest(RunRequest):
    """A run request that also creates the thread it runs on."""

    thread: ThreadRequest = field(default_factory=ThreadRequest)

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["thread"] = self.thread.to_dict()
        return out


@dataclass
class StepDetailsMessageCreation:
    message_id: str = ""


@dataclass
class StepDetails:
    """What a run step did."""

    type: RunStepType | str = ""
    message_creation: StepDetailsMessageCreation | None = None
    tool_calls: list[Any] = field(default_factory=list)

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any] | None) -> StepDetails:
        data = data or {}
        creation = data.get("message_creation")
        return cls(
            type=_enum(RunStepType, data.get("type")),
            message_creation=(
                StepDetailsMessageCreation(message_id=creation.get("message_id") or "")
                if creation is not None
                else None
            ),
            tool_calls=list(data.get("tool_calls") or []),
        )


@dataclass
class RunStep:
    """One step of a run."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""
    thread_id: str = ""
    run_id: str = ""
    type: RunStepType | str = ""
    status: RunStepStatus | str = ""
    step_details: StepDetails = field(default_factory=StepDetails)
    last_error: RunLastError | None = None
    expired_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStep:
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=int(data.get("created_at") or 0),
            assistant_id=data.get("assistant_id") or "",
            thread_id=data.get("thread_id") or "",
            run_id=data.get("run_id") or "",
            type=_enum(RunStepType, data.get("type")),
            status=_enum(RunStepStatus, data.get("status")),
            step_details=StepDetails._from_dict(data.get("step_details")),
            last_error=RunLastError._from_dict(data.get("last_error")),
            expired_at=_optional_int(data.get("expired_at")),
            cancelled_at=_optional_int(data.get("cancelled_at")),
            failed_at=_optional_int(data.get("failed_at")),
            completed_at=_optional_int(data.get("completed_at")),
            metadata=data.get("metadata"),
        )


@dataclass
class RunStepList:
    """A page of run steps."""

    run_steps: list[RunStep] = field(default_factory=list)
    first_id: str = ""
    last_id: str = ""
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStepList:
        return cls(
            run_steps=[RunStep.from_dict(s) for s in data.get("data") or []],
            first_id=data.get("first_id") or "",
            last_id=data.get("last_id") or "",
            has_more=bool(data.get("has_more")),
        )


def _runs_path(thread_id: str) -> str:
    return f"/threads/{thread_id}/runs"


def create_run(
    thread_id: str, request: RunRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request a new run on a thread."""
    return ApiRequest(
        "POST", _runs_path(thread_id), body=request.to_dict(), assistant_version=assistant_version
    )


def retrieve_run(thread_id: str, run_id: str, assistant_version: str | None = None) -> ApiRequest:
    """Request one run."""
    return ApiRequest(
        "GET", f"{_runs_path(thread_id)}/{run_id}", assistant_version=assistant_version
    )


def modify_run(
    thread_id: str,
    run_id: str,
    request: RunModifyRequest,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request modification of a run."""
    return ApiRequest(
        "POST",
        f"{_runs_path(thread_id)}/{run_id}",
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def list_runs(
    thread_id: str,
    pagination: Pagination | None = None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request the runs of a thread."""
    query = tuple((pagination or Pagination()).to_query())
    return ApiRequest(
        "GET", _runs_path(thread_id), query=query, assistant_version=assistant_version
    )


def submit_tool_outputs(
    thread_id: str,
    run_id: str,
    request: SubmitToolOutputsRequest,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request submission of tool outputs to a waiting run."""
    return ApiRequest(
        "POST",
        f"{_runs_path(thread_id)}/{run_id}/submit_tool_outputs",
        body=request.to_dict(),
        assistant_version=assistant_version,
    )


def cancel_run(thread_id: str, run_id: str, assistant_version: str | None = None) -> ApiRequest:
    """Request cancellation of a run."""
    return ApiRequest(
        "POST", f"{_runs_path(thread_id)}/{run_id}/cancel", assistant_version=assistant_version
    )


def create_thread_and_run(
    request: CreateThreadAndRunRequest, assistant_version: str | None = None
) -> ApiRequest:
    """Request a new thread and a run on it in one call."""
    return ApiRequest(
        "POST", "/threads/runs", body=request.to_dict(), assistant_version=assistant_version
    )


def retrieve_run_step(
    thread_id: str, run_id: str, step_id: str, assistant_version: str | None = None
) -> ApiRequest:
    """Request one step of a run."""
    return ApiRequest(
        "GET",
        f"{_runs_path(thread_id)}/{run_id}/steps/{step_id}",
        assistant_version=assistant_version,
    )


def list_run_steps(
    thread_id: str,
    run_id: str,
    pagination: Pagination | None = None,
    assistant_version: str | None = None,
) -> ApiRequest:
    """Request the steps of a run."""
    query = tuple((pagination or Pagination()).to_query())
    return ApiRequest(
        "GET",
        f"{_runs_path(thread_id)}/{run_id}/steps",
        query=query,
        assistant_version=assistant_version,
    )