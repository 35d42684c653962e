"""Reading server-sent event streams of JSON messages."""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_EMPTY_MESSAGES_LIMIT = 300

_HEADER_DATA = b"data: "
_ERROR_PREFIX = b'data: {"error":'
_DONE = b"[DONE]"


class TooManyEmptyStreamMessagesError(RuntimeError):
    """The stream sent more non-data lines in a row than allowed."""

    def __init__(self, message: str = "stream has sent too many empty messages") -> None:
        super().__init__(message)


class StreamAPIError(Exception):
    """An error object sent by the server inside a stream."""

    def __init__(
        self,
        message: str,
        type: str | None = None,
        param: Any = None,
        code: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.type = type
        self.param = param
        self.code = code


class StreamReader(Generic[T]):
    """Reads newline-terminated event-stream lines and yields decoded data messages.

    ``recv`` and ``recv_raw`` raise EOFError once the stream is over.
    """

    def __init__(
        self,
        lines: Iterable[bytes] | bytes | str,
        decode: Callable[[bytes], T] | None = None,
        empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT,
        on_close: Callable[[], Any] | None = None,
    ) -> None:
        if isinstance(lines, str):
            lines = lines.encode("utf-8")
        if isinstance(lines, (bytes, bytearray)):
            lines = io.BytesIO(bytes(lines))
        self._lines = iter(lines)
        self._decode: Callable[[bytes], Any] = decode or json.loads
        self.empty_messages_limit = empty_messages_limit
        self._on_close = on_close
        self._finished = False
        self._exhausted = False
        self._closed = False
        self._errors = bytearray()

    def recv(self) -> T:
        """Return the next decoded message."""
        return self._decode(self.recv_raw())

    def recv_raw(self) -> bytes:
        """Return the payload of the next data line."""
        if self._finished:
            raise EOFError
        return self._process_lines()

    def close(self) -> None:
        """Release the underlying response, once."""
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            self._on_close()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except EOFError:
                return

    def __enter__(self) -> StreamReader[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _read_line(self) -> bytes | None:
        if self._exhausted:
            return None
        try:
            line = next(self._lines)
        except StopIteration:
            self._exhausted = True
            return None
        if isinstance(line, str):
            line = line.encode("utf-8")
        if not line.endswith(b"\n"):
            # A final line without its terminator ends the stream unread.
            self._exhausted = True
            return None
        return line

    def _process_lines(self) -> bytes:
        empty_messages = 0
        has_error_prefix = False
        while True:
            raw = self._read_line()
            if raw is None or has_error_prefix:
                error = self._unmarshal_error()
                if error is not None:
                    raise error
                if raw is None:
                    raise EOFError
                return b""

            line = raw.strip()
            if line.startswith(_ERROR_PREFIX):
                has_error_prefix = True
            if not line.startswith(_HEADER_DATA) or has_error_prefix:
                if has_error_prefix:
                    line = line.removeprefix(_HEADER_DATA)
                self._errors += line
                empty_messages += 1
                if empty_messages > self.empty_messages_limit:
                    raise TooManyEmptyStreamMessagesError()
                continue

            payload = line[len(_HEADER_DATA):]
            if payload == _DONE:
                self._finished = True
                raise EOFError
            return payload

    def _unmarshal_error(self) -> StreamAPIError | None:
        if not self._errors:
            return None
        try:
            data = json.loads(bytes(self._errors))
        except ValueError:
            return None
        if not isinstance(data, dict) or not isinstance(data.get("error"), dict):
            return None
        error = data["error"]
        return StreamAPIError(
            str(error.get("message") or ""),
            type=error.get("type"),
            param=error.get("param"),
            code=error.get("code"),
        )