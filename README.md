# oaicompat

Building blocks for working with OpenAI-compatible HTTP APIs. The package uses only the standard library.

## What it provides

- `oaicompat.endpoint`: `ApiRequest`, `Pagination` and `encode_query`. An `ApiRequest` describes one call: its method, path, query, body, headers, model and assistant version.
- Endpoint functions that return an `ApiRequest`, and dataclasses for the request bodies and the replies:
  - `oaicompat.models_api`: `list_models`, `get_model`, `delete_fine_tune_model`; `Model`, `ModelsList`, `FineTuneModelDeleteResponse`.
  - `oaicompat.moderation`: `moderations`; `ModerationRequest`, `ModerationResponse`.
  - `oaicompat.speech`: `create_speech`; `CreateSpeechRequest`, `SpeechModel`, `SpeechVoice`, `SpeechResponseFormat`.
  - `oaicompat.threads`: `create_thread`, `retrieve_thread`, `modify_thread`, `delete_thread`; `Thread`, `ThreadRequest`, `ModifyThreadRequest` and related types.
  - `oaicompat.messages`: `create_message`, `list_messages`, `retrieve_message`, `modify_message`, `delete_message`, `retrieve_message_file`, `list_message_files`; `Message`, `MessagesList` and related types.
  - `oaicompat.runs`: `create_run`, `retrieve_run`, `modify_run`, `list_runs`, `submit_tool_outputs`, `cancel_run`, `create_thread_and_run`, `retrieve_run_step`, `list_run_steps`; `Run`, `RunRequest`, `RunStep` and related types.
  - `oaicompat.vector_stores`: create, retrieve, modify, delete and list vector stores, their files and their file batches; `VectorStore`, `VectorStoreRequest` and related types.
- `oaicompat.streaming`: `StreamReader`, which reads server-sent event lines.
- `oaicompat.ratelimit`: `new_rate_limit_headers`, `RateLimitHeaders`, `ResetTime`, `parse_duration`.
- `oaicompat.reasoning`: `ReasoningValidator`, which checks requests sent to reasoning models.
- `oaicompat.jsonschema`: `Definition`, `DataType`, `generate_schema_for_type`, `validate`, `verify_schema_and_unmarshal`.

## Install

```
pip install oaicompat
```

## Building a request

```python
from oaicompat.endpoint import Pagination
from oaicompat.runs import list_runs

req = list_runs("thread_abc123", Pagination(limit=20, order="desc"), "v2")
print(req.method, req.url("https://api.example.com/v1"))
# GET https://api.example.com/v1/threads/thread_abc123/runs?limit=20&order=desc
```

- `ApiRequest.url(base_url)` joins the base URL and the path. It then adds the query, sorted by key.
- `req.body` is plain JSON-ready data. Fields left empty are not included in it.
- `req.headers` holds only the headers the endpoint sets itself. For example, `create_speech` sets `Content-Type: application/json`.
- The assistant version is kept in `req.assistant_version`, and the model in `req.model`. Your HTTP layer decides how to send them.

Every reply type has a `from_dict` class method that builds it from decoded JSON, for example `RunList.from_dict(payload)`. Known enum values, such as a run's status, become enum members. Values the package does not know are kept as plain strings.

## Moderation

```python
from oaicompat.moderation import ModerationRequest, moderations

req = moderations(ModerationRequest(input="some text", model="text-moderation-stable"))
```

When the request names a model that is not a supported moderation model, `moderations` raises `InvalidModerationModelError`. An empty model is allowed.

## Reading a stream

```python
import json
from oaicompat.streaming import StreamReader

with StreamReader(response_lines, json.loads, 300, None) as stream:
    for chunk in stream:
        print(chunk)
```

- `response_lines` may be an iterable of newline-terminated lines (bytes or str), or a whole body as bytes or str.
- `recv()` returns the next decoded message. `recv_raw()` returns the next data payload as bytes.
- Both raise `EOFError` at `data: [DONE]` or when the lines run out. Iteration stops at the same point.
- Lines that are not data lines are counted. When there are more of them in a row than the limit allows, `TooManyEmptyStreamMessagesError` is raised.
- If the server sends an error object, `StreamAPIError` is raised. It carries `message`, `type`, `param` and `code`.
- `close()` calls the `on_close` callback, at most once.

## Rate limits

`new_rate_limit_headers(headers)` reads the `x-ratelimit-*` headers. It takes a mapping or a list of pairs, and header names are matched without regard to case. Values that cannot be read become 0.

`ResetTime.duration()` parses values such as `"6m0s"` and returns a `timedelta`; a value it cannot parse gives zero. `ResetTime.time()` returns the UTC moment of the reset, counted from now.

## Reasoning models

`ReasoningValidator().validate(request)` accepts a mapping or an object with the fields `model`, `max_tokens`, `logprobs`, `temperature`, `top_p`, `n`, `presence_penalty` and `frequency_penalty`. It checks only models whose name starts with `o1` or `o3`. It raises one of the following, all subclasses of `ReasoningModelError`:

- `MaxTokensDeprecatedError`
- `LogprobsNotSupportedError`
- `FixedParametersError`

## JSON schema

```python
from dataclasses import dataclass
from oaicompat.jsonschema.definition import generate_schema_for_type

@dataclass
class Cases:
    pascal_case: str
    snake_case: str

schema = generate_schema_for_type(Cases)
print(schema.to_json())
data = schema.unmarshal('{"pascal_case": "HelloWorld", "snake_case": "hello_world"}')
```

- `generate_schema_for_type` handles `bool`, `int`, `float`, `str`, sequences, `Optional` and dataclasses.
- Field metadata keys `json`, `omitempty`, `required` and `description` adjust the generated properties.
- Annotations must be real types, not strings. A dataclass defined under `from __future__ import annotations` is rejected with `TypeError`, and so are mappings.
- `unmarshal` and `verify_schema_and_unmarshal` return the decoded data. They raise `SchemaValidationError` when the data does not match the schema.

## What it does not do

- The package sends no HTTP requests. It opens no connections and handles no authentication: pair it with an HTTP client of your own.
- It has no types or builders for chat or text completions, embeddings, files, images, audio transcription or assistants. `ReasoningValidator` and `StreamReader` work on whatever requests and decoders you pass them.
- There is no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```