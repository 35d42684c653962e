import json

from oaicompat.messages import (
    Message,
    MessageDeletionStatus,
    MessageFile,
    MessageFilesList,
    MessageRequest,
    MessagesList,
    create_message,
    delete_message,
    list_message_files,
    list_messages,
    modify_message,
    retrieve_message,
    retrieve_message_file,
)
from oaicompat.threads import ThreadAttachment, ThreadAttachmentTool

THREAD_ID = "thread_abc123"
MESSAGE_ID = "msg_abc123"
FILE_ID = "file_abc123"
BASE = "https://api.example.com/v1"

MESSAGE_JSON = (
    '{"id":"msg_abc123","object":"thread.message","created_at":1234567890,'
    '"thread_id":"thread_abc123","role":"user","content":[{"type":"text",'
    '"text":{"value":"How does AI work?","annotations":null}}],"file_ids":null,'
    '"assistant_id":"","run_id":"","metadata":null}'
)


def test_create_message_request():
    req = create_message(THREAD_ID, MessageRequest(role="user", content="How does AI work?"), "v2")
    assert req.method == "POST"
    assert req.url(BASE) == BASE + "/threads/thread_abc123/messages"
    assert req.body == {"role": "user", "content": "How does AI work?"}
    assert req.assistant_version == "v2"


def test_message_from_server_response():
    msg = Message.from_dict(json.loads(MESSAGE_JSON))
    assert msg.id == MESSAGE_ID
    assert msg.thread_id == THREAD_ID
    assert msg.content[0].type == "text"
    assert msg.content[0].text.value == "How does AI work?"
    assert msg.assistant_id == ""
    assert msg.file_ids == []
    assert msg.metadata is None


def test_list_messages_without_options():
    req = list_messages(THREAD_ID)
    assert req.method == "GET"
    assert req.url(BASE) == BASE + "/threads/thread_abc123/messages"


def test_list_messages_with_pagination():
    req = list_messages(THREAD_ID, 1, "desc", "obj_foo", "obj_bar", "run_abc123")
    assert req.url(BASE) == (
        BASE + "/threads/thread_abc123/messages"
        "?after=obj_foo&before=obj_bar&limit=1&order=desc&run_id=run_abc123"
    )


def test_messages_list_from_server_response():
    payload = json.loads(
        '{"data":[' + MESSAGE_JSON + '],"object":"list","first_id":"msg_abc123",'
        '"last_id":"msg_abc123","has_more":false}'
    )
    msgs = MessagesList.from_dict(payload)
    assert len(msgs.messages) == 1
    assert msgs.object == "list"
    assert msgs.first_id == MESSAGE_ID
    assert msgs.last_id == MESSAGE_ID
    assert msgs.has_more is False


def test_retrieve_message_request():
    req = retrieve_message(THREAD_ID, MESSAGE_ID)
    assert (req.method, req.path) == ("GET", "/threads/thread_abc123/messages/msg_abc123")


def test_modify_message_request_and_response():
    req = modify_message(THREAD_ID, MESSAGE_ID, {"foo": "bar"})
    assert req.method == "POST"
    assert req.path == "/threads/thread_abc123/messages/msg_abc123"
    assert req.body == {"metadata": {"foo": "bar"}}
    payload = json.loads(MESSAGE_JSON)
    payload["metadata"] = req.body["metadata"]
    assert Message.from_dict(payload).metadata["foo"] == "bar"


def test_delete_message_request_and_response():
    req = delete_message(THREAD_ID, MESSAGE_ID)
    assert (req.method, req.path) == ("DELETE", "/threads/thread_abc123/messages/msg_abc123")
    status = MessageDeletionStatus.from_dict(
        {"id": MESSAGE_ID, "object": "thread.message.deleted", "deleted": True}
    )
    assert status.id == MESSAGE_ID
    assert status.deleted is True


def test_delete_other_message_uses_its_id():
    req = delete_message(THREAD_ID, "not_exist_id")
    assert req.path == "/threads/thread_abc123/messages/not_exist_id"


def test_retrieve_message_file():
    req = retrieve_message_file(THREAD_ID, MESSAGE_ID, FILE_ID)
    assert req.path == "/threads/thread_abc123/messages/msg_abc123/files/file_abc123"
    msg_file = MessageFile.from_dict(
        {
            "id": FILE_ID,
            "object": "thread.message.file",
            "created_at": 1699061776,
            "message_id": MESSAGE_ID,
        }
    )
    assert msg_file.id == FILE_ID
    assert msg_file.created_at == 1699061776


def test_list_message_files():
    req = list_message_files(THREAD_ID, MESSAGE_ID)
    assert (req.method, req.path) == ("GET", "/threads/thread_abc123/messages/msg_abc123/files")
    files = MessageFilesList.from_dict(
        {"data": [{"id": FILE_ID, "object": "thread.message.file", "created_at": 0,
                   "message_id": MESSAGE_ID}]}
    )
    assert len(files.message_files) == 1
    assert files.message_files[0].id == FILE_ID


def test_message_request_optional_fields():
    request = MessageRequest(
        role="user",
        content="hi",
        file_ids=["file_1"],
        metadata={"k": "v"},
        attachments=[ThreadAttachment("file_2", [ThreadAttachmentTool("code_interpreter")])],
    )
    assert request.to_dict() == {
        "role": "user",
        "content": "hi",
        "file_ids": ["file_1"],
        "metadata": {"k": "v"},
        "attachments": [{"file_id": "file_2", "tools": [{"type": "code_interpreter"}]}],
    }