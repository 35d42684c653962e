from oaicompat.models_api import (
    FineTuneModelDeleteResponse,
    Model,
    ModelsList,
    delete_fine_tune_model,
    get_model,
    list_models,
)

BASE_URL = "http://localhost/v1"


def test_list_models_request():
    request = list_models()
    assert request.method == "GET"
    assert request.url(BASE_URL) == "http://localhost/v1/models"


def test_list_models_empty_response():
    assert ModelsList.from_dict({"data": None}).models == []


def test_list_models_response():
    parsed = ModelsList.from_dict({"data": [{"id": "text-davinci-003", "owned_by": "openai-internal"}]})
    assert [model.id for model in parsed.models] == ["text-davinci-003"]
    assert parsed.models[0].owned_by == "openai-internal"


def test_get_model_request():
    request = get_model("text-davinci-003")
    assert request.method == "GET"
    assert request.url(BASE_URL) == "http://localhost/v1/models/text-davinci-003"


def test_model_from_dict_with_permissions():
    model = Model.from_dict(
        {
            "created": 1669599635,
            "id": "text-davinci-003",
            "object": "model",
            "permission": [{"id": "modelperm-1", "allow_sampling": True, "group": None}],
            "root": "text-davinci-003",
        }
    )
    assert model.created_at == 1669599635
    assert model.root == "text-davinci-003"
    assert model.parent == ""
    assert model.permission[0].id == "modelperm-1"
    assert model.permission[0].allow_sampling is True
    assert model.permission[0].allow_view is False


def test_empty_model_response():
    assert Model.from_dict({}) == Model()


def test_delete_fine_tune_model_request():
    request = delete_fine_tune_model("fine-tune-model-id")
    assert request.method == "DELETE"
    assert request.url(BASE_URL) == "http://localhost/v1/models/fine-tune-model-id"


def test_delete_response():
    parsed = FineTuneModelDeleteResponse.from_dict(
        {"id": "fine-tune-model-id", "object": "model", "deleted": True}
    )
    assert parsed == FineTuneModelDeleteResponse("fine-tune-model-id", "model", True)