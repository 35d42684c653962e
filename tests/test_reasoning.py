from dataclasses import dataclass, replace

import pytest

from oaicompat.reasoning import (
    FixedParametersError,
    LogprobsNotSupportedError,
    MaxTokensDeprecatedError,
    ReasoningModelError,
    ReasoningValidator,
)


@dataclass
class ChatRequest:
    model: str = ""
    max_tokens: int = 0
    logprobs: bool = False
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0


@pytest.mark.parametrize(
    "changes,error",
    [
        ({"max_tokens": 100}, MaxTokensDeprecatedError),
        ({"logprobs": True}, LogprobsNotSupportedError),
        ({"temperature": 0.5}, FixedParametersError),
        ({"top_p": 0.5}, FixedParametersError),
        ({"n": 2}, FixedParametersError),
        ({"presence_penalty": 0.1}, FixedParametersError),
        ({"frequency_penalty": 0.1}, FixedParametersError),
    ],
)
@pytest.mark.parametrize("model", ["o1-mini", "o3-mini"])
def test_reasoning_limits(model, changes, error):
    validator = ReasoningValidator()
    with pytest.raises(error):
        validator.validate(replace(ChatRequest(model=model), **changes))
    assert validator.validate(replace(ChatRequest(model="gpt-4o"), **changes)) is None


def test_fixed_values_are_allowed():
    request = ChatRequest(model="o1", temperature=1, top_p=1, n=1)
    assert ReasoningValidator().validate(request) is None
    with pytest.raises(FixedParametersError):
        ReasoningValidator().validate(replace(request, n=3))


def test_max_tokens_checked_before_logprobs():
    request = ChatRequest(model="o1", max_tokens=10, logprobs=True)
    with pytest.raises(MaxTokensDeprecatedError) as info:
        ReasoningValidator().validate(request)
    assert str(info.value) == "this model is not supported MaxTokens, please use MaxCompletionTokens"


def test_messages_match_source():
    assert str(LogprobsNotSupportedError()) == "this model has beta-limitations, logprobs not supported"
    assert str(FixedParametersError()) == (
        "this model has beta-limitations, temperature, top_p and n are fixed at 1, "
        "while presence_penalty and frequency_penalty are fixed at 0"
    )


def test_errors_share_base_class():
    with pytest.raises(ReasoningModelError):
        ReasoningValidator().validate(ChatRequest(model="o1", logprobs=True))
    assert issubclass(ReasoningModelError, ValueError)


def test_mapping_request_is_accepted():
    with pytest.raises(FixedParametersError):
        ReasoningValidator().validate({"model": "o3", "temperature": 0.2})
    assert ReasoningValidator().validate({"model": "gpt-4", "temperature": 0.2}) is None