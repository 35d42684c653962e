from datetime import datetime, timedelta, timezone

import pytest

from oaicompat.ratelimit import (
    RateLimitHeaders,
    ResetTime,
    new_rate_limit_headers,
    parse_duration,
)


def test_parse_zero():
    assert parse_duration("0") == timedelta(0)


@pytest.mark.parametrize(
    "left,right",
    [
        ("1h30m", "90m"),
        ("1.5s", "1500ms"),
        ("2s", "2000000us"),
        ("1m", "60s"),
        ("+3s", "3s"),
        ("1h", "3600s"),
    ],
)
def test_equivalent_durations(left, right):
    assert parse_duration(left) == parse_duration(right)


def test_negative_duration_is_mirror():
    assert parse_duration("-2m") == -parse_duration("2m")


def test_components_add_up():
    assert parse_duration("6m0s") == parse_duration("6m") + parse_duration("0s")


@pytest.mark.parametrize("text", ["", "1", "1x", "s", ".s", "-", "1s2", "abc"])
def test_invalid_durations(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_reset_time_string():
    assert str(ResetTime("1s")) == "1s"


def test_reset_time_duration():
    assert ResetTime("6m0s").duration() == parse_duration("6m")


def test_reset_time_unparseable_is_zero():
    assert ResetTime("bogus").duration() == timedelta(0)


def test_reset_time_is_in_the_future_by_duration():
    reset = ResetTime("20s")
    before = datetime.now(timezone.utc)
    moment = reset.time()
    after = datetime.now(timezone.utc)
    assert before + reset.duration() <= moment <= after + reset.duration()


def test_new_rate_limit_headers():
    headers = {
        "x-ratelimit-limit-requests": "60",
        "x-ratelimit-limit-tokens": "150000",
        "x-ratelimit-remaining-requests": "59",
        "x-ratelimit-remaining-tokens": "149984",
        "x-ratelimit-reset-requests": "1s",
        "x-ratelimit-reset-tokens": "6m0s",
    }
    parsed = new_rate_limit_headers(headers)
    assert parsed == RateLimitHeaders(
        limit_requests=60,
        limit_tokens=150000,
        remaining_requests=59,
        remaining_tokens=149984,
        reset_requests=ResetTime("1s"),
        reset_tokens=ResetTime("6m0s"),
    )


def test_header_names_are_case_insensitive():
    parsed = new_rate_limit_headers({"X-RateLimit-Limit-Tokens": "150000"})
    assert parsed.limit_tokens == 150000


def test_first_value_of_repeated_header_wins():
    parsed = new_rate_limit_headers(
        [("x-ratelimit-remaining-requests", "59"), ("X-Ratelimit-Remaining-Requests", "58")]
    )
    assert parsed.remaining_requests == 59


def test_missing_and_invalid_headers_give_defaults():
    parsed = new_rate_limit_headers({"x-ratelimit-limit-requests": "abc"})
    assert parsed == RateLimitHeaders()
    assert parsed.reset_tokens == ""